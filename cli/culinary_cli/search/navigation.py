"""Keyboard highlight over the suggestion list."""

from typing import Optional

from culinary_cli.api import Suggestion
from culinary_cli.search.state import SearchState


class NavigationStateMachine:
    """Tracks which suggestion is highlighted.

    ``highlighted_index`` ranges over ``[-1, len(suggestions) - 1]`` where
    ``-1`` means nothing is highlighted.
    """

    def __init__(self, state: SearchState):
        self.state = state

    @property
    def index(self) -> int:
        return self.state.highlighted_index

    @property
    def highlighted(self) -> Optional[Suggestion]:
        if 0 <= self.index < len(self.state.suggestions):
            return self.state.suggestions[self.index]
        return None

    def reset(self) -> None:
        self.state.highlighted_index = -1

    def move_down(self) -> None:
        count = len(self.state.suggestions)
        if count == 0:
            return
        self.state.highlighted_index = min(self.index + 1, count - 1)

    def move_up(self) -> None:
        self.state.highlighted_index = max(self.index - 1, -1)

    def hover(self, index: int) -> None:
        """Pointer entered the row at ``index``."""
        if 0 <= index < len(self.state.suggestions):
            self.state.highlighted_index = index
