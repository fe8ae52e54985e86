"""Search control state shared by the controller and its collaborators."""

from dataclasses import dataclass

from culinary_cli.api import Suggestion

# Typing this many characters opens the suggestion panel.
MIN_PANEL_LENGTH = 2
# Suggestions are fetched, and the panel rendered, from this length on.
MIN_FETCH_LENGTH = 3


@dataclass
class SearchState:
    """Everything the search control renders.

    Owned by :class:`~culinary_cli.search.controller.SearchController`;
    collaborators receive it by reference and mutate it only through the
    helpers below.
    """

    query: str = ""
    show_suggestions: bool = False
    loading: bool = False
    suggestions: tuple[Suggestion, ...] = ()
    highlighted_index: int = -1
    visible: bool = False

    @property
    def panel_rendered(self) -> bool:
        return self.show_suggestions and len(self.query) >= MIN_FETCH_LENGTH

    def replace_suggestions(self, suggestions: tuple[Suggestion, ...]) -> None:
        self.suggestions = tuple(suggestions)
        self.highlighted_index = -1

    def close_panel(self) -> None:
        self.show_suggestions = False
        self.highlighted_index = -1
