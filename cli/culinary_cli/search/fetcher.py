"""Suggestion fetching with loading/result/error reporting."""

from typing import Callable, Optional, Protocol, Sequence

import structlog

from culinary_cli.api import Suggestion
from culinary_cli.search.state import MIN_FETCH_LENGTH, SearchState

logger = structlog.get_logger(__name__)


class SuggestionService(Protocol):
    async def get_recipe_suggestions(self, query: str) -> Sequence[Suggestion]: ...


class SuggestionFetcher:
    """Queries the suggestion service and writes the outcome into ``state``.

    Fetches are neither serialized nor cancelled. By default whichever
    response arrives last wins, even if it answers an older query. With
    ``discard_stale`` every fetch is tagged with a generation number and
    only the newest generation may touch the state.
    """

    def __init__(
        self,
        service: SuggestionService,
        state: SearchState,
        *,
        discard_stale: bool = False,
        on_change: Optional[Callable[[], None]] = None,
    ):
        self.service = service
        self.state = state
        self.discard_stale = discard_stale
        self.on_change = on_change
        self._generation = 0

    def _changed(self) -> None:
        if self.on_change is not None:
            self.on_change()

    def _is_current(self, generation: int) -> bool:
        return not self.discard_stale or generation == self._generation

    def invalidate(self) -> None:
        """Supersede every fetch still in flight."""
        self._generation += 1
        if self.discard_stale:
            self.state.loading = False

    async def fetch(self, query: str) -> None:
        self.invalidate()
        generation = self._generation

        if not query.strip() or len(query) < MIN_FETCH_LENGTH:
            self.state.replace_suggestions(())
            self.state.close_panel()
            self._changed()
            return

        self.state.loading = True
        self._changed()
        try:
            results = await self.service.get_recipe_suggestions(query)
        except Exception:
            logger.error("Error fetching suggestions", query=query, exc_info=True)
            if self._is_current(generation):
                self.state.replace_suggestions(())
        else:
            if self._is_current(generation):
                self.state.replace_suggestions(tuple(results))
                self.state.show_suggestions = True
            else:
                logger.debug("Discarding stale suggestions", query=query)
        finally:
            if self._is_current(generation):
                self.state.loading = False
            self._changed()
