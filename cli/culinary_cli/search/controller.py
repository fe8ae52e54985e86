"""Incremental search controller: the orchestrator behind the search bar."""

import asyncio
from typing import Any, Callable, Optional

import structlog

from culinary_cli.api import Suggestion
from culinary_cli.location import Location
from culinary_cli.search.fetcher import SuggestionFetcher, SuggestionService
from culinary_cli.search.lifecycle import ControlLifecycle, PointerEvents
from culinary_cli.search.navigation import NavigationStateMachine
from culinary_cli.search.state import MIN_PANEL_LENGTH, SearchState
from culinary_cli.search.url_sync import SEARCH_PARAM, TimerFactory, UrlSyncScheduler

logger = structlog.get_logger(__name__)

# Terminal key names mapped onto the names the controller dispatches on.
KEY_ALIASES = {
    "down": "ArrowDown",
    "up": "ArrowUp",
    "enter": "Enter",
    "escape": "Escape",
}


class SearchController:
    """Owns the search state and is its only writer.

    Entry points: :meth:`on_input_change`, :meth:`on_key_down`,
    :meth:`on_suggestion_click`, :meth:`on_mouse_enter`,
    :meth:`on_toggle_visibility` and :meth:`on_clear`. Subscribers are
    called after every state change so a view can re-render.
    """

    def __init__(
        self,
        service: SuggestionService,
        location: Location,
        *,
        url_sync_delay: float = 0.5,
        discard_stale: bool = False,
        set_timer: Optional[TimerFactory] = None,
    ):
        self.location = location
        self.state = SearchState(query=location.params.get(SEARCH_PARAM, ""))
        self.navigation = NavigationStateMachine(self.state)
        self.scheduler = UrlSyncScheduler(location, url_sync_delay, set_timer)
        self.fetcher = SuggestionFetcher(
            service,
            self.state,
            discard_stale=discard_stale,
            on_change=self._notify,
        )
        self._tasks: set[asyncio.Task] = set()
        self._listeners: list[Callable[[SearchState], None]] = []
        self._lifecycle: Optional[ControlLifecycle] = None

    # ------------------------------------------------------------------
    # Subscriptions
    # ------------------------------------------------------------------

    def subscribe(self, listener: Callable[[SearchState], None]) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self.state)

    # ------------------------------------------------------------------
    # Fetch tasks
    # ------------------------------------------------------------------

    @property
    def fetches_in_flight(self) -> int:
        return len(self._tasks)

    def _spawn_fetch(self, query: str) -> None:
        task = asyncio.get_running_loop().create_task(self.fetcher.fetch(query))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    def _cancel_fetches(self) -> None:
        for task in list(self._tasks):
            task.cancel()
        self._tasks.clear()

    async def wait_for_fetches(self) -> None:
        """Wait until every fetch issued so far has completed."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    # ------------------------------------------------------------------
    # Entry points
    # ------------------------------------------------------------------

    def on_input_change(self, text: str) -> None:
        self.state.query = text
        self.navigation.reset()

        if len(text) >= MIN_PANEL_LENGTH:
            self.state.show_suggestions = True
            self._spawn_fetch(text)
        else:
            self.state.show_suggestions = False
            self.state.replace_suggestions(())
            if self.fetcher.discard_stale:
                self.fetcher.invalidate()

        self.scheduler.schedule(text)
        self._notify()

    def on_suggestion_accepted(self, suggestion: Suggestion) -> None:
        """Commit ``suggestion``: it becomes the query and is navigated to at once."""
        self.state.query = suggestion.title
        self.state.close_panel()
        if self.fetcher.discard_stale:
            self.fetcher.invalidate()
        self.scheduler.navigate_now(suggestion.title)
        self._notify()

    def on_suggestion_click(self, suggestion: Suggestion) -> None:
        self.on_suggestion_accepted(suggestion)

    def on_clear(self) -> None:
        """Empty the query, collapse the bar and drop ``search``/``page`` at once."""
        self.state.query = ""
        self.state.replace_suggestions(())
        self.state.close_panel()
        self.state.visible = False
        if self.fetcher.discard_stale:
            self.fetcher.invalidate()
        self.scheduler.navigate_now(None)
        self._notify()

    def on_key_down(self, key: str) -> bool:
        """
        Apply a keyboard transition.

        Returns True when the key was consumed. Keys are ignored while the
        panel is closed.
        """
        if not self.state.show_suggestions:
            return False

        key = KEY_ALIASES.get(key, key)
        if key == "ArrowDown":
            self.navigation.move_down()
        elif key == "ArrowUp":
            self.navigation.move_up()
        elif key == "Enter":
            highlighted = self.navigation.highlighted
            if highlighted is not None:
                self.on_suggestion_accepted(highlighted)
                return True
            self.state.close_panel()
            self.scheduler.schedule(self.state.query)
        elif key == "Escape":
            self.state.close_panel()
        else:
            return False

        self._notify()
        return True

    def on_mouse_enter(self, index: int) -> None:
        self.navigation.hover(index)
        self._notify()

    def on_toggle_visibility(self) -> None:
        self.state.visible = not self.state.visible
        if not self.state.visible:
            self.state.close_panel()
        self._notify()

    def _on_outside_pointer(self) -> None:
        if self.state.show_suggestions:
            self.state.close_panel()
            self._notify()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    @property
    def mounted(self) -> bool:
        return self._lifecycle is not None and self._lifecycle.mounted

    def mount(self, pointer_events: PointerEvents, is_inside: Callable[[Any], bool]) -> None:
        """Start observing pointer-downs; ``is_inside`` tells input/panel targets apart."""
        if self.mounted:
            return
        self._lifecycle = ControlLifecycle(
            pointer_events,
            is_inside,
            self._on_outside_pointer,
            release=[self.scheduler.cancel, self._cancel_fetches],
        )
        self._lifecycle.mount()

    def unmount(self) -> None:
        """Release every timer, listener and in-flight fetch."""
        if self._lifecycle is not None:
            self._lifecycle.unmount()
            self._lifecycle = None
