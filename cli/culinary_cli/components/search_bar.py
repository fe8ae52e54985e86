"""Search bar component with an autocomplete suggestion panel."""

from typing import Any, Optional

from rich.text import Text
from textual import events
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.message import Message
from textual.widget import Widget
from textual.widgets import Button, Input, Static

from culinary_cli.api import Suggestion
from culinary_cli.search import PointerEvents, SearchController, SearchState, highlight_match


class SuggestionRow(Static):
    """One suggestion in the panel."""

    class Hovered(Message):
        """Emitted when the pointer enters the row."""

        def __init__(self, index: int) -> None:
            self.index = index
            super().__init__()

    class Chosen(Message):
        """Emitted when the row is clicked."""

        def __init__(self, suggestion: Suggestion) -> None:
            self.suggestion = suggestion
            super().__init__()

    def __init__(self, suggestion: Suggestion, index: int, term: str) -> None:
        super().__init__(self._render_row(suggestion, term), classes="suggestion-row")
        self.suggestion = suggestion
        self.index = index

    @staticmethod
    def _render_row(suggestion: Suggestion, term: str) -> Text:
        text = highlight_match(suggestion.title, term)
        if suggestion.category:
            text.append("\n  in ", style="dim")
            text.append_text(highlight_match(suggestion.category, term))
        return text

    def on_enter(self, event: events.Enter) -> None:
        self.post_message(self.Hovered(self.index))

    def on_click(self, event: events.Click) -> None:
        event.stop()
        self.post_message(self.Chosen(self.suggestion))


class SuggestionPanel(VerticalScroll):
    """Dropdown listing the current suggestions."""

    def __init__(self, id: str | None = None) -> None:
        super().__init__(id=id)
        self._content_key: Optional[tuple] = None

    def refresh_suggestions(self, state: SearchState) -> None:
        """Render ``state``; rows are rebuilt only when their content changed."""
        key = (state.loading, state.query, state.suggestions)
        if key != self._content_key:
            self._content_key = key
            self.remove_children()
            if state.loading:
                self.mount(Static("Loading suggestions...", classes="suggestion-status"))
            elif state.suggestions:
                self.mount(
                    *[
                        SuggestionRow(suggestion, index, state.query)
                        for index, suggestion in enumerate(state.suggestions)
                    ]
                )
            else:
                self.mount(
                    Static("No matching suggestions found", classes="suggestion-status")
                )

        for row in self.query(SuggestionRow):
            row.set_class(row.index == state.highlighted_index, "-highlighted")


class SearchBar(Widget):
    """Collapsible search input driven by a :class:`SearchController`."""

    BINDINGS = [
        Binding("down", "highlight_next", "Next suggestion", show=False),
        Binding("up", "highlight_previous", "Previous suggestion", show=False),
        Binding("escape", "close_suggestions", "Close suggestions", show=False),
    ]

    def __init__(
        self,
        controller: SearchController,
        pointer_events: PointerEvents,
        placeholder: str = "Search recipes...",
        id: str | None = None,
    ) -> None:
        super().__init__(id=id)
        self.controller = controller
        self.pointer_events = pointer_events
        self.placeholder = placeholder
        self._unsubscribe = None

    def compose(self) -> ComposeResult:
        with Vertical(id="search-area"):
            with Horizontal(id="search-row"):
                yield Input(
                    value=self.controller.state.query,
                    placeholder=self.placeholder,
                    id="search-input",
                )
                yield Button("x", id="search-clear", variant="default")
            yield SuggestionPanel(id="suggestion-panel")
        yield Button("Search", id="search-toggle", variant="primary")

    @property
    def search_input(self) -> Input:
        return self.query_one("#search-input", Input)

    @property
    def suggestion_panel(self) -> SuggestionPanel:
        return self.query_one("#suggestion-panel", SuggestionPanel)

    def on_mount(self) -> None:
        """Attach to the controller and start observing outside clicks."""
        self._unsubscribe = self.controller.subscribe(self._render_state)
        self.controller.mount(self.pointer_events, self._is_inside)
        self._render_state(self.controller.state)

    def on_unmount(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
        self.controller.unmount()

    def _is_inside(self, target: Any) -> bool:
        if target is None:
            return False
        nodes = target.ancestors_with_self
        return self.search_input in nodes or self.suggestion_panel in nodes

    def _render_state(self, state: SearchState) -> None:
        area = self.query_one("#search-area")
        became_visible = state.visible and not area.display
        area.display = state.visible
        if not state.visible and self.search_input.has_focus:
            self.app.set_focus(None)

        if self.search_input.value != state.query:
            with self.search_input.prevent(Input.Changed):
                self.search_input.value = state.query

        self.query_one("#search-clear", Button).display = bool(state.query)

        self.suggestion_panel.display = state.panel_rendered
        if state.panel_rendered:
            self.suggestion_panel.refresh_suggestions(state)

        if became_visible:
            self.search_input.focus()

    def focus_input(self) -> None:
        """Show the bar if needed and focus its input."""
        if not self.controller.state.visible:
            self.controller.on_toggle_visibility()
        self.search_input.focus()

    # ------------------------------------------------------------------
    # Events into the controller
    # ------------------------------------------------------------------

    def on_input_changed(self, event: Input.Changed) -> None:
        event.stop()
        self.controller.on_input_change(event.value)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Handle Enter key."""
        event.stop()
        self.controller.on_key_down("enter")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        if event.button.id == "search-clear":
            self.controller.on_clear()
        elif event.button.id == "search-toggle":
            self.controller.on_toggle_visibility()

    def on_suggestion_row_hovered(self, event: SuggestionRow.Hovered) -> None:
        self.controller.on_mouse_enter(event.index)

    def on_suggestion_row_chosen(self, event: SuggestionRow.Chosen) -> None:
        self.controller.on_suggestion_click(event.suggestion)

    def action_highlight_next(self) -> None:
        self.controller.on_key_down("down")

    def action_highlight_previous(self) -> None:
        self.controller.on_key_down("up")

    def action_close_suggestions(self) -> None:
        self.controller.on_key_down("escape")
