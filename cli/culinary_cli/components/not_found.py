"""Page-not-found screen."""

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.screen import ModalScreen
from textual.widgets import Label, Static


class NotFoundScreen(ModalScreen[None]):
    """Shown when the address points anywhere but the recipe listing."""

    BINDINGS = [
        Binding("h", "go_home", "Return Home"),
        Binding("escape", "go_home", "Return Home", show=False),
    ]

    def __init__(self, path: str) -> None:
        super().__init__()
        self.path = path

    def compose(self) -> ComposeResult:
        with Vertical(id="not-found"):
            yield Label("404", id="not-found-code")
            yield Label("Page Not Found", id="not-found-title")
            yield Static(
                f"Sorry, we couldn't find [bold]{self.path}[/]. "
                "It might have been moved or deleted.",
                id="not-found-message",
            )
            yield Label("Press h to return home", id="not-found-hint")

    def action_go_home(self) -> None:
        self.dismiss(None)
        self.app.location.push("/")
