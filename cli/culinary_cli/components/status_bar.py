"""Status bar component."""

from textual.widgets import Static
from textual.reactive import reactive


class StatusBar(Static):
    """Status bar showing service connection, favorites and notifications."""

    is_online: reactive[bool] = reactive(False)
    favorites_count: reactive[int] = reactive(0)
    is_busy: reactive[bool] = reactive(False)
    message: reactive[str] = reactive("")
    is_error: reactive[bool] = reactive(False)

    _message_timer = None

    def render(self) -> str:
        parts = []

        # Connection status
        if self.is_online:
            parts.append("[green]● Online[/]")
        else:
            parts.append("[red]● Offline[/]")

        # Favorites badge
        if self.favorites_count > 0:
            parts.append(f"[red]♥ {self.favorites_count}[/]")

        if self.is_busy:
            parts.append("[yellow]⟳ Adding...[/]")

        # Notification
        if self.message:
            color = "red" if self.is_error else "cyan"
            parts.append(f"[{color}]{self.message}[/]")

        return " │ ".join(parts)

    def set_message(self, message: str, duration: float = 3.0, error: bool = False) -> None:
        """Show a temporary message."""
        self.message = message
        self.is_error = error
        if self._message_timer is not None:
            self._message_timer.stop()
            self._message_timer = None
        if duration > 0:
            self._message_timer = self.set_timer(duration, self._clear_message)

    def _clear_message(self) -> None:
        self._message_timer = None
        self.message = ""
        self.is_error = False
