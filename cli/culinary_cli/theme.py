"""Persisted light/dark preference."""

import json
from pathlib import Path
from typing import Optional

import structlog

logger = structlog.get_logger(__name__)

DARK_THEME = "textual-dark"
LIGHT_THEME = "textual-light"


class ThemeStore:
    """Reads and writes ``{"theme": "dark" | "light"}``."""

    def __init__(self, path: Path):
        self.path = path

    def load(self) -> Optional[bool]:
        """Saved preference as ``dark``; ``None`` when nothing usable is stored."""
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return None
        except (OSError, ValueError):
            logger.warning("Ignoring unreadable theme file", path=str(self.path))
            return None

        theme = data.get("theme") if isinstance(data, dict) else None
        if theme not in ("dark", "light"):
            return None
        return theme == "dark"

    def save(self, dark: bool) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(
            json.dumps({"theme": "dark" if dark else "light"}),
            encoding="utf-8",
        )
