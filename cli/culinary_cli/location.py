"""The app's navigable address: a path plus query parameters."""

from typing import Callable, Optional, Union

import httpx
import structlog

logger = structlog.get_logger(__name__)

Listener = Callable[["Location"], None]


def build_url(path: str, params: httpx.QueryParams) -> str:
    query = str(params)
    return f"{path}?{query}" if query else path


class Location:
    """Single, app-wide navigable address.

    ``push`` is the only way to navigate. Subscribers are notified after
    every push, in subscription order.
    """

    def __init__(
        self,
        path: str = "/",
        params: Optional[Union[httpx.QueryParams, dict, str]] = None,
    ):
        self.path = path or "/"
        self.params = httpx.QueryParams(params or {})
        self.history: list[str] = []
        self._listeners: list[Listener] = []

    @classmethod
    def parse(cls, url: str) -> "Location":
        parsed = httpx.URL(url)
        return cls(parsed.path or "/", parsed.params)

    @property
    def url(self) -> str:
        return build_url(self.path, self.params)

    def push(self, url: str) -> None:
        """Navigate to ``url`` and notify subscribers."""
        parsed = httpx.URL(url)
        self.path = parsed.path or "/"
        self.params = parsed.params
        self.history.append(self.url)
        logger.debug("Navigated", url=self.url)

        for listener in list(self._listeners):
            listener(self)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener``; returns a callable that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe
