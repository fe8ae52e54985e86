"""Debounced writes of the search query into the app's address."""

import asyncio
from typing import Callable, Optional, Protocol

import structlog

from culinary_cli.location import Location, build_url

logger = structlog.get_logger(__name__)

SEARCH_PARAM = "search"
PAGE_PARAM = "page"


class TimerHandle(Protocol):
    def stop(self) -> None: ...


TimerFactory = Callable[[float, Callable[[], None]], TimerHandle]


class LoopTimer:
    """``TimerHandle`` over ``loop.call_later``."""

    def __init__(self, handle: asyncio.TimerHandle):
        self._handle = handle

    def stop(self) -> None:
        self._handle.cancel()


def loop_timer(delay: float, callback: Callable[[], None]) -> LoopTimer:
    """Default timer factory: schedule ``callback`` on the running loop."""
    loop = asyncio.get_running_loop()
    return LoopTimer(loop.call_later(delay, callback))


def search_url(location: Location, search: Optional[str]) -> str:
    """Home address for ``search`` keeping unrelated params, always dropping ``page``."""
    params = location.params
    if search:
        params = params.set(SEARCH_PARAM, search)
    else:
        params = params.remove(SEARCH_PARAM)
    params = params.remove(PAGE_PARAM)
    return build_url("/", params)


class UrlSyncScheduler:
    """Writes the query into ``location`` once typing has paused.

    At most one timer is outstanding; every :meth:`schedule` call replaces
    the previous one.
    """

    def __init__(
        self,
        location: Location,
        delay: float = 0.5,
        set_timer: Optional[TimerFactory] = None,
    ):
        self.location = location
        self.delay = delay
        self._set_timer = set_timer or loop_timer
        self._timer: Optional[TimerHandle] = None

    @property
    def pending(self) -> bool:
        return self._timer is not None

    def schedule(self, query: str) -> None:
        """(Re)arm the timer for ``query``."""
        self.cancel()
        self._timer = self._set_timer(self.delay, lambda: self._fire(query))

    def cancel(self) -> None:
        if self._timer is not None:
            self._timer.stop()
            self._timer = None

    def navigate_now(self, search: Optional[str]) -> None:
        """Cancel any pending write and navigate immediately."""
        self.cancel()
        self.location.push(search_url(self.location, search))

    def _fire(self, query: str) -> None:
        self._timer = None
        logger.debug("Syncing search to address", query=query)
        self.location.push(search_url(self.location, query.strip() or None))
