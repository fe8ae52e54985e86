"""Outside-pointer handling and guaranteed teardown for the search control."""

from contextlib import ExitStack
from typing import Any, Callable, Iterable

import structlog

logger = structlog.get_logger(__name__)

PointerListener = Callable[[Any], None]


class PointerEvents:
    """Document-wide pointer-down observers.

    The app dispatches every pointer-down here with the widget under the
    pointer as ``target``.
    """

    def __init__(self):
        self._listeners: list[PointerListener] = []

    def __len__(self) -> int:
        return len(self._listeners)

    def add_listener(self, listener: PointerListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: PointerListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def dispatch(self, target: Any) -> None:
        for listener in list(self._listeners):
            listener(target)


class ControlLifecycle:
    """Acquire/release pair for everything a mounted control registers.

    ``mount`` subscribes to pointer-downs; ``unmount`` unsubscribes and runs
    every release callback, even when an earlier one raises. Usable as a
    context manager.
    """

    def __init__(
        self,
        pointer_events: PointerEvents,
        is_inside: Callable[[Any], bool],
        on_outside: Callable[[], None],
        release: Iterable[Callable[[], None]] = (),
    ):
        self.pointer_events = pointer_events
        self.is_inside = is_inside
        self.on_outside = on_outside
        self.release = list(release)
        self.mounted = False

    def _on_pointer_down(self, target: Any) -> None:
        if not self.is_inside(target):
            self.on_outside()

    def mount(self) -> None:
        if self.mounted:
            return
        self.pointer_events.add_listener(self._on_pointer_down)
        self.mounted = True
        logger.debug("Search control mounted")

    def unmount(self) -> None:
        if not self.mounted:
            return
        self.mounted = False
        with ExitStack() as stack:
            for callback in reversed(self.release):
                stack.callback(callback)
            self.pointer_events.remove_listener(self._on_pointer_down)
        logger.debug("Search control released")

    def __enter__(self):
        self.mount()
        return self

    def __exit__(self, *args):
        self.unmount()
