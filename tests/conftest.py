"""Shared test fixtures for Culinary Haven."""

from __future__ import annotations

import asyncio
from typing import Callable

import pytest

from culinary_cli.api import Suggestion
from culinary_cli.location import Location
from culinary_cli.search import PointerEvents, SearchController

SUGGESTIONS = [
    Suggestion(id="r001", title="Pizza Dough", category="Baking"),
    Suggestion(id="r002", title="Margherita Pizza", category="Italian"),
    Suggestion(id="r003", title="Pizza Bianca", category="Italian"),
    Suggestion(id="r006", title="Chicken Curry", category="Indian"),
    Suggestion(id="r007", title="Butter Chicken", category="Indian"),
]


class FakeTimer:
    def __init__(self, timers: FakeTimers, due: float, callback: Callable[[], None]):
        self._timers = timers
        self.due = due
        self.callback = callback
        self.stopped = False

    def stop(self) -> None:
        self.stopped = True
        if self in self._timers.active:
            self._timers.active.remove(self)


class FakeTimers:
    """Manual clock implementing the ``set_timer(delay, callback)`` factory."""

    def __init__(self):
        self.now = 0.0
        self.active: list[FakeTimer] = []

    def __call__(self, delay: float, callback: Callable[[], None]) -> FakeTimer:
        timer = FakeTimer(self, self.now + delay, callback)
        self.active.append(timer)
        return timer

    def advance(self, seconds: float) -> None:
        self.now += seconds
        for timer in sorted(self.active, key=lambda t: t.due):
            if timer.due <= self.now and timer in self.active:
                self.active.remove(timer)
                timer.callback()


class FakeSuggestionService:
    """Suggestion service whose responses can be held back and released."""

    def __init__(self):
        self.calls: list[str] = []
        self.results: dict[str, list[Suggestion]] = {}
        self.errors: dict[str, Exception] = {}
        self._gates: dict[str, asyncio.Event] = {}

    def hold(self, query: str) -> None:
        self._gates[query] = asyncio.Event()

    def release(self, query: str) -> None:
        self._gates.pop(query).set()

    async def get_recipe_suggestions(self, query: str) -> list[Suggestion]:
        self.calls.append(query)
        gate = self._gates.get(query)
        if gate is not None:
            await gate.wait()
        if query in self.errors:
            raise self.errors[query]
        if query in self.results:
            return self.results[query]
        return [s for s in SUGGESTIONS if query.lower() in s.title.lower()]


async def settle(rounds: int = 5) -> None:
    """Let pending tasks run up to their next suspension point."""
    for _ in range(rounds):
        await asyncio.sleep(0)


@pytest.fixture()
def timers() -> FakeTimers:
    return FakeTimers()


@pytest.fixture()
def service() -> FakeSuggestionService:
    return FakeSuggestionService()


@pytest.fixture()
def location() -> Location:
    return Location()


@pytest.fixture()
def pointer_events() -> PointerEvents:
    return PointerEvents()


@pytest.fixture()
def make_controller(
    service: FakeSuggestionService, location: Location, timers: FakeTimers
) -> Callable[..., SearchController]:
    """Build a controller wired to the fake service, location and clock."""

    def factory(**kwargs) -> SearchController:
        kwargs.setdefault("url_sync_delay", 0.5)
        kwargs.setdefault("set_timer", timers)
        return SearchController(service, kwargs.pop("location", location), **kwargs)

    return factory
