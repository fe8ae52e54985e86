"""Tests for debounced address updates."""

from __future__ import annotations

import asyncio

import pytest

from culinary_cli.location import Location
from culinary_cli.search.url_sync import UrlSyncScheduler, loop_timer, search_url

from conftest import FakeTimers


class TestSearchUrl:
    def test_sets_search_and_drops_page(self) -> None:
        location = Location.parse("/?search=old&page=4&sort=quick")
        assert search_url(location, "pizza") == "/?search=pizza&sort=quick"

    def test_removes_search_when_empty(self) -> None:
        location = Location.parse("/?search=old&page=2")
        assert search_url(location, None) == "/"

    def test_always_targets_home(self) -> None:
        location = Location.parse("/favorites?page=2")
        assert search_url(location, "curry") == "/?search=curry"


class TestUrlSyncScheduler:
    def test_navigates_after_delay(self, location: Location, timers: FakeTimers) -> None:
        scheduler = UrlSyncScheduler(location, 0.5, timers)
        scheduler.schedule("pizza")

        timers.advance(0.49)
        assert location.history == []

        timers.advance(0.01)
        assert location.history == ["/?search=pizza"]
        assert not scheduler.pending

    def test_each_schedule_supersedes_previous(
        self, location: Location, timers: FakeTimers
    ) -> None:
        scheduler = UrlSyncScheduler(location, 0.5, timers)
        for text in ("p", "pi", "piz"):
            scheduler.schedule(text)
            timers.advance(0.2)
        assert len(timers.active) == 1

        timers.advance(0.5)
        assert location.history == ["/?search=piz"]

    def test_query_is_trimmed(self, location: Location, timers: FakeTimers) -> None:
        scheduler = UrlSyncScheduler(location, 0.5, timers)
        scheduler.schedule("  curry ")
        timers.advance(0.5)
        assert location.params["search"] == "curry"

    def test_blank_query_removes_search_and_page(self, timers: FakeTimers) -> None:
        location = Location.parse("/?search=curry&page=3")
        scheduler = UrlSyncScheduler(location, 0.5, timers)
        scheduler.schedule("   ")
        timers.advance(0.5)
        assert location.url == "/"

    def test_fires_with_parameters_current_at_firing_time(
        self, location: Location, timers: FakeTimers
    ) -> None:
        scheduler = UrlSyncScheduler(location, 0.5, timers)
        scheduler.schedule("soup")
        location.push("/?page=2&view=grid")
        timers.advance(0.5)
        assert location.url == "/?view=grid&search=soup"

    def test_cancel(self, location: Location, timers: FakeTimers) -> None:
        scheduler = UrlSyncScheduler(location, 0.5, timers)
        scheduler.schedule("soup")
        scheduler.cancel()
        timers.advance(1)
        assert location.history == []
        assert timers.active == []

    def test_navigate_now_cancels_pending(
        self, location: Location, timers: FakeTimers
    ) -> None:
        scheduler = UrlSyncScheduler(location, 0.5, timers)
        scheduler.schedule("piz")
        scheduler.navigate_now("Pizza Dough")
        timers.advance(1)
        assert location.history == ["/?search=Pizza+Dough"]


class TestLoopTimer:
    @pytest.mark.asyncio()
    async def test_default_timer_runs_on_event_loop(self, location: Location) -> None:
        scheduler = UrlSyncScheduler(location, 0.01, loop_timer)
        scheduler.schedule("p")
        scheduler.schedule("pie")
        await asyncio.sleep(0.05)
        assert location.history == ["/?search=pie"]

    @pytest.mark.asyncio()
    async def test_stopped_timer_never_fires(self, location: Location) -> None:
        scheduler = UrlSyncScheduler(location, 0.01)
        scheduler.schedule("pie")
        scheduler.cancel()
        await asyncio.sleep(0.05)
        assert location.history == []
