"""Tests for pointer observers and control teardown."""

import pytest

from culinary_cli.search import ControlLifecycle, PointerEvents


class TestPointerEvents:
    def test_dispatch_reaches_every_listener(self):
        events = PointerEvents()
        seen = []
        events.add_listener(lambda target: seen.append(("a", target)))
        events.add_listener(lambda target: seen.append(("b", target)))

        events.dispatch("button")

        assert seen == [("a", "button"), ("b", "button")]

    def test_remove_unknown_listener_is_ignored(self):
        events = PointerEvents()
        events.remove_listener(print)
        assert len(events) == 0


class TestControlLifecycle:
    def make(self, events, release=()):
        outside = []
        lifecycle = ControlLifecycle(
            events,
            is_inside=lambda target: target == "input",
            on_outside=lambda: outside.append(True),
            release=release,
        )
        return lifecycle, outside

    def test_outside_target_triggers_callback(self):
        events = PointerEvents()
        lifecycle, outside = self.make(events)
        lifecycle.mount()

        events.dispatch("input")
        assert outside == []

        events.dispatch(None)
        assert outside == [True]

    def test_unmount_stops_observing(self):
        events = PointerEvents()
        lifecycle, outside = self.make(events)
        lifecycle.mount()
        lifecycle.unmount()

        events.dispatch("elsewhere")

        assert outside == []
        assert len(events) == 0

    def test_release_callbacks_run_once(self):
        events = PointerEvents()
        calls = []
        lifecycle, _ = self.make(events, release=[lambda: calls.append("timer")])
        lifecycle.mount()
        lifecycle.unmount()
        lifecycle.unmount()

        assert calls == ["timer"]

    def test_all_releases_run_when_one_fails(self):
        events = PointerEvents()
        calls = []

        def broken():
            calls.append("broken")
            raise RuntimeError("boom")

        lifecycle, _ = self.make(
            events,
            release=[lambda: calls.append("first"), broken, lambda: calls.append("last")],
        )
        lifecycle.mount()

        with pytest.raises(RuntimeError):
            lifecycle.unmount()

        assert sorted(calls) == ["broken", "first", "last"]
        assert len(events) == 0
        assert lifecycle.mounted is False

    def test_context_manager(self):
        events = PointerEvents()
        calls = []
        lifecycle, _ = self.make(events, release=[lambda: calls.append("released")])

        with lifecycle:
            assert len(events) == 1

        assert len(events) == 0
        assert calls == ["released"]
