"""Tests for the navigable address."""

from __future__ import annotations

from culinary_cli.location import Location


class TestLocation:
    def test_defaults_to_home(self) -> None:
        location = Location()
        assert location.path == "/"
        assert location.url == "/"

    def test_parse(self) -> None:
        location = Location.parse("/?search=pizza&page=2")
        assert location.path == "/"
        assert location.params["search"] == "pizza"
        assert location.params["page"] == "2"

    def test_push_replaces_address_and_records_history(self) -> None:
        location = Location()
        location.push("/?search=curry")
        location.push("/shopping-list")
        assert location.path == "/shopping-list"
        assert "search" not in location.params
        assert location.history == ["/?search=curry", "/shopping-list"]

    def test_subscribers_notified_in_order(self) -> None:
        location = Location()
        seen: list[str] = []
        location.subscribe(lambda loc: seen.append(f"a:{loc.url}"))
        location.subscribe(lambda loc: seen.append(f"b:{loc.url}"))
        location.push("/?page=2")
        assert seen == ["a:/?page=2", "b:/?page=2"]

    def test_unsubscribe(self) -> None:
        location = Location()
        seen: list[str] = []
        unsubscribe = location.subscribe(lambda loc: seen.append(loc.url))
        unsubscribe()
        unsubscribe()
        location.push("/?page=2")
        assert seen == []
