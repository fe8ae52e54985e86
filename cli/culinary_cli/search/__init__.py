"""Incremental search: suggestion fetching, keyboard navigation, address sync."""

from culinary_cli.search.controller import SearchController
from culinary_cli.search.fetcher import SuggestionFetcher, SuggestionService
from culinary_cli.search.highlight import highlight_match, split_matches
from culinary_cli.search.lifecycle import ControlLifecycle, PointerEvents
from culinary_cli.search.navigation import NavigationStateMachine
from culinary_cli.search.state import MIN_FETCH_LENGTH, MIN_PANEL_LENGTH, SearchState
from culinary_cli.search.url_sync import UrlSyncScheduler, loop_timer, search_url

__all__ = [
    "SearchController",
    "SuggestionFetcher",
    "SuggestionService",
    "highlight_match",
    "split_matches",
    "ControlLifecycle",
    "PointerEvents",
    "NavigationStateMachine",
    "MIN_FETCH_LENGTH",
    "MIN_PANEL_LENGTH",
    "SearchState",
    "UrlSyncScheduler",
    "loop_timer",
    "search_url",
]
