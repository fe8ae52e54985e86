"""CLI components."""

from .search_bar import SearchBar, SuggestionPanel, SuggestionRow
from .recipe_list import RecipeList, RecipeItem, Pagination
from .status_bar import StatusBar
from .not_found import NotFoundScreen

__all__ = [
    "SearchBar",
    "SuggestionPanel",
    "SuggestionRow",
    "RecipeList",
    "RecipeItem",
    "Pagination",
    "StatusBar",
    "NotFoundScreen",
]
