"""Services module for the Culinary Haven recipe service."""

from culinary.services.catalog import RecipeCatalog, get_catalog, set_catalog
from culinary.services.shopping import (
    FavoritesStore,
    ShoppingListStore,
    get_favorites,
    get_shopping_lists,
    reset_stores,
)

__all__ = [
    "RecipeCatalog",
    "get_catalog",
    "set_catalog",
    "FavoritesStore",
    "ShoppingListStore",
    "get_favorites",
    "get_shopping_lists",
    "reset_stores",
]
