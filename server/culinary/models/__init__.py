"""Pydantic models for the Culinary Haven recipe service."""

from culinary.models.schemas import (
    FavoritesCount,
    Recipe,
    RecipePage,
    ServerStatus,
    ShoppingList,
    ShoppingListCreate,
    ShoppingListItem,
    Suggestion,
)

__all__ = [
    "FavoritesCount",
    "Recipe",
    "RecipePage",
    "ServerStatus",
    "ShoppingList",
    "ShoppingListCreate",
    "ShoppingListItem",
    "Suggestion",
]
