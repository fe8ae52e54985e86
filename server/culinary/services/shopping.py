"""In-memory shopping list and favorites stores."""

import uuid
from datetime import datetime, timezone
from typing import Optional

import structlog

from culinary.models.schemas import ShoppingList, ShoppingListCreate

logger = structlog.get_logger(__name__)


class ShoppingListStore:
    """Keeps shopping lists for the lifetime of the process."""

    def __init__(self):
        self._lists: dict[str, ShoppingList] = {}

    def __len__(self) -> int:
        return len(self._lists)

    def create(self, request: ShoppingListCreate) -> ShoppingList:
        shopping_list = ShoppingList(
            id=str(uuid.uuid4()),
            name=request.name,
            items=request.items,
            item_count=len(request.items),
            created_at=datetime.now(timezone.utc),
        )
        self._lists[shopping_list.id] = shopping_list
        logger.info(
            "Shopping list created",
            list_id=shopping_list.id,
            item_count=shopping_list.item_count,
        )
        return shopping_list

    def all(self) -> list[ShoppingList]:
        return sorted(self._lists.values(), key=lambda s: s.created_at, reverse=True)


class FavoritesStore:
    """Set of favorited recipe ids."""

    def __init__(self):
        self._ids: set[str] = set()

    def add(self, recipe_id: str) -> None:
        self._ids.add(recipe_id)

    def remove(self, recipe_id: str) -> None:
        self._ids.discard(recipe_id)

    def count(self) -> int:
        return len(self._ids)


# Global instances
_shopping_lists: Optional[ShoppingListStore] = None
_favorites: Optional[FavoritesStore] = None


def get_shopping_lists() -> ShoppingListStore:
    """Get or create the global shopping list store."""
    global _shopping_lists
    if _shopping_lists is None:
        _shopping_lists = ShoppingListStore()
    return _shopping_lists


def get_favorites() -> FavoritesStore:
    """Get or create the global favorites store."""
    global _favorites
    if _favorites is None:
        _favorites = FavoritesStore()
    return _favorites


def reset_stores() -> None:
    """Drop all stored shopping lists and favorites."""
    global _shopping_lists, _favorites
    _shopping_lists = None
    _favorites = None
