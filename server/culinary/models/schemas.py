"""Pydantic schemas for API requests and responses."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


# =============================================================================
# Recipe Schemas
# =============================================================================


class Recipe(BaseModel):
    """A full recipe record."""

    id: str
    title: str
    category: Optional[str] = None
    description: Optional[str] = None
    prep_minutes: Optional[int] = Field(default=None, ge=0)
    cook_minutes: Optional[int] = Field(default=None, ge=0)
    servings: Optional[int] = Field(default=None, ge=1)
    ingredients: dict[str, str] = Field(default_factory=dict)
    instructions: list[str] = Field(default_factory=list)


class RecipePage(BaseModel):
    """One page of the recipe listing."""

    recipes: list[Recipe]
    page: int
    total_pages: int
    total_found: int


class Suggestion(BaseModel):
    """Autocomplete candidate; a trimmed-down recipe."""

    id: str
    title: str
    category: Optional[str] = None


# =============================================================================
# Shopping List Schemas
# =============================================================================


class ShoppingListItem(BaseModel):
    """Single ingredient line on a shopping list."""

    ingredient: str = Field(..., min_length=1, max_length=200)
    amount: str = Field(default="", max_length=100)


class ShoppingListCreate(BaseModel):
    """Shopping list request body."""

    name: str = Field(..., min_length=1, max_length=200)
    items: list[ShoppingListItem] = Field(..., min_length=1)


class ShoppingList(BaseModel):
    """A stored shopping list."""

    id: str
    name: str
    items: list[ShoppingListItem]
    item_count: int
    created_at: datetime


# =============================================================================
# Status Schemas
# =============================================================================


class FavoritesCount(BaseModel):
    """Favorites counter."""

    count: int = Field(ge=0)


class ServerStatus(BaseModel):
    """Server status response."""

    online: bool = True
    version: str
    total_recipes: int
    shopping_lists: int
