"""Favorites endpoints."""

from fastapi import APIRouter, HTTPException

from culinary.models.schemas import FavoritesCount
from culinary.services.catalog import get_catalog
from culinary.services.shopping import get_favorites

router = APIRouter(prefix="/favorites", tags=["Favorites"])


@router.get("/count", response_model=FavoritesCount)
async def count_favorites() -> FavoritesCount:
    return FavoritesCount(count=get_favorites().count())


@router.post("/{recipe_id}", response_model=FavoritesCount)
async def add_favorite(recipe_id: str) -> FavoritesCount:
    """Mark a recipe as favorite."""
    if get_catalog().get(recipe_id) is None:
        raise HTTPException(status_code=404, detail=f"Recipe not found: {recipe_id}")
    favorites = get_favorites()
    favorites.add(recipe_id)
    return FavoritesCount(count=favorites.count())


@router.delete("/{recipe_id}", response_model=FavoritesCount)
async def remove_favorite(recipe_id: str) -> FavoritesCount:
    """Unmark a favorite recipe. Unknown ids are ignored."""
    favorites = get_favorites()
    favorites.remove(recipe_id)
    return FavoritesCount(count=favorites.count())
