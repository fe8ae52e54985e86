"""Recipe listing and suggestion endpoints."""

from typing import Optional

from fastapi import APIRouter, HTTPException, Query

from culinary.config import get_settings
from culinary.models.schemas import Recipe, RecipePage, Suggestion
from culinary.services.catalog import get_catalog

router = APIRouter(prefix="/recipes", tags=["Recipes"])


@router.get("", response_model=RecipePage)
async def list_recipes(
    page: int = Query(default=1, ge=1, description="1-based page number"),
    limit: Optional[int] = Query(default=None, ge=1, description="Recipes per page"),
    search: Optional[str] = Query(default=None, max_length=200),
) -> RecipePage:
    """
    List recipes, optionally filtered.

    - **page**: page number, starting at 1
    - **limit**: page size (defaults to the configured page size)
    - **search**: case-insensitive filter on title, category and ingredients
    """
    settings = get_settings()
    page_size = min(limit or settings.default_page_size, settings.max_page_size)
    return get_catalog().page(page, page_size, search)


@router.get("/suggestions", response_model=list[Suggestion])
async def get_suggestions(
    q: str = Query(..., min_length=1, max_length=200, description="Partial query"),
    limit: Optional[int] = Query(default=None, ge=1, le=50),
) -> list[Suggestion]:
    """
    Autocomplete suggestions for a partial query.
    """
    settings = get_settings()
    return get_catalog().suggestions(q, limit or settings.suggestion_limit)


@router.get("/{recipe_id}", response_model=Recipe)
async def get_recipe(recipe_id: str) -> Recipe:
    """Get a single recipe."""
    recipe = get_catalog().get(recipe_id)
    if recipe is None:
        raise HTTPException(status_code=404, detail=f"Recipe not found: {recipe_id}")
    return recipe
