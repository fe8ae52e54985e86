"""Recipe catalog: listing, filtering and suggestion lookup."""

import json
import math
from pathlib import Path
from typing import Optional

import structlog

from culinary.config import get_settings
from culinary.models.schemas import Recipe, RecipePage, Suggestion

logger = structlog.get_logger(__name__)


class RecipeCatalog:
    """In-memory recipe catalog loaded from a JSON file.

    Matching is plain case-insensitive substring containment and results
    keep catalog order; relevance ranking is left to a dedicated search
    backend.
    """

    def __init__(self, recipes: list[Recipe]):
        self.recipes = recipes
        self._by_id = {r.id: r for r in recipes}

    @classmethod
    def from_file(cls, path: Path) -> "RecipeCatalog":
        """Load the catalog from a JSON array of recipe objects."""
        with path.open(encoding="utf-8") as fh:
            raw = json.load(fh)
        recipes = [Recipe.model_validate(item) for item in raw]
        logger.info("Recipe catalog loaded", path=str(path), count=len(recipes))
        return cls(recipes)

    def __len__(self) -> int:
        return len(self.recipes)

    def get(self, recipe_id: str) -> Optional[Recipe]:
        return self._by_id.get(recipe_id)

    def _matches(self, recipe: Recipe, needle: str) -> bool:
        if needle in recipe.title.lower():
            return True
        if recipe.category and needle in recipe.category.lower():
            return True
        return any(needle in name.lower() for name in recipe.ingredients)

    def filter(self, search: Optional[str] = None) -> list[Recipe]:
        """Recipes whose title, category or an ingredient contains ``search``."""
        needle = (search or "").strip().lower()
        if not needle:
            return list(self.recipes)
        return [r for r in self.recipes if self._matches(r, needle)]

    def page(self, page: int, limit: int, search: Optional[str] = None) -> RecipePage:
        """
        Return one page of (optionally filtered) recipes.

        Pages are 1-based; a page past the end is empty rather than an error.
        """
        found = self.filter(search)
        total_pages = max(1, math.ceil(len(found) / limit))
        start = (page - 1) * limit
        return RecipePage(
            recipes=found[start : start + limit],
            page=page,
            total_pages=total_pages,
            total_found=len(found),
        )

    def suggestions(self, query: str, limit: int) -> list[Suggestion]:
        """Title/category matches for ``query`` in catalog order."""
        needle = query.strip().lower()
        if not needle:
            return []

        results: list[Suggestion] = []
        for recipe in self.recipes:
            in_title = needle in recipe.title.lower()
            in_category = bool(recipe.category) and needle in recipe.category.lower()
            if in_title or in_category:
                results.append(
                    Suggestion(id=recipe.id, title=recipe.title, category=recipe.category)
                )
                if len(results) >= limit:
                    break
        return results


# Global instance
_catalog: Optional[RecipeCatalog] = None


def get_catalog() -> RecipeCatalog:
    """Get or create the global recipe catalog."""
    global _catalog
    if _catalog is None:
        _catalog = RecipeCatalog.from_file(get_settings().recipes_file)
    return _catalog


def set_catalog(catalog: Optional[RecipeCatalog]) -> None:
    """Replace the global catalog (``None`` forces a reload from disk)."""
    global _catalog
    _catalog = catalog
