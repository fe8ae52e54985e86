"""API routers for the Culinary Haven recipe service."""

from culinary.api import favorites, recipes, shopping_list

__all__ = ["favorites", "recipes", "shopping_list"]
