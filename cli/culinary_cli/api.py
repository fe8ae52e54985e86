"""API client for the Culinary Haven recipe service."""

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

import httpx


@dataclass(frozen=True)
class Suggestion:
    """An autocomplete candidate."""
    id: str
    title: str
    category: Optional[str] = None


@dataclass
class Recipe:
    """A recipe as listed by the service."""
    id: str
    title: str
    category: Optional[str]
    description: Optional[str]
    prep_minutes: Optional[int]
    cook_minutes: Optional[int]
    servings: Optional[int]
    ingredients: dict[str, str] = field(default_factory=dict)
    instructions: list[str] = field(default_factory=list)

    @property
    def total_minutes(self) -> Optional[int]:
        if self.prep_minutes is None and self.cook_minutes is None:
            return None
        return (self.prep_minutes or 0) + (self.cook_minutes or 0)


@dataclass
class RecipePage:
    """A page of recipes."""
    recipes: list[Recipe]
    page: int
    total_pages: int
    total_found: int


@dataclass
class ServerStatus:
    """Server status response."""
    online: bool
    version: str
    total_recipes: int
    shopping_lists: int


def _parse_recipe(data: dict) -> Recipe:
    return Recipe(
        id=str(data.get("id", "")),
        title=data.get("title", "Untitled"),
        category=data.get("category"),
        description=data.get("description"),
        prep_minutes=data.get("prep_minutes"),
        cook_minutes=data.get("cook_minutes"),
        servings=data.get("servings"),
        ingredients=dict(data.get("ingredients") or {}),
        instructions=list(data.get("instructions") or []),
    )


class ApiClient:
    """Async API client for the recipe service.

    One ``httpx.AsyncClient`` is shared by every call made between
    :meth:`open` and :meth:`close`, so overlapping requests (one suggestion
    fetch per keystroke) reuse the same connection pool.
    """

    def __init__(
        self,
        base_url: str = "http://127.0.0.1:8000",
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url
        self.timeout = timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def open(self) -> None:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self._transport,
            )

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self):
        await self.open()
        return self

    async def __aexit__(self, *args):
        await self.close()

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None:
            raise RuntimeError("ApiClient must be opened or used as async context manager")
        return self._client

    async def health_check(self) -> bool:
        """Check if server is healthy."""
        try:
            response = await self.client.get("/health", timeout=2.0)
            return response.status_code == 200
        except httpx.HTTPError:
            return False

    async def get_status(self) -> ServerStatus:
        """Get server status."""
        response = await self.client.get("/api/v1/status")
        response.raise_for_status()
        data = response.json()

        return ServerStatus(
            online=data.get("online", True),
            version=data.get("version", "unknown"),
            total_recipes=data.get("total_recipes", 0),
            shopping_lists=data.get("shopping_lists", 0),
        )

    async def get_recipes(
        self,
        page: int = 1,
        limit: int = 20,
        search: Optional[str] = None,
    ) -> RecipePage:
        """Fetch one page of recipes, optionally filtered by ``search``."""
        params: dict = {"page": page, "limit": limit}
        if search:
            params["search"] = search

        response = await self.client.get("/api/v1/recipes", params=params)
        response.raise_for_status()
        data = response.json()

        recipes = [_parse_recipe(r) for r in data.get("recipes", [])]
        return RecipePage(
            recipes=recipes,
            page=data.get("page", page),
            total_pages=data.get("total_pages", 1),
            total_found=data.get("total_found", len(recipes)),
        )

    async def get_recipe(self, recipe_id: str) -> Recipe:
        response = await self.client.get(f"/api/v1/recipes/{recipe_id}")
        response.raise_for_status()
        return _parse_recipe(response.json())

    async def get_recipe_suggestions(self, query: str) -> list[Suggestion]:
        """Autocomplete suggestions for a partial query, in service order."""
        response = await self.client.get(
            "/api/v1/recipes/suggestions",
            params={"q": query},
        )
        response.raise_for_status()

        return [
            Suggestion(
                id=str(s["id"]),
                title=s["title"],
                category=s.get("category"),
            )
            for s in response.json()
        ]

    async def add_to_shopping_list(self, recipe: Recipe) -> int:
        """Post the recipe's ingredients as a new shopping list.

        Returns the number of items stored.
        """
        items = [
            {"ingredient": ingredient, "amount": str(amount)}
            for ingredient, amount in recipe.ingredients.items()
        ]
        payload = {
            "items": items,
            "name": f"Shopping List {date.today().isoformat()}",
        }

        response = await self.client.post("/api/v1/shopping-list", json=payload)
        response.raise_for_status()
        return response.json().get("item_count", len(items))

    async def get_favorites_count(self) -> int:
        response = await self.client.get("/api/v1/favorites/count")
        response.raise_for_status()
        return response.json().get("count", 0)

    async def toggle_favorite(self, recipe_id: str, on: bool = True) -> int:
        """Add or remove a favorite; returns the new favorites count."""
        url = f"/api/v1/favorites/{recipe_id}"
        if on:
            response = await self.client.post(url)
        else:
            response = await self.client.delete(url)
        response.raise_for_status()
        return response.json().get("count", 0)
