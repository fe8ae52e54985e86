"""Tests for the recipe service client."""

import json

import httpx
import pytest
import pytest_asyncio

from culinary.main import app
from culinary.services.catalog import set_catalog
from culinary.services.shopping import reset_stores
from culinary_cli.api import ApiClient, Recipe


def mock_client(handler) -> ApiClient:
    return ApiClient("http://testserver", transport=httpx.MockTransport(handler))


@pytest_asyncio.fixture()
async def live_api():
    """Client talking to the real service over ASGI."""
    set_catalog(None)
    reset_stores()
    api = ApiClient("http://testserver", transport=httpx.ASGITransport(app=app))
    async with api:
        yield api
    reset_stores()


class TestApiClient:
    def test_requires_open(self):
        api = ApiClient()
        with pytest.raises(RuntimeError):
            api.client

    @pytest.mark.asyncio()
    async def test_health_check_offline(self):
        def handler(request):
            raise httpx.ConnectError("refused", request=request)

        async with mock_client(handler) as api:
            assert await api.health_check() is False

    @pytest.mark.asyncio()
    async def test_suggestions_request(self):
        seen = []

        def handler(request):
            seen.append(request.url)
            return httpx.Response(
                200,
                json=[
                    {"id": "r001", "title": "Pizza Dough", "category": "Baking"},
                    {"id": 7, "title": "Pizza Bianca"},
                ],
            )

        async with mock_client(handler) as api:
            suggestions = await api.get_recipe_suggestions("piz")

        assert seen[0].path == "/api/v1/recipes/suggestions"
        assert seen[0].params["q"] == "piz"
        assert [s.title for s in suggestions] == ["Pizza Dough", "Pizza Bianca"]
        assert suggestions[1].id == "7"
        assert suggestions[1].category is None

    @pytest.mark.asyncio()
    async def test_suggestions_error_raises(self):
        async with mock_client(lambda request: httpx.Response(500)) as api:
            with pytest.raises(httpx.HTTPStatusError):
                await api.get_recipe_suggestions("piz")

    @pytest.mark.asyncio()
    async def test_get_recipes_omits_empty_search(self):
        seen = []

        def handler(request):
            seen.append(request.url)
            return httpx.Response(
                200,
                json={"recipes": [], "page": 2, "total_pages": 4, "total_found": 70},
            )

        async with mock_client(handler) as api:
            page = await api.get_recipes(page=2, limit=20)

        assert "search" not in seen[0].params
        assert seen[0].params["page"] == "2"
        assert page.total_pages == 4

    @pytest.mark.asyncio()
    async def test_add_to_shopping_list_payload(self):
        bodies = []

        def handler(request):
            bodies.append(json.loads(request.content))
            return httpx.Response(201, json={"item_count": 2})

        recipe = Recipe(
            id="r001",
            title="Pizza Dough",
            category="Baking",
            description=None,
            prep_minutes=15,
            cook_minutes=None,
            servings=2,
            ingredients={"flour": "500 g", "yeast": "7 g"},
        )
        async with mock_client(handler) as api:
            assert await api.add_to_shopping_list(recipe) == 2

        assert bodies[0]["items"] == [
            {"ingredient": "flour", "amount": "500 g"},
            {"ingredient": "yeast", "amount": "7 g"},
        ]
        assert bodies[0]["name"].startswith("Shopping List ")
        assert recipe.total_minutes == 15

    @pytest.mark.asyncio()
    async def test_shopping_list_status_error(self):
        async with mock_client(lambda request: httpx.Response(401)) as api:
            with pytest.raises(httpx.HTTPStatusError) as excinfo:
                await api.add_to_shopping_list(
                    Recipe("r1", "X", None, None, None, None, None, {"salt": "1 tsp"})
                )
        assert excinfo.value.response.status_code == 401


class TestAgainstService:
    @pytest.mark.asyncio()
    async def test_round_trip(self, live_api):
        assert await live_api.health_check() is True

        suggestions = await live_api.get_recipe_suggestions("curry")
        assert [s.title for s in suggestions] == ["Chicken Curry"]

        page = await live_api.get_recipes(search="curry")
        assert page.total_found >= 1
        recipe = next(r for r in page.recipes if r.id == "r006")
        assert await live_api.add_to_shopping_list(recipe) == len(recipe.ingredients)

        status = await live_api.get_status()
        assert status.shopping_lists == 1

        assert await live_api.toggle_favorite("r006") == 1
        assert await live_api.get_favorites_count() == 1
        assert await live_api.toggle_favorite("r006", on=False) == 0
