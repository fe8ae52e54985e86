"""Shopping list endpoints."""

from fastapi import APIRouter

from culinary.models.schemas import ShoppingList, ShoppingListCreate
from culinary.services.shopping import get_shopping_lists

router = APIRouter(prefix="/shopping-list", tags=["Shopping List"])


@router.post("", response_model=ShoppingList, status_code=201)
async def create_shopping_list(request: ShoppingListCreate) -> ShoppingList:
    """
    Store a shopping list.

    - **name**: display name of the list
    - **items**: ingredient/amount pairs (at least one)
    """
    return get_shopping_lists().create(request)


@router.get("", response_model=list[ShoppingList])
async def list_shopping_lists() -> list[ShoppingList]:
    """All stored shopping lists, newest first."""
    return get_shopping_lists().all()
