# =============================================================================
# app/routers/shopping.py - Shopping List Endpoints
# =============================================================================

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from app.auth.dependencies import get_current_user
from app.dependencies import HouseholdDep
from app.exceptions import NoRowReturnedError
from core.models import ShoppingListItem
from lib.utils import NonBlankStr

router = APIRouter(dependencies=[Depends(get_current_user)])


class ShoppingItemCreateRequest(BaseModel):
    """New shopping list line."""
    name: NonBlankStr = Field(..., examples=["Milk"])
    quantity: str | None = Field(default=None, examples=["2 gal"])
    group_id: str | None = None


@router.get("", response_model=list[ShoppingListItem])
def get_shopping_list(service: HouseholdDep):
    """Shopping list, oldest item first."""
    return service.get_shopping_list()


@router.post("", response_model=ShoppingListItem, status_code=201)
def add_item(body: ShoppingItemCreateRequest, service: HouseholdDep):
    item = service.add_item(body.name, body.quantity, body.group_id)
    if item is None:
        raise NoRowReturnedError(ShoppingListItem.table_name)
    return item


@router.post("/toggle", response_model=ShoppingListItem)
def toggle_item(item: ShoppingListItem, service: HouseholdDep):
    """
    Check or uncheck an item.

    Takes the full item as last read and returns it with is_checked flipped.
    """
    return service.toggle_item(item)


@router.delete("/{item_id}", status_code=204)
def delete_item(item_id: str, service: HouseholdDep) -> None:
    service.delete_item(item_id)
