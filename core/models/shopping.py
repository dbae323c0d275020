# =============================================================================
# core/models/shopping.py - Shopping List Schemas
# =============================================================================

from typing import ClassVar

from pydantic import Field

from .base import TimestampedRecord


class ShoppingListItem(TimestampedRecord):
    """
    One line on the shopping list.

    Checking an item off flips is_checked on the existing row; items are
    never recreated to change state.
    """

    table_name: ClassVar[str] = "shopping_list"

    group_id: str | None = None

    name: str = Field(
        ...,
        description="What to buy"
    )

    # "2 gal", "a dozen", ... never an empty string
    quantity: str | None = Field(
        default=None,
        description="Free-text quantity"
    )

    is_checked: bool = False
