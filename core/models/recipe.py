# =============================================================================
# core/models/recipe.py - Recipe Schemas
# =============================================================================
# Recipes belong to their creator and may be shared with a group.
# Ingredients live in their own table and are displayed by sort_order;
# the positions need not be contiguous.
#
#   recipes 1 --- N recipe_ingredients
# =============================================================================

from datetime import datetime
from typing import ClassVar

from pydantic import Field

from .base import Record, TimestampedRecord


class Recipe(TimestampedRecord):
    """
    A recipe.

    Example:
        {
            "title": "Weeknight Chili",
            "servings": 4,
            "prep_time_minutes": 15,
            "cook_time_minutes": 45,
            "group_id": null
        }
    """

    table_name: ClassVar[str] = "recipes"
    server_generated: ClassVar[tuple[str, ...]] = ("id", "created_at", "updated_at")

    # Shared with this group when set, private to the creator otherwise
    group_id: str | None = Field(
        default=None,
        description="Group the recipe is shared with"
    )

    title: str = Field(
        ...,
        description="Recipe title"
    )

    description: str | None = Field(
        default=None,
        description="Short summary shown in lists"
    )

    servings: int | None = Field(
        default=None,
        description="Number of servings the recipe makes"
    )

    prep_time_minutes: int | None = Field(
        default=None,
        description="Preparation time in minutes"
    )

    cook_time_minutes: int | None = Field(
        default=None,
        description="Cooking time in minutes"
    )

    instructions: str | None = Field(
        default=None,
        description="Free-text method"
    )

    image_url: str | None = Field(
        default=None,
        description="Public URL of a cover image"
    )

    updated_at: datetime | None = Field(
        default=None,
        description="Stamped by the client on every update"
    )


class RecipeIngredient(Record):
    """One ingredient line of a recipe."""

    table_name: ClassVar[str] = "recipe_ingredients"

    recipe_id: str
    name: str
    quantity: str | None = None
    unit: str | None = None
    sort_order: int = 0
