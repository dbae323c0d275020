# =============================================================================
# core/models/meal_plan.py - Meal Plan Schemas
# =============================================================================
# A meal plan entry schedules one meal on one calendar day. It either
# points at a recipe or stands alone with a custom title.
# =============================================================================

from datetime import date
from typing import ClassVar

from pydantic import Field

from .base import TimestampedRecord


class MealPlanEntry(TimestampedRecord):
    """
    One planned meal.

    Example:
        {
            "meal_date": "2024-01-15",
            "meal_type": "dinner",
            "recipe_id": "660e8400-...",
            "custom_title": null
        }
    """

    table_name: ClassVar[str] = "meal_plans"

    group_id: str | None = Field(
        default=None,
        description="Group whose plan this entry belongs to"
    )

    recipe_id: str | None = Field(
        default=None,
        description="Recipe to cook; None for a free-form entry"
    )

    # Calendar date only; the week view filters on it
    meal_date: date = Field(
        ...,
        description="Day the meal is planned for"
    )

    meal_type: str = Field(
        default="",
        description="breakfast, lunch, dinner, snack, ..."
    )

    custom_title: str | None = Field(
        default=None,
        description="Title used when no recipe is linked"
    )

    notes: str | None = None
