# =============================================================================
# core/models/ - Pydantic Row Models
# =============================================================================
# One frozen model per Supabase table:
# - group.py: Group, GroupMember (groups, group_members)
# - recipe.py: Recipe, RecipeIngredient (recipes, recipe_ingredients)
# - meal_plan.py: MealPlanEntry (meal_plans)
# - shopping.py: ShoppingListItem (shopping_list)
# - todo.py: TodoItem (todos)
#
# These models define the column contract with the remote schema.
# =============================================================================

from .base import Record, TimestampedRecord, record_id
from .group import Group, GroupMember, GroupRole
from .meal_plan import MealPlanEntry
from .recipe import Recipe, RecipeIngredient
from .shopping import ShoppingListItem
from .todo import TodoItem

__all__ = [
    # Base
    "Record",
    "TimestampedRecord",
    "record_id",
    # Groups
    "Group",
    "GroupMember",
    "GroupRole",
    # Recipes
    "Recipe",
    "RecipeIngredient",
    # Meal plans
    "MealPlanEntry",
    # Shopping
    "ShoppingListItem",
    # Todos
    "TodoItem",
]
