# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - health.py: Health check endpoints
# - groups.py: Household groups, invite codes, members
# - shopping.py: Shopping list
# - recipes.py: Recipes and their ingredients
# - meal_plans.py: Weekly meal plan
# - todos.py: Household todos
#
# Each router is mounted in main.py with a URL prefix.
# =============================================================================

from . import health
from . import groups
from . import shopping
from . import recipes
from . import meal_plans
from . import todos

__all__ = [
    "health",
    "groups",
    "shopping",
    "recipes",
    "meal_plans",
    "todos",
]
