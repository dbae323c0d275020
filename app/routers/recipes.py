# =============================================================================
# app/routers/recipes.py - Recipe Endpoints
# =============================================================================
# Recipes and their ingredient lines. All endpoints require a signed-in
# user; sharing is enforced by the database's RLS policies.
# =============================================================================

import logging

from fastapi import APIRouter, Depends

from app.auth.dependencies import get_current_user
from app.dependencies import HouseholdDep
from app.exceptions import NoRowReturnedError, RecipeNotFoundError
from core.models import Recipe, RecipeIngredient

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(get_current_user)])


# =============================================================================
# Recipes
# =============================================================================

@router.get("", response_model=list[Recipe])
def list_recipes(service: HouseholdDep):
    """Recipes, newest first."""
    return service.get_recipes()


@router.get("/{recipe_id}", response_model=Recipe)
def get_recipe(recipe_id: str, service: HouseholdDep):
    """
    Get one recipe.

    Raises:
        404: If the recipe doesn't exist or isn't visible to the caller
    """
    recipe = service.get_recipe(recipe_id)
    if recipe is None:
        raise RecipeNotFoundError(recipe_id)
    return recipe


@router.post("", response_model=Recipe, status_code=201)
def add_recipe(recipe: Recipe, service: HouseholdDep):
    created = service.add_recipe(recipe)
    if created is None:
        raise NoRowReturnedError(Recipe.table_name)
    return created


@router.put("/{recipe_id}", response_model=Recipe)
def update_recipe(recipe_id: str, recipe: Recipe, service: HouseholdDep):
    """Replace a recipe with the given full record."""
    if recipe.id != recipe_id:
        # Path wins; the body may come from a form without an id
        recipe = recipe.model_copy(update={"id": recipe_id})
    return service.update_recipe(recipe)


@router.delete("/{recipe_id}", status_code=204)
def delete_recipe(recipe_id: str, service: HouseholdDep) -> None:
    service.delete_recipe(recipe_id)


# =============================================================================
# Ingredients
# =============================================================================

@router.get("/{recipe_id}/ingredients", response_model=list[RecipeIngredient])
def list_ingredients(recipe_id: str, service: HouseholdDep):
    """Ingredients in display (sort_order) order."""
    return service.get_recipe_ingredients(recipe_id)


@router.post("/{recipe_id}/ingredients", response_model=RecipeIngredient, status_code=201)
def add_ingredient(recipe_id: str, ingredient: RecipeIngredient, service: HouseholdDep):
    created = service.add_recipe_ingredient(
        ingredient.model_copy(update={"recipe_id": recipe_id})
    )
    if created is None:
        raise NoRowReturnedError(RecipeIngredient.table_name)
    return created


@router.delete("/{recipe_id}/ingredients/{ingredient_id}", status_code=204)
def delete_ingredient(recipe_id: str, ingredient_id: str, service: HouseholdDep) -> None:
    logger.debug(f"Deleting ingredient {ingredient_id} of recipe {recipe_id}")
    service.delete_recipe_ingredient(ingredient_id)
