# =============================================================================
# app/routers/meal_plans.py - Meal Plan Endpoints
# =============================================================================
# The week view asks for an inclusive [start, end] date range.
# =============================================================================

from datetime import date, timedelta
from typing import Annotated

from fastapi import APIRouter, Depends, Query

from app.auth.dependencies import get_current_user
from app.dependencies import HouseholdDep
from app.exceptions import HouseholdException, NoRowReturnedError
from core.models import MealPlanEntry

router = APIRouter(dependencies=[Depends(get_current_user)])


@router.get("", response_model=list[MealPlanEntry])
def get_meal_plan(
    service: HouseholdDep,
    start: Annotated[date, Query(description="First day of the range (inclusive)")],
    end: Annotated[date | None, Query(description="Last day (inclusive); defaults to start + 6 days")] = None,
):
    """Entries planned between start and end, earliest first."""
    end = end or start + timedelta(days=6)
    if end < start:
        raise HouseholdException(
            message="end must not be before start",
            code="INVALID_DATE_RANGE",
            status_code=400,
            suggestion="Pass end >= start, e.g. ?start=2024-01-15&end=2024-01-21",
            details={"start": start.isoformat(), "end": end.isoformat()},
        )
    return service.get_meal_plan(start, end)


@router.post("", response_model=MealPlanEntry, status_code=201)
def add_entry(entry: MealPlanEntry, service: HouseholdDep):
    created = service.add_meal_plan_entry(entry)
    if created is None:
        raise NoRowReturnedError(MealPlanEntry.table_name)
    return created


@router.delete("/{entry_id}", status_code=204)
def delete_entry(entry_id: str, service: HouseholdDep) -> None:
    service.delete_meal_plan_entry(entry_id)
