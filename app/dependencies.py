# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# The container is built in the app lifespan and stored on app.state;
# these getters hand its services to route handlers via Depends().
# =============================================================================

from typing import Annotated

from fastapi import Depends, Request

from app.auth.state import AuthStateProvider
from app.bootstrap import Container
from core.services.household_service import HouseholdService


def get_container(request: Request) -> Container:
    """Container built at startup."""
    return request.app.state.container


def get_household_service(
    container: Container = Depends(get_container),
) -> HouseholdService:
    return container.household


def get_auth_state_provider(
    container: Container = Depends(get_container),
) -> AuthStateProvider:
    return container.auth_state


# Type aliases for dependency injection
HouseholdDep = Annotated[HouseholdService, Depends(get_household_service)]
AuthStateDep = Annotated[AuthStateProvider, Depends(get_auth_state_provider)]
