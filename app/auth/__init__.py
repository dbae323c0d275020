# =============================================================================
# app/auth/__init__.py - Authentication Module
# =============================================================================
# Claims principal built from the Supabase session, plus the provider
# that publishes auth-state changes.
#
# Route guards live in app.auth.dependencies:
#
#   from app.auth.dependencies import get_current_user
#
#   @router.get("/protected")
#   async def protected(user: AuthUser = Depends(get_current_user)):
#       return {"user_id": user.id}
# =============================================================================

from app.auth.models import (
    AuthenticationState,
    AuthUser,
    Claim,
    ClaimType,
    Principal,
)
from app.auth.state import AuthStateProvider

__all__ = [
    "AuthenticationState",
    "AuthStateProvider",
    "AuthUser",
    "Claim",
    "ClaimType",
    "Principal",
]
