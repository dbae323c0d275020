# =============================================================================
# app/auth/routes.py - Authentication Routes
# =============================================================================
# Sign in / sign up / sign out against Supabase Auth. Sign-in returns the
# access token that every protected route expects as a bearer token.
#
# Each route that changes the session calls notify_auth_state_changed()
# afterwards so subscribers see the new principal.
# =============================================================================

import logging

from fastapi import APIRouter, Depends

from app.auth.dependencies import get_current_user
from app.auth.models import AuthUser, Credentials, SessionResponse
from app.dependencies import AuthStateDep, HouseholdDep
from app.exceptions import InvalidCredentialsError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Auth"])


def _session_response(provider, session) -> SessionResponse:
    state = provider.notify_auth_state_changed()
    return SessionResponse(
        authenticated=state.principal.is_authenticated,
        user=AuthUser.from_principal(state.principal),
        access_token=session.access_token,
        expires_at=session.expires_at,
    )


@router.post("/sign-in", response_model=SessionResponse)
def sign_in(body: Credentials, service: HouseholdDep, provider: AuthStateDep):
    """
    Sign in with e-mail and password.

    Raises:
        401: If Supabase does not issue a session
    """
    session = service.sign_in(body.email, body.password)
    if session is None:
        raise InvalidCredentialsError(body.email)
    return _session_response(provider, session)


@router.post("/sign-up", response_model=SessionResponse)
def sign_up(body: Credentials, service: HouseholdDep, provider: AuthStateDep):
    """
    Register a new account.

    When the project requires e-mail confirmation no session is issued;
    the response then reports authenticated=false.
    """
    session = service.sign_up(body.email, body.password)
    if session is None:
        logger.info(f"Sign-up for {body.email} returned no session")
        return SessionResponse(authenticated=False)
    return _session_response(provider, session)


@router.post("/sign-out", status_code=204, dependencies=[Depends(get_current_user)])
def sign_out(service: HouseholdDep, provider: AuthStateDep) -> None:
    """Sign out. Only the holder of the session token may do this."""
    service.sign_out()
    provider.notify_auth_state_changed()


@router.get("/me", response_model=AuthUser)
def get_current_user_info(user: AuthUser = Depends(get_current_user)) -> AuthUser:
    """
    Get the signed-in user.

    Raises:
        401: If not authenticated
    """
    return user
