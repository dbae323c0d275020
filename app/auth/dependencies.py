# =============================================================================
# app/auth/dependencies.py - FastAPI Auth Dependencies
# =============================================================================
# Authorization checks for routers, built on the AuthStateProvider.
#
# The process holds one Supabase session. A request acts as that session's
# user only when it presents the session's access token as a bearer token
# (the token returned by /auth/sign-in). Any other request is anonymous.
#
# Usage:
#   from app.auth.dependencies import get_current_user
#
#   @router.get("/protected")
#   def protected(user: AuthUser = Depends(get_current_user)):
#       return {"user_id": user.id}
# =============================================================================

import hmac
import logging
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.auth.models import AuthUser, Principal
from app.auth.state import AuthStateProvider
from app.dependencies import HouseholdDep, get_auth_state_provider
from app.exceptions import NotAuthenticatedError

logger = logging.getLogger(__name__)

# HTTP Bearer token extractor; a missing header means anonymous, not 403
security = HTTPBearer(auto_error=False)


def _holds_session_token(
    credentials: Optional[HTTPAuthorizationCredentials],
    access_token: Optional[str],
) -> bool:
    if credentials is None or not access_token:
        return False
    return hmac.compare_digest(credentials.credentials, access_token)


def get_current_principal(
    service: HouseholdDep,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    provider: AuthStateProvider = Depends(get_auth_state_provider),
) -> Principal:
    """
    Principal for this request.

    Anonymous unless someone is signed in AND the request carries that
    session's access token.
    """
    principal = provider.get_authentication_state().principal
    if not principal.is_authenticated:
        return principal

    session = service.current_session
    access_token = getattr(session, "access_token", None)
    if not _holds_session_token(credentials, access_token):
        logger.debug("Request token does not match the active session")
        return Principal.anonymous()
    return principal


def get_current_user(
    principal: Principal = Depends(get_current_principal),
) -> AuthUser:
    """
    Require a signed-in user.

    Raises:
        NotAuthenticatedError: 401 if the principal is anonymous
    """
    if not principal.is_authenticated:
        logger.debug("Rejected anonymous request to a protected route")
        raise NotAuthenticatedError()
    return AuthUser.from_principal(principal)
