# =============================================================================
# app/auth/state.py - Authentication State Provider
# =============================================================================
# Adapts the household service's "current user" into a claims Principal.
#
# Two states:
#   Anonymous      - no current user, principal without claims
#   Authenticated  - user present, claims: nameidentifier / email / name
#
# Transitions are driven by the caller: after signing in or out it calls
# notify_auth_state_changed(), which re-queries and publishes the new
# state to every subscriber. There is no polling and no subscription to
# remote auth events.
#
# Usage:
#   provider = AuthStateProvider(service)
#   unsubscribe = provider.subscribe(lambda state: print(state.principal))
#   service.sign_in(email, password)
#   provider.notify_auth_state_changed()
# =============================================================================

import logging
from typing import Callable

from app.auth.models import (
    SUPABASE_AUTH_TYPE,
    AuthenticationState,
    Claim,
    ClaimType,
    Principal,
)
from core.services.household_service import HouseholdService

logger = logging.getLogger(__name__)

AuthStateCallback = Callable[[AuthenticationState], None]


class AuthStateProvider:
    """
    Publishes the current authentication state to subscribers.

    Each subscriber is called with the new AuthenticationState whenever
    notify_auth_state_changed() runs.
    """

    def __init__(self, service: HouseholdService):
        self._service = service
        self._subscribers: list[AuthStateCallback] = []

    def get_authentication_state(self) -> AuthenticationState:
        """
        Build the authentication state from the service's current user.

        Returns:
            AuthenticationState with an anonymous principal when nobody is
            signed in, otherwise a principal carrying the user's claims
        """
        user = self._service.current_user

        if user is None:
            return AuthenticationState(principal=Principal.anonymous())

        email = getattr(user, "email", None) or ""
        claims = (
            Claim(type=ClaimType.NAME_IDENTIFIER, value=getattr(user, "id", None) or ""),
            Claim(type=ClaimType.EMAIL, value=email),
            Claim(type=ClaimType.NAME, value=email),
        )
        principal = Principal(claims=claims, authentication_type=SUPABASE_AUTH_TYPE)
        return AuthenticationState(principal=principal)

    def subscribe(self, callback: AuthStateCallback) -> Callable[[], None]:
        """
        Register a callback for state changes.

        Returns:
            A function that removes the callback again
        """
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def notify_auth_state_changed(self) -> AuthenticationState:
        """
        Re-query the state and publish it to every subscriber.

        A subscriber that raises is logged and skipped; the others still
        receive the state.

        Returns:
            The state that was published
        """
        state = self.get_authentication_state()
        sent_count = 0

        for callback in list(self._subscribers):
            try:
                callback(state)
                sent_count += 1
            except Exception as e:
                logger.warning(f"Auth state subscriber failed: {e}")

        logger.debug(
            f"Published auth state (authenticated={state.principal.is_authenticated}) "
            f"to {sent_count} subscribers"
        )
        return state
