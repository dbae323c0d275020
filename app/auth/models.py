# =============================================================================
# app/auth/models.py - Authentication Models
# =============================================================================
# Claims-based view of the signed-in Supabase user, consumed by
# authorization checks in the HTTP layer.
# =============================================================================

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


class ClaimType(str, Enum):
    """Claim types carried by an authenticated principal."""
    NAME_IDENTIFIER = "nameidentifier"
    EMAIL = "email"
    NAME = "name"


# Authentication type stamped on identities built from a Supabase session
SUPABASE_AUTH_TYPE = "supabase"


class Claim(BaseModel):
    """One (type, value) statement about the user."""
    model_config = ConfigDict(frozen=True)

    type: ClaimType
    value: str


class Principal(BaseModel):
    """
    Identity presented to authorization checks.

    An identity is authenticated exactly when it has an authentication
    type; the anonymous principal has neither a type nor claims.
    """
    model_config = ConfigDict(frozen=True)

    claims: tuple[Claim, ...] = ()
    authentication_type: Optional[str] = None

    @classmethod
    def anonymous(cls) -> "Principal":
        return cls()

    @property
    def is_authenticated(self) -> bool:
        return self.authentication_type is not None

    def find_first(self, claim_type: ClaimType) -> Optional[str]:
        """Value of the first claim of this type, if any."""
        for claim in self.claims:
            if claim.type == claim_type:
                return claim.value
        return None

    @property
    def user_id(self) -> Optional[str]:
        return self.find_first(ClaimType.NAME_IDENTIFIER)

    @property
    def email(self) -> Optional[str]:
        return self.find_first(ClaimType.EMAIL)

    @property
    def name(self) -> Optional[str]:
        return self.find_first(ClaimType.NAME)


class AuthenticationState(BaseModel):
    """Snapshot published to auth-state subscribers."""
    model_config = ConfigDict(frozen=True)

    principal: Principal


class AuthUser(BaseModel):
    """
    Minimal user info for API responses.

    Built from the principal, without querying the database.
    """
    model_config = ConfigDict(frozen=True)

    id: str
    email: Optional[str] = None
    display_name: Optional[str] = None

    @classmethod
    def from_principal(cls, principal: Principal) -> "AuthUser":
        return cls(
            id=principal.user_id or "",
            email=principal.email or None,
            display_name=principal.name or None,
        )


class Credentials(BaseModel):
    """E-mail/password pair for sign-in and sign-up."""
    email: str
    password: str


class SessionResponse(BaseModel):
    """Result of a sign-in or sign-up attempt."""
    authenticated: bool
    user: Optional[AuthUser] = None
    access_token: Optional[str] = None
    expires_at: Optional[int] = None
