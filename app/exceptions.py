# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the API.
# Following the principle: "Errors should tell HOW to fix, not just WHAT failed."
#
# The household service never translates remote errors; this module is
# where they become HTTP responses.
# =============================================================================

from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse
from postgrest.exceptions import APIError

from lib.utils import ApplicationError


class HouseholdException(ApplicationError):
    """
    Base exception for the household API.

    Adds an HTTP status code to ApplicationError so handlers can return
    structured error responses with actionable suggestions.
    """

    def __init__(
        self,
        message: str,
        code: str = "HOUSEHOLD_ERROR",
        status_code: int = 500,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code=code, suggestion=suggestion, details=details)
        self.status_code = status_code

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        result = {
            "detail": self.message,
            "code": self.code,
        }
        if self.suggestion:
            result["suggestion"] = self.suggestion
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Auth Exceptions
# =============================================================================

class NotAuthenticatedError(HouseholdException):
    """Raised when a protected route is called without a signed-in user."""

    def __init__(self):
        super().__init__(
            message="Not signed in",
            code="NOT_AUTHENTICATED",
            status_code=401,
            suggestion="Sign in with POST /api/v1/auth/sign-in first",
        )


class InvalidCredentialsError(HouseholdException):
    """Raised when Supabase returns no session for the given credentials."""

    def __init__(self, email: str):
        super().__init__(
            message=f"No session issued for {email}",
            code="INVALID_CREDENTIALS",
            status_code=401,
            suggestion="Check the e-mail and password, or confirm the address if you just signed up",
            details={"email": email},
        )


# =============================================================================
# Not Found Exceptions
# =============================================================================

class RecipeNotFoundError(HouseholdException):
    """Raised when a recipe ID doesn't exist (or isn't visible)."""

    def __init__(self, recipe_id: str):
        super().__init__(
            message=f"Recipe not found: {recipe_id}",
            code="RECIPE_NOT_FOUND",
            status_code=404,
            suggestion="Check that the recipe_id is correct and shared with one of your groups",
            details={"recipe_id": recipe_id},
        )


class InviteCodeNotFoundError(HouseholdException):
    """Raised when no group matches an invite code."""

    def __init__(self, invite_code: str):
        super().__init__(
            message="No group matches this invite code",
            code="INVITE_CODE_NOT_FOUND",
            status_code=404,
            suggestion="Ask a group member to share the invite code again",
            details={"invite_code": invite_code},
        )


class NoRowReturnedError(HouseholdException):
    """Raised when an insert comes back without a row (e.g. blocked by RLS)."""

    def __init__(self, table: str):
        super().__init__(
            message=f"Insert into {table} returned no data",
            code="INSERT_NO_DATA",
            status_code=502,
            suggestion="Check the table's Row Level Security policies for inserts",
            details={"table": table},
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def household_exception_handler(
    request: Request,
    exc: HouseholdException
) -> JSONResponse:
    """
    Convert HouseholdException to JSON response.

    Returns structured error with:
    - detail: Human-readable message
    - code: Machine-readable error code
    - suggestion: How to fix (if available)
    - details: Additional context
    """
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def postgrest_exception_handler(
    request: Request,
    exc: APIError
) -> JSONResponse:
    """
    Convert a PostgREST error raised by the household service.

    The remote error code (e.g. 42501 for an RLS violation) is passed
    through so the front end can tell users what happened.
    """
    return JSONResponse(
        status_code=502,
        content={
            "detail": exc.message or "Supabase request failed",
            "code": "SUPABASE_ERROR",
            "details": {"remote_code": exc.code, "hint": exc.hint},
        }
    )
