# =============================================================================
# lib/utils.py - Shared Utilities
# =============================================================================
# Common utilities used across the application.
# =============================================================================

from datetime import date, datetime
from typing import Annotated, Any
from uuid import UUID

from pydantic import StringConstraints


# =============================================================================
# Identifier / Date Utilities
# =============================================================================

def normalize_id(value: str | UUID) -> str:
    """
    Normalize a row identifier to string format.

    Supabase returns UUID primary keys as strings, but callers may hold
    UUID objects (e.g. from FastAPI path parameters).

    Example:
        normalize_id(uuid_obj)         # "550e8400-..."
        normalize_id("550e8400-...")   # "550e8400-..."
    """
    return str(value) if isinstance(value, UUID) else value


def to_date_string(value: date | datetime) -> str:
    """
    Format a date as YYYY-MM-DD for PostgREST date filters.

    Datetimes are truncated to their calendar date, so the time of day
    never affects a range comparison.
    """
    if isinstance(value, datetime):
        value = value.date()
    return value.isoformat()


def clean_optional_text(value: str | None) -> str | None:
    """Strip a free-text value, mapping blank input to None."""
    if value is None or not value.strip():
        return None
    return value.strip()


# Request text that must not be empty once surrounding whitespace is removed
NonBlankStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


# =============================================================================
# Base Error Class
# =============================================================================

class ApplicationError(Exception):
    """
    Base error class for application-specific errors.

    Provides actionable error messages following the principle:
    "Errors should tell HOW to fix, not just WHAT failed."

    Attributes:
        code: Error code for categorization
        message: Human-readable error message
        suggestion: Actionable suggestion for fixing the error
        details: Additional context for debugging
    """

    def __init__(
        self,
        message: str,
        code: str = "APPLICATION_ERROR",
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}

    def __str__(self) -> str:
        result = f"[{self.code}] {self.message}"
        if self.suggestion:
            result += f"\n  Suggestion: {self.suggestion}"
        return result

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for API responses."""
        return {
            "code": self.code,
            "message": self.message,
            "suggestion": self.suggestion,
            "details": self.details,
        }


class ConfigurationError(ApplicationError):
    """Raised at startup when a required setting is missing or invalid."""

    def __init__(self, message: str, missing: list[str] | None = None):
        super().__init__(
            message,
            code="CONFIG_MISSING",
            suggestion="Set SUPABASE_URL and SUPABASE_ANON_KEY in the environment or your .env file",
            details={"missing": missing or []},
        )
