# =============================================================================
# lib/supabase_client.py - Supabase Client Wrapper
# =============================================================================
# This module owns the single Supabase SDK handle used by the application.
# The handle is created once by an explicit initialize() call during
# startup and then shared by the household service and the auth state
# provider through dependency injection.
#
# The wrapper exposes the SDK's two collaborators:
# - auth: sign in / sign up / sign out, current session
# - table(): PostgREST query builder for one table
#
# Realtime is never connected; every read goes to the REST endpoint.
#
# Usage:
#   from lib.supabase_client import SupabaseClient
#   supabase = SupabaseClient.from_settings(settings)
#   supabase.initialize()
#   rows = supabase.table("todos").select("*").execute().data
# =============================================================================

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from supabase import Client, ClientOptions, create_client

if TYPE_CHECKING:
    from app.config import Settings

# Set up logging for this module
logger = logging.getLogger(__name__)


class SupabaseClientError(Exception):
    """
    Error while creating or using the Supabase client handle.

    Provides actionable error messages following the principle:
    "Errors should tell HOW to fix, not just WHAT failed."
    """

    def __init__(
        self,
        message: str,
        code: str = "SUPABASE_ERROR",
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
            result += f" Suggestion: {self.suggestion}"
        return result


class SupabaseClient:
    """
    Holder for the long-lived Supabase SDK client.

    One instance is built per process and initialized once before the
    API starts serving requests. Nothing here caches rows.

    Example:
        supabase = SupabaseClient(url, anon_key)
        supabase.initialize()
        session = supabase.auth.get_session()
    """

    def __init__(
        self,
        url: str,
        key: str,
        auto_refresh_token: bool = True,
        persist_session: bool = True,
    ):
        self.url = url
        self._key = key
        self._auto_refresh_token = auto_refresh_token
        self._persist_session = persist_session
        self._client: Client | None = None

    @classmethod
    def from_settings(cls, settings: Settings) -> SupabaseClient:
        """Build an uninitialized wrapper from application settings."""
        return cls(
            settings.SUPABASE_URL,
            settings.SUPABASE_ANON_KEY,
            auto_refresh_token=settings.SUPABASE_AUTO_REFRESH_TOKEN,
            persist_session=settings.SUPABASE_PERSIST_SESSION,
        )

    @property
    def is_initialized(self) -> bool:
        return self._client is not None

    def initialize(self) -> Client:
        """
        Create the SDK client. Calling it again is a no-op.

        Uses the anon key, so every query runs under Row Level Security
        as the signed-in user.

        Returns:
            Client: Supabase client instance

        Raises:
            SupabaseClientError: If client creation fails
        """
        if self._client is None:
            options = ClientOptions(
                auto_refresh_token=self._auto_refresh_token,
                persist_session=self._persist_session,
            )
            try:
                self._client = create_client(self.url, self._key, options=options)
            except Exception as e:
                raise SupabaseClientError(
                    message=f"Failed to create Supabase client: {e}",
                    code="CLIENT_INIT_FAILED",
                    suggestion="Check SUPABASE_URL and SUPABASE_ANON_KEY in your .env file",
                    details={"url": self.url},
                ) from e
            logger.info(f"Supabase client initialized for {self.url}")
        return self._client

    @property
    def client(self) -> Client:
        """
        The initialized SDK client.

        Raises:
            SupabaseClientError: If initialize() has not been called
        """
        if self._client is None:
            raise SupabaseClientError(
                message="Supabase client used before initialization",
                code="CLIENT_NOT_INITIALIZED",
                suggestion="Call SupabaseClient.initialize() during startup",
            )
        return self._client

    @property
    def auth(self) -> Any:
        """The SDK auth client (sign in/out, sessions)."""
        return self.client.auth

    def table(self, name: str) -> Any:
        """Start a PostgREST request builder for one table."""
        return self.client.table(name)
