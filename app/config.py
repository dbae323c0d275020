# =============================================================================
# app/config.py - Application Settings
# =============================================================================
# This module loads configuration from environment variables using pydantic-settings.
# It provides a single Settings class with all configuration values.
#
# Usage:
#   from app.config import load_settings
#   settings = load_settings()
#   print(settings.SUPABASE_URL)
#
# Environment variables are loaded from:
# 1. System environment variables
# 2. .env file in project root (if exists)
#
# Only the Supabase URL and anon key are required. Startup fails fast with
# a ConfigurationError if either is missing or blank.
# =============================================================================

from functools import lru_cache
from typing import Literal

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from lib.utils import ConfigurationError


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Uses pydantic-settings to:
    - Automatically load from .env file
    - Validate types and constraints
    - Provide sensible defaults for development
    """

    # -------------------------------------------------------------------------
    # Supabase Configuration
    # -------------------------------------------------------------------------
    # These are required - app won't start without them

    SUPABASE_URL: str = Field(
        ...,
        min_length=1,
        description="Supabase project URL (e.g., https://xxx.supabase.co)"
    )

    SUPABASE_ANON_KEY: str = Field(
        ...,
        min_length=1,
        description="Supabase anon/public API key"
    )

    # Refresh the access token in the background before it expires
    SUPABASE_AUTO_REFRESH_TOKEN: bool = Field(
        default=True,
        description="Let the auth client refresh expiring sessions"
    )

    SUPABASE_PERSIST_SESSION: bool = Field(
        default=True,
        description="Keep the signed-in session in the client's storage"
    )

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------

    ENVIRONMENT: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Current environment"
    )

    DEBUG: bool = Field(
        default=False,
        description="Enable debug mode (verbose logging)"
    )

    API_HOST: str = Field(
        default="127.0.0.1",
        description="Host to bind the API server to"
    )

    API_PORT: int = Field(
        default=8000,
        ge=1,
        le=65535,
        description="Port for the API server"
    )

    # CORS origins (comma-separated string that gets parsed)
    CORS_ORIGINS: str = Field(
        default="http://localhost:3000",
        description="Allowed CORS origins (comma-separated)"
    )

    # -------------------------------------------------------------------------
    # Pydantic Settings Configuration
    # -------------------------------------------------------------------------

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        # Treat VAR= as unset so a blank key counts as missing
        env_ignore_empty=True,
        case_sensitive=True,
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def cors_origins_list(self) -> list[str]:
        """
        Parse CORS_ORIGINS string into a list.

        Example: "http://localhost:3000, https://myapp.com" -> ["http://localhost:3000", "https://myapp.com"]
        """
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    """
    Get cached Settings instance.

    Using lru_cache ensures we only parse .env and validate once,
    not on every access.

    Raises:
        ValidationError: If a required setting is missing or invalid
    """
    return Settings()


def load_settings() -> Settings:
    """
    Load settings for startup, converting validation failures into a
    ConfigurationError that names the offending variables.

    Raises:
        ConfigurationError: If SUPABASE_URL or SUPABASE_ANON_KEY is absent
    """
    try:
        return get_settings()
    except ValidationError as e:
        missing = [str(err["loc"][0]) for err in e.errors() if err.get("loc")]
        raise ConfigurationError(
            f"Invalid configuration: {', '.join(missing) or 'unknown setting'}",
            missing=missing,
        ) from e
