# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable utilities:
# - supabase_client.py: Owner of the single Supabase SDK handle
# - utils.py: Shared utilities (error base class, id/date normalization)
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.supabase_client import SupabaseClient, SupabaseClientError
from lib.utils import (
    ApplicationError,
    ConfigurationError,
    NonBlankStr,
    clean_optional_text,
    normalize_id,
    to_date_string,
)

__all__ = [
    # Supabase
    "SupabaseClient",
    "SupabaseClientError",
    # Utils
    "ApplicationError",
    "ConfigurationError",
    "NonBlankStr",
    "clean_optional_text",
    "normalize_id",
    "to_date_string",
]
