# =============================================================================
# app/bootstrap.py - Composition Root
# =============================================================================
# Builds the application's object graph once:
#
#   Settings -> SupabaseClient -> HouseholdService -> AuthStateProvider
#
# and creates the Supabase SDK handle before anything is served. The FastAPI
# lifespan in app/main.py calls this; tests build their own container
# around a fake client.
# =============================================================================

import logging
from dataclasses import dataclass

from app.auth.state import AuthStateProvider
from app.config import Settings, load_settings
from core.services.household_service import HouseholdService
from lib.supabase_client import SupabaseClient

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Container:
    """Long-lived services shared by every request."""
    settings: Settings
    supabase: SupabaseClient
    household: HouseholdService
    auth_state: AuthStateProvider


def build_container(settings: Settings | None = None) -> Container:
    """
    Wire the services and initialize the Supabase client.

    Raises:
        ConfigurationError: If the Supabase URL or key is missing
        SupabaseClientError: If the SDK rejects the URL or key
    """
    settings = settings or load_settings()

    supabase = SupabaseClient.from_settings(settings)
    supabase.initialize()

    household = HouseholdService(supabase)
    auth_state = AuthStateProvider(household)

    logger.info(f"Household services ready ({settings.ENVIRONMENT})")
    return Container(
        settings=settings,
        supabase=supabase,
        household=household,
        auth_state=auth_state,
    )
