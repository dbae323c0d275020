# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .household_service import HouseholdService

__all__ = [
    "HouseholdService",
]
