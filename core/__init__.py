# =============================================================================
# core/ - Household Domain Package
# =============================================================================
# This package contains framework-agnostic code:
# - models/: Frozen pydantic records, one per Supabase table
# - services/: HouseholdService, the typed CRUD gateway
#
# Code in this package should NOT import from FastAPI.
# This keeps the logic testable and reusable.
# =============================================================================
