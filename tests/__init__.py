# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the household app:
# - test_models.py: Row model validation and serialization
# - test_household_service.py: Gateway behaviour against an in-memory PostgREST fake
# - test_auth_state.py: Claims principal and subscribe/notify
# - test_config.py: Settings and fail-fast startup
# - test_routes.py: FastAPI endpoints via TestClient
#
# Run tests with: pytest
# =============================================================================
