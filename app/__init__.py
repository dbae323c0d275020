# =============================================================================
# app/ - FastAPI Application Package
# =============================================================================
# This package contains the web boundary of the household app:
# - main.py: App factory, middleware setup, error handlers
# - bootstrap.py: Composition root (Supabase client, service, auth state)
# - config.py: Environment variable loading and settings
# - auth/: Claims principal, auth state provider, auth routes
# - routers/: API endpoint definitions organized by feature
#
# The app layer is thin - it handles HTTP concerns and delegates
# data access to core/services/household_service.py.
# =============================================================================
