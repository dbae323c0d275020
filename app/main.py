# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Household Hub API, the boundary a
# front end uses to reach the household service.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --reload
#
# Startup order: settings are validated first (missing Supabase URL/key
# stops the process), then the lifespan builds the container and
# initializes the Supabase client before the first request is served.
# =============================================================================

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from postgrest.exceptions import APIError

from app.auth import routes as auth_routes
from app.bootstrap import Container, build_container
from app.config import Settings, load_settings
from app.exceptions import (
    HouseholdException,
    household_exception_handler,
    postgrest_exception_handler,
)
from app.routers import groups, health, meal_plans, recipes, shopping, todos

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=logging.DEBUG if settings.DEBUG else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    - Startup: build the container and initialize the Supabase client once
    - Shutdown: nothing to release; the SDK handle ends with the process
    """
    if getattr(app.state, "container", None) is None:
        app.state.container = build_container(app.state.settings)

    logger.info(f"Starting Household Hub API in {app.state.settings.ENVIRONMENT} mode")
    yield
    logger.info("Shutting down Household Hub API")


def create_app(container: Container | None = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        container: Pre-built services (tests); built in the lifespan otherwise

    Raises:
        ConfigurationError: If required settings are missing
    """
    settings = container.settings if container else load_settings()
    configure_logging(settings)

    app = FastAPI(
        title="Household Hub API",
        description="Groups, shopping lists, recipes, meal plans and todos backed by Supabase.",
        version=health.VERSION,
        lifespan=lifespan,
        openapi_tags=[
            {"name": "Auth", "description": "Sign in, sign up, sign out"},
            {"name": "Groups", "description": "Households, invite codes and members"},
            {"name": "Shopping", "description": "Shared shopping list"},
            {"name": "Recipes", "description": "Recipes and ingredients"},
            {"name": "Meal Plans", "description": "Weekly meal plan"},
            {"name": "Todos", "description": "Household todos"},
            {"name": "Health", "description": "API health and readiness checks"},
        ],
    )
    app.state.settings = settings
    app.state.container = container

    # =========================================================================
    # Middleware
    # =========================================================================

    app.add_middleware(
        CORSMiddleware,
        # Requests authenticate with a bearer token, never cookies
        allow_origins=settings.cors_origins_list,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # =========================================================================
    # Exception Handlers
    # =========================================================================

    app.add_exception_handler(HouseholdException, household_exception_handler)
    app.add_exception_handler(APIError, postgrest_exception_handler)

    @app.exception_handler(Exception)
    async def handle_general_exception(request: Request, exc: Exception):
        """Handle unexpected exceptions."""
        logger.exception(f"Unexpected error: {exc}")
        return JSONResponse(
            status_code=500,
            content={
                "detail": "An unexpected error occurred",
                "code": "INTERNAL_ERROR",
            }
        )

    # =========================================================================
    # Routers
    # =========================================================================

    app.include_router(auth_routes.router, prefix="/api/v1")
    app.include_router(health.router, prefix="/api/v1", tags=["Health"])
    app.include_router(groups.router, prefix="/api/v1/groups", tags=["Groups"])
    app.include_router(shopping.router, prefix="/api/v1/shopping-list", tags=["Shopping"])
    app.include_router(recipes.router, prefix="/api/v1/recipes", tags=["Recipes"])
    app.include_router(meal_plans.router, prefix="/api/v1/meal-plans", tags=["Meal Plans"])
    app.include_router(todos.router, prefix="/api/v1/todos", tags=["Todos"])

    @app.get("/", tags=["Root"])
    def root():
        """
        Root endpoint - returns API info.
        """
        return {
            "name": "Household Hub API",
            "version": health.VERSION,
            "docs": "/docs",
            "health": "/api/v1/health",
        }

    return app


app = create_app()
