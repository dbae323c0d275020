# =============================================================================
# app/routers/health.py - Health Check Endpoints
# =============================================================================
# Provides health check endpoints for monitoring and local tooling.
# =============================================================================

from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from app.bootstrap import Container
from app.dependencies import get_container

router = APIRouter()

VERSION = "1.0.0"


# =============================================================================
# Response Models
# =============================================================================

class HealthResponse(BaseModel):
    """Basic health check response."""
    status: str
    timestamp: str
    environment: str
    version: str


class ChecksResponse(BaseModel):
    """Individual service checks."""
    client: str
    database: str


class ReadinessResponse(BaseModel):
    """Readiness check response."""
    status: str
    checks: ChecksResponse
    timestamp: str


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


# =============================================================================
# Endpoints
# =============================================================================

@router.get("/health", response_model=HealthResponse)
def health_check(container: Container = Depends(get_container)):
    """
    Health check endpoint.

    Returns basic health status without touching Supabase.
    """
    return HealthResponse(
        status="healthy",
        timestamp=_now(),
        environment=container.settings.ENVIRONMENT,
        version=VERSION,
    )


@router.get("/health/ready", response_model=ReadinessResponse)
def readiness_check(container: Container = Depends(get_container)):
    """
    Readiness check endpoint.

    Checks that the Supabase client was initialized and that the REST
    endpoint answers a one-row query.
    """
    checks = ChecksResponse(client="unknown", database="unknown")

    checks.client = "healthy" if container.supabase.is_initialized else "not initialized"

    try:
        container.supabase.table("groups").select("id").limit(1).execute()
        checks.database = "healthy"
    except Exception as e:
        checks.database = f"unhealthy: {str(e)[:50]}"

    all_healthy = checks.client == "healthy" and checks.database == "healthy"

    return ReadinessResponse(
        status="ready" if all_healthy else "degraded",
        checks=checks,
        timestamp=_now(),
    )
