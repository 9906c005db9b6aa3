# =============================================================================
# app/routers/health.py - Health Check Endpoints
# =============================================================================
# Provides health check endpoints for monitoring and load balancers.
# =============================================================================

import logging
from datetime import datetime, timezone

from fastapi import APIRouter
from pydantic import BaseModel

from app.config import settings
from app.dependencies import UserRepositoryDep

logger = logging.getLogger(__name__)

router = APIRouter()

API_VERSION = "1.0.0"


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
    repository: str
    user_count: int | None = None


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
def health_check():
    """
    Health check endpoint.

    Returns basic health status for load balancers and monitoring.
    """
    return HealthResponse(
        status="healthy",
        timestamp=_now(),
        environment=settings.ENVIRONMENT,
        version=API_VERSION,
    )


@router.get("/health/ready", response_model=ReadinessResponse)
def readiness_check(repository: UserRepositoryDep):
    """
    Readiness check endpoint.

    Checks that the user repository answers a list() call.
    """
    checks = ChecksResponse(repository="unknown")

    try:
        checks.user_count = len(repository.list())
        checks.repository = "healthy"
    except Exception as e:
        logger.warning(f"Repository readiness check failed: {e}")
        checks.repository = f"unhealthy: {str(e)[:50]}"

    return ReadinessResponse(
        status="ready" if checks.repository == "healthy" else "degraded",
        checks=checks,
        timestamp=_now(),
    )
