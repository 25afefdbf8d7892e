"""
Health check route for the Trip Planner backend.

This endpoint is PUBLIC and provides a simple status check for uptime
monitoring and deployment verification. It never touches the upstream
provider.
"""

from fastapi import APIRouter

from trip_planner.schemas.health import HealthResponse
from trip_planner.utils.logging import get_logger

logger = get_logger(__name__)

# Create router with no prefix (mounted at root level in main.py)
router = APIRouter()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check endpoint",
    description="Returns a simple status indicator for monitoring.",
    status_code=200,
    tags=["system"],
)
async def health_check() -> HealthResponse:
    """Public health check endpoint."""
    logger.debug("Health check endpoint called")

    return HealthResponse(status="ok")
