"""Root and health endpoints."""

from fastapi import APIRouter

from core.constants import (
    API_PREFIX,
    API_MESSAGE_ROOT,
    API_STATUS_UP,
    ENDPOINT_ROOT,
    ENDPOINT_HEALTH,
)

router = APIRouter(prefix=API_PREFIX, tags=["system"])


def create_root_response() -> dict:
    """Create root endpoint response."""
    return {"message": API_MESSAGE_ROOT}


def create_health_check_response() -> dict:
    """Create health check response."""
    return {"status": API_STATUS_UP}


@router.get(ENDPOINT_ROOT, summary="Root endpoint")
async def root_endpoint():
    """Root endpoint confirming the API is running."""
    return create_root_response()


@router.get(ENDPOINT_HEALTH, summary="Health check")
async def health_check_endpoint():
    """Health check endpoint for monitoring."""
    return create_health_check_response()
