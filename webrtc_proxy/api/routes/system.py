"""System routes for the proxy API."""

from fastapi import APIRouter

from webrtc_proxy.infrastructure.health import get_health_status
from webrtc_proxy.models import HealthResponse

router = APIRouter(prefix="/api", tags=["System"])


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Readiness check. Reports whether the API key is configured, never its value."""
    return get_health_status()
