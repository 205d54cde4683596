"""Health check endpoint handler for the WebRTC proxy.

Provides the /api/health response body.
"""

from typing import Any, Dict

from webrtc_proxy.models import HealthResponse
from webrtc_proxy.infrastructure.health.checks import check_api_key_configured


def get_health_status() -> Dict[str, Any]:
    """Get readiness status.

    Returns:
        Dict with status ("ok"), apiKeyConfigured and a human-readable message
    """
    credential = check_api_key_configured()
    response = HealthResponse(
        status="ok",
        api_key_configured=credential["configured"],
        message=credential["message"],
    )
    return response.model_dump(by_alias=True)
