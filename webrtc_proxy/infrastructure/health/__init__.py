"""Health monitoring module for the WebRTC proxy."""

from webrtc_proxy.infrastructure.health.checks import check_api_key_configured
from webrtc_proxy.infrastructure.health.endpoints import get_health_status

__all__ = ["check_api_key_configured", "get_health_status"]
