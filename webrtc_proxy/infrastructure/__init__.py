"""Infrastructure modules for the WebRTC proxy.

- Health: readiness and credential checks
"""

from webrtc_proxy.infrastructure.health import check_api_key_configured, get_health_status

__all__ = ["check_api_key_configured", "get_health_status"]
