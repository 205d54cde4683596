"""Health check functions for the WebRTC proxy.

Dependency-free: nothing here makes outbound calls.
"""

from typing import Any, Dict

from webrtc_proxy.config import config


def check_api_key_configured() -> Dict[str, Any]:
    """Report whether ROBOFLOW_API_KEY is set.

    Returns:
        Dict with "configured" (bool) and "message". Never includes the key itself.
    """
    if config.is_configured():
        return {"configured": True, "message": "Server is ready"}
    return {"configured": False, "message": "Warning: ROBOFLOW_API_KEY not configured"}
