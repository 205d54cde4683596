"""FastAPI dependencies for the WebRTC proxy.

Dependency injection functions for route handlers.
"""

from fastapi import Request

from webrtc_proxy.core.webrtc import WebRTCProxyService


def get_proxy_service(request: Request) -> WebRTCProxyService:
    """Get the WebRTCProxyService from app state.

    Note:
        Falls back to a default service when app.state has none, so routers
        mounted on a bare app still work. Set via create_app().
    """
    service = getattr(request.app.state, "proxy_service", None)
    if service is None:
        service = WebRTCProxyService()
        request.app.state.proxy_service = service
    return service
