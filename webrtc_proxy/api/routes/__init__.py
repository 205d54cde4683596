"""Routes for the proxy API."""

from webrtc_proxy.api.routes import system, webrtc

__all__ = ["system", "webrtc"]
