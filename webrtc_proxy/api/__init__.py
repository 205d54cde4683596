"""HTTP API for the WebRTC proxy."""

from webrtc_proxy.api.app import create_app

__all__ = ["create_app"]
