"""Middleware for the WebRTC proxy."""

from webrtc_proxy.api.middleware.request_id import request_id_middleware

__all__ = ["request_id_middleware"]
