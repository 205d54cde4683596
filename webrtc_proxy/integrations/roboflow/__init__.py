"""Roboflow integration."""

from webrtc_proxy.integrations.roboflow.client import INIT_WEBRTC_PATH, RoboflowWebRTCClient

__all__ = ["RoboflowWebRTCClient", "INIT_WEBRTC_PATH"]
