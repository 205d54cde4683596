"""API utilities for the WebRTC proxy."""

from webrtc_proxy.api.utils.static_files import NoCacheStaticFiles, mount_frontend

__all__ = ["NoCacheStaticFiles", "mount_frontend"]
