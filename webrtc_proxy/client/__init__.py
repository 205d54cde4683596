"""Client-side stream control: state machine, camera presets, config assembly.

Mirrors the browser frontend in ``webrtc_proxy/static`` against abstract
connector/view interfaces.
"""

from webrtc_proxy.client.camera import (
    FRAME_RATE_PRESETS,
    RESOLUTION_PRESETS,
    CameraCapabilities,
    CameraDevice,
    CapabilityRange,
    Resolution,
    frame_rate_options,
    resolution_options,
    video_inputs,
)
from webrtc_proxy.client.contracts import StreamConnection, StreamConnector, StreamView
from webrtc_proxy.client.controller import StreamController, StreamSession, StreamState
from webrtc_proxy.client.stream_config import (
    EXAMPLE_WORKFLOW_SPEC,
    PROXY_URL,
    CameraConstraints,
    StreamConfig,
    StreamForm,
    WorkflowMode,
    build_stream_config,
    build_wrtc_params,
)

__all__ = [
    # Camera
    "Resolution",
    "CameraDevice",
    "CapabilityRange",
    "CameraCapabilities",
    "RESOLUTION_PRESETS",
    "FRAME_RATE_PRESETS",
    "video_inputs",
    "resolution_options",
    "frame_rate_options",
    # Config
    "PROXY_URL",
    "EXAMPLE_WORKFLOW_SPEC",
    "WorkflowMode",
    "StreamForm",
    "CameraConstraints",
    "StreamConfig",
    "build_wrtc_params",
    "build_stream_config",
    # Controller
    "StreamConnection",
    "StreamConnector",
    "StreamView",
    "StreamState",
    "StreamSession",
    "StreamController",
]
