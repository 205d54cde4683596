"""Pydantic models for the WebRTC proxy.

- webrtc: offer, workflow identification and worker config models
- health: readiness response
"""

from webrtc_proxy.models.health import HealthResponse
from webrtc_proxy.models.webrtc import (
    InitWebRTCRequest,
    SessionOffer,
    SpecWorkflow,
    WorkerConfig,
    WorkflowParams,
    WorkflowSource,
    WorkspaceWorkflow,
)

__all__ = [
    "SessionOffer",
    "SpecWorkflow",
    "WorkspaceWorkflow",
    "WorkflowSource",
    "WorkerConfig",
    "WorkflowParams",
    "InitWebRTCRequest",
    "HealthResponse",
]
