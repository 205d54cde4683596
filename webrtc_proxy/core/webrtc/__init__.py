"""WebRTC proxy core: validation, session initiators and the proxy service."""

from webrtc_proxy.core.webrtc.initiator import (
    InitiatorFactory,
    RoboflowSessionInitiator,
    SessionInitiator,
    default_initiator_factory,
)
from webrtc_proxy.core.webrtc.service import API_KEY_MISSING_MESSAGE, WebRTCProxyService
from webrtc_proxy.core.webrtc.validation import (
    OFFER_MISSING_MESSAGE,
    WORKFLOW_AMBIGUOUS_MESSAGE,
    WORKFLOW_MISSING_MESSAGE,
    parse_init_request,
)

__all__ = [
    "SessionInitiator",
    "RoboflowSessionInitiator",
    "InitiatorFactory",
    "default_initiator_factory",
    "WebRTCProxyService",
    "API_KEY_MISSING_MESSAGE",
    "parse_init_request",
    "OFFER_MISSING_MESSAGE",
    "WORKFLOW_MISSING_MESSAGE",
    "WORKFLOW_AMBIGUOUS_MESSAGE",
]
