"""Session initiator interface and its Roboflow implementation.

The proxy service only depends on ``SessionInitiator``; the Roboflow-backed
implementation is the default, and tests swap in fakes through the factory.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Optional

from webrtc_proxy.config import Config
from webrtc_proxy.integrations.roboflow import RoboflowWebRTCClient
from webrtc_proxy.models import SessionOffer, WorkflowParams


class SessionInitiator(ABC):
    """Starts a remote WebRTC worker for a browser offer."""

    @abstractmethod
    async def initialize(self, offer: SessionOffer, params: WorkflowParams) -> Dict[str, Any]:
        """Negotiate a session.

        Args:
            offer: Validated browser offer
            params: Workflow identification and worker config

        Returns:
            The vendor's answer, unmodified
        """
        pass


class RoboflowSessionInitiator(SessionInitiator):
    """SessionInitiator backed by RoboflowWebRTCClient."""

    def __init__(self, client: RoboflowWebRTCClient):
        self.client = client

    @classmethod
    def from_credentials(cls, api_key: str, server_url: Optional[str] = None) -> "RoboflowSessionInitiator":
        """Build an initiator with a fresh client for this request."""
        client = RoboflowWebRTCClient.init(
            api_key=api_key,
            server_url=server_url,
            timeout=Config.roboflow_request_timeout(),
        )
        return cls(client)

    async def initialize(self, offer: SessionOffer, params: WorkflowParams) -> Dict[str, Any]:
        return await self.client.initialise_webrtc_worker(
            offer=offer.model_dump(),
            workflow=params.workflow,
            config=params.config,
        )


# (api_key, server_url) -> SessionInitiator
InitiatorFactory = Callable[[str, Optional[str]], SessionInitiator]


def default_initiator_factory(api_key: str, server_url: Optional[str] = None) -> SessionInitiator:
    return RoboflowSessionInitiator.from_credentials(api_key, server_url)
