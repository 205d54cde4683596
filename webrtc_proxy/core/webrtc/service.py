"""WebRTC proxy service.

Validates the browser's request, attaches the server-held credential and forwards
a single initialization call. No retries: the browser decides what to do with a
failure.
"""

from typing import Any, Dict, Optional

from webrtc_proxy.config import Config
from webrtc_proxy.core.errors import ConfigError, ProxyError, UpstreamError
from webrtc_proxy.core.logging import get_logger
from webrtc_proxy.core.webrtc.initiator import InitiatorFactory, default_initiator_factory
from webrtc_proxy.core.webrtc.validation import parse_init_request

logger = get_logger(component="webrtc_proxy_service")

API_KEY_MISSING_MESSAGE = "Server configuration error: API key not configured"


class WebRTCProxyService:
    """Forwards WebRTC initialization requests to the vendor."""

    def __init__(self, initiator_factory: Optional[InitiatorFactory] = None):
        """Initialize service.

        Args:
            initiator_factory: Builds a SessionInitiator from (api_key, server_url).
                Defaults to the Roboflow-backed initiator.
        """
        self.initiator_factory = initiator_factory or default_initiator_factory

    async def init_webrtc(self, payload: Any) -> Dict[str, Any]:
        """Run one proxied initialization.

        Args:
            payload: Raw decoded request body

        Returns:
            Vendor answer, unchanged

        Raises:
            BadRequestError: Payload failed validation
            ConfigError: ROBOFLOW_API_KEY not set
            UpstreamError: Vendor call failed
        """
        request = parse_init_request(payload)

        api_key = Config.roboflow_api_key()
        if not api_key:
            logger.error("api_key_missing", variable="ROBOFLOW_API_KEY")
            raise ConfigError(API_KEY_MISSING_MESSAGE)

        workflow = request.params.workflow
        logger.info(
            "webrtc_worker_initializing",
            workflow_kind=workflow.kind,
            workflow_id=getattr(workflow, "workflow_id", None),
        )

        try:
            initiator = self.initiator_factory(api_key, Config.roboflow_server_url())
            answer = await initiator.initialize(request.offer, request.params)
        except ProxyError as e:
            logger.error("webrtc_worker_init_failed", error=e.message)
            raise
        except Exception as e:
            error = UpstreamError.from_exception(e)
            logger.error("webrtc_worker_init_failed", error=error.message, error_type=type(e).__name__)
            raise error from e

        context = answer.get("context") if isinstance(answer, dict) else None
        logger.info(
            "webrtc_worker_initialized",
            pipeline_id=context.get("pipeline_id") if isinstance(context, dict) else None,
        )
        return answer
