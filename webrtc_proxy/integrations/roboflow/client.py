"""Roboflow WebRTC client for the proxy.

Calls the hosted inference server's ``/initialise_webrtc_worker`` endpoint with the
server-held API key attached. The browser never sees the key: it only receives
the answer this call returns.
"""

from typing import Any, Dict, Optional, Union

import httpx

from webrtc_proxy.config import DEFAULT_REQUEST_TIMEOUT, DEFAULT_ROBOFLOW_SERVER_URL
from webrtc_proxy.core.errors import UpstreamError
from webrtc_proxy.models import SpecWorkflow, WorkerConfig, WorkspaceWorkflow

INIT_WEBRTC_PATH = "/initialise_webrtc_worker"


class RoboflowWebRTCClient:
    """Thin async client for Roboflow's WebRTC worker initialization.

    One instance per request; an ``httpx.AsyncClient`` is opened per call.
    """

    def __init__(
        self,
        api_key: str,
        server_url: Optional[str] = None,
        timeout: float = DEFAULT_REQUEST_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize Roboflow client.

        Args:
            api_key: Roboflow API key (server-side only)
            server_url: Optional inference server base URL
            timeout: Request timeout in seconds
            transport: Optional httpx transport (used by tests)

        Raises:
            ValueError: If API key is empty
        """
        if not api_key:
            raise ValueError("Roboflow API key required. Set ROBOFLOW_API_KEY environment variable.")

        self.api_key = api_key
        self.server_url = (server_url or DEFAULT_ROBOFLOW_SERVER_URL).rstrip("/")
        self.timeout = timeout
        self._transport = transport

    @classmethod
    def init(cls, api_key: str, server_url: Optional[str] = None, **kwargs: Any) -> "RoboflowWebRTCClient":
        """Create a client from credentials."""
        return cls(api_key=api_key, server_url=server_url, **kwargs)

    def __repr__(self) -> str:
        return f"RoboflowWebRTCClient(server_url={self.server_url!r})"

    def build_payload(
        self,
        offer: Dict[str, str],
        workflow: Union[SpecWorkflow, WorkspaceWorkflow],
        config: WorkerConfig,
    ) -> Dict[str, Any]:
        """Build the initialise_webrtc_worker request body."""
        workflow_configuration: Dict[str, Any] = {
            "type": "WorkflowConfiguration",
            "image_input_name": config.image_input_name,
            "workflows_parameters": config.workflow_parameters,
            "cancel_thread_pool_tasks_on_exit": True,
        }
        if isinstance(workflow, SpecWorkflow):
            workflow_configuration["workflow_specification"] = workflow.workflow_spec
        else:
            workflow_configuration["workspace_name"] = workflow.workspace_name
            workflow_configuration["workflow_id"] = workflow.workflow_id
        if config.thread_pool_workers is not None:
            workflow_configuration["workflows_thread_pool_workers"] = config.thread_pool_workers

        return {
            "workflow_configuration": workflow_configuration,
            "api_key": self.api_key,
            "webrtc_realtime_processing": True,
            "webrtc_offer": {"sdp": offer["sdp"], "type": offer["type"]},
            "stream_output": list(config.stream_output_names),
            "data_output": list(config.data_output_names or []),
        }

    async def initialise_webrtc_worker(
        self,
        offer: Dict[str, str],
        workflow: Union[SpecWorkflow, WorkspaceWorkflow],
        config: WorkerConfig,
    ) -> Dict[str, Any]:
        """Start a WebRTC worker and return Roboflow's answer unchanged.

        Args:
            offer: {"sdp", "type"} from the browser
            workflow: Inline spec or workspace/workflow pair
            config: Image input, outputs, parameters, thread pool size

        Returns:
            Answer dict: sdp, type, context {request_id, pipeline_id}

        Raises:
            UpstreamError: On transport failure, non-2xx status or non-JSON body
        """
        payload = self.build_payload(offer, workflow, config)
        url = f"{self.server_url}{INIT_WEBRTC_PATH}"

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.post(url, json=payload)
        except httpx.HTTPError as e:
            raise UpstreamError(f"Roboflow API request failed: {str(e) or type(e).__name__}") from e

        if response.is_error:
            raise UpstreamError(_error_message(response))

        try:
            return response.json()
        except ValueError as e:
            raise UpstreamError("Roboflow API returned an invalid JSON response") from e


def _error_message(response: httpx.Response) -> str:
    """Extract the vendor's error text, falling back to the status code."""
    fallback = f"Roboflow API returned HTTP {response.status_code}"
    try:
        body = response.json()
    except ValueError:
        return fallback

    if isinstance(body, dict):
        for key in ("message", "error", "detail"):
            value = body.get(key)
            if isinstance(value, str) and value.strip():
                return value
    return fallback
