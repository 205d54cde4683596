"""Request validation for WebRTC initialization.

Checks run in a fixed order and stop at the first failure:
offer first, then workflow identification, then the remaining config fields.
"""

from typing import Any, Dict, Union

from pydantic import ValidationError

from webrtc_proxy.core.errors import BadRequestError
from webrtc_proxy.models import (
    InitWebRTCRequest,
    SessionOffer,
    SpecWorkflow,
    WorkerConfig,
    WorkflowParams,
    WorkspaceWorkflow,
)

OFFER_MISSING_MESSAGE = "Missing required field: offer with sdp and type"
WORKFLOW_MISSING_MESSAGE = (
    "Missing required field: wrtcParams with workflowSpec or workspaceName and workflowId"
)
WORKFLOW_AMBIGUOUS_MESSAGE = (
    "Ambiguous workflow identification: provide workflowSpec or "
    "workspaceName and workflowId, not both"
)


def _describe(error: ValidationError) -> str:
    """Flatten pydantic errors into one line: 'field: message; field: message'."""
    parts = []
    for item in error.errors():
        location = ".".join(str(part) for part in item.get("loc", ())) or "wrtcParams"
        parts.append(f"{location}: {item.get('msg', 'invalid value')}")
    return "; ".join(parts)


def parse_offer(raw: Any) -> SessionOffer:
    """Validate the offer. Raises BadRequestError when sdp or type is missing or empty."""
    if not isinstance(raw, dict):
        raise BadRequestError(OFFER_MISSING_MESSAGE)
    try:
        return SessionOffer.model_validate(raw)
    except ValidationError:
        raise BadRequestError(OFFER_MISSING_MESSAGE)


def parse_workflow_source(raw: Dict[str, Any]) -> Union[SpecWorkflow, WorkspaceWorkflow]:
    """Pick exactly one workflow identification mode out of raw wrtcParams."""
    has_spec = raw.get("workflowSpec") is not None
    has_workspace = bool(raw.get("workspaceName")) and bool(raw.get("workflowId"))

    if not has_spec and not has_workspace:
        raise BadRequestError(WORKFLOW_MISSING_MESSAGE)
    if has_spec and has_workspace:
        raise BadRequestError(WORKFLOW_AMBIGUOUS_MESSAGE)

    try:
        if has_spec:
            return SpecWorkflow(workflow_spec=raw["workflowSpec"])
        return WorkspaceWorkflow(
            workspace_name=raw["workspaceName"],
            workflow_id=raw["workflowId"],
        )
    except ValidationError as e:
        raise BadRequestError(f"Invalid wrtcParams: {_describe(e)}")


def parse_workflow_params(raw: Any) -> WorkflowParams:
    """Validate wrtcParams into a WorkflowParams."""
    if not isinstance(raw, dict):
        raise BadRequestError(WORKFLOW_MISSING_MESSAGE)

    workflow = parse_workflow_source(raw)

    try:
        config = WorkerConfig.model_validate(raw)
    except ValidationError as e:
        raise BadRequestError(f"Invalid wrtcParams: {_describe(e)}")

    return WorkflowParams(workflow=workflow, config=config)


def parse_init_request(payload: Any) -> InitWebRTCRequest:
    """Validate a raw POST /api/init-webrtc body.

    Args:
        payload: Decoded JSON body (anything; non-objects fail on the offer check)

    Returns:
        InitWebRTCRequest with the offer and the tagged workflow params

    Raises:
        BadRequestError: On the first failing check
    """
    if not isinstance(payload, dict):
        payload = {}

    offer = parse_offer(payload.get("offer"))
    params = parse_workflow_params(payload.get("wrtcParams"))
    return InitWebRTCRequest(offer=offer, params=params)
