"""WebRTC session Pydantic models.

These models describe the negotiation contract between browser, proxy and
Roboflow. Wire names are camelCase (what the browser SDK sends); Python
attributes are snake_case.
"""

from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class SessionOffer(BaseModel):
    """Browser-generated WebRTC offer. Opaque to the proxy, forwarded as-is."""

    sdp: str = Field(..., min_length=1, description="SDP offer body")
    type: str = Field(..., min_length=1, description="SDP type, normally 'offer'")


class SpecWorkflow(BaseModel):
    """Workflow identified by an inline specification."""

    kind: Literal["spec"] = "spec"
    workflow_spec: Dict[str, Any] = Field(
        ...,
        description="Inline workflow definition (version, inputs, steps, outputs)"
    )


class WorkspaceWorkflow(BaseModel):
    """Workflow identified by a saved workspace/workflow pair."""

    kind: Literal["workspace"] = "workspace"
    workspace_name: str = Field(..., min_length=1)
    workflow_id: str = Field(..., min_length=1)


WorkflowSource = Annotated[
    Union[SpecWorkflow, WorkspaceWorkflow], Field(discriminator="kind")
]


class WorkerConfig(BaseModel):
    """Auxiliary config block forwarded with the workflow identification."""

    model_config = ConfigDict(populate_by_name=True)

    image_input_name: str = Field("image", min_length=1, alias="imageInputName")
    stream_output_names: List[str] = Field(default_factory=list, alias="streamOutputNames")
    data_output_names: Optional[List[str]] = Field(None, alias="dataOutputNames")
    workflow_parameters: Optional[Dict[str, Any]] = Field(None, alias="workflowParameters")
    thread_pool_workers: Optional[int] = Field(None, ge=1, alias="threadPoolWorkers")


class WorkflowParams(BaseModel):
    """Validated wrtcParams: exactly one workflow source plus its config."""

    workflow: WorkflowSource
    config: WorkerConfig


class InitWebRTCRequest(BaseModel):
    """Validated body of POST /api/init-webrtc."""

    offer: SessionOffer
    params: WorkflowParams
