"""Stream configuration assembly.

Turns form state into what the connector needs: the proxy URL, camera
constraints and a camelCase ``wrtcParams`` dict with the same shape the proxy
validates.
"""

import copy
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional

from webrtc_proxy.client.camera import Resolution

PROXY_URL = "/api/init-webrtc"
DEFAULT_IMAGE_INPUT = "image"
EXAMPLE_STREAM_OUTPUT = "output_image"

# Instance segmentation on COCO, masks and labels drawn onto the frame
EXAMPLE_WORKFLOW_SPEC: Dict[str, Any] = {
    "version": "1.0",
    "inputs": [{"type": "InferenceImage", "name": "image"}],
    "steps": [
        {
            "type": "roboflow_core/roboflow_instance_segmentation_model@v2",
            "name": "model",
            "images": "$inputs.image",
            "model_id": "microsoft-coco-instance-segmentation/3",
        },
        {
            "type": "roboflow_core/mask_visualization@v1",
            "name": "mask_visualization",
            "image": "$inputs.image",
            "predictions": "$steps.model.predictions",
        },
        {
            "type": "roboflow_core/label_visualization@v1",
            "name": "label_visualization",
            "image": "$steps.mask_visualization.image",
            "predictions": "$steps.model.predictions",
        },
    ],
    "outputs": [
        {
            "type": "JsonField",
            "name": EXAMPLE_STREAM_OUTPUT,
            "coordinates_system": "own",
            "selector": "$steps.label_visualization.image",
        }
    ],
}


class WorkflowMode(str, Enum):
    """Which workflow the stream runs."""

    EXAMPLE = "example"
    CUSTOM = "custom"


@dataclass
class StreamForm:
    """Raw form state, as the user entered it."""

    mode: WorkflowMode = WorkflowMode.EXAMPLE
    workspace_name: str = ""
    workflow_id: str = ""
    image_input_name: str = DEFAULT_IMAGE_INPUT
    stream_output: str = ""
    data_outputs: str = ""  # comma separated
    device_id: Optional[str] = None
    resolution: Optional[Resolution] = None
    frame_rate: Optional[int] = None
    facing_mode: str = "environment"


@dataclass
class CameraConstraints:
    device_id: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None
    frame_rate: Optional[int] = None
    facing_mode: str = "environment"

    def to_media_constraints(self) -> Dict[str, Any]:
        """getUserMedia video constraints. A chosen device overrides facing mode."""
        constraints: Dict[str, Any] = {}
        if self.device_id:
            constraints["deviceId"] = {"exact": self.device_id}
        else:
            constraints["facingMode"] = self.facing_mode
        if self.width:
            constraints["width"] = {"ideal": self.width}
        if self.height:
            constraints["height"] = {"ideal": self.height}
        if self.frame_rate:
            constraints["frameRate"] = {"ideal": self.frame_rate}
        return constraints


@dataclass
class StreamConfig:
    camera: CameraConstraints
    wrtc_params: Dict[str, Any]
    proxy_url: str = PROXY_URL


def _split_names(raw: str) -> List[str]:
    return [name.strip() for name in raw.split(",") if name.strip()]


def build_wrtc_params(form: StreamForm) -> Dict[str, Any]:
    """Build camelCase wrtcParams for the selected workflow mode.

    Raises:
        ValueError: Custom mode without workspace name or workflow id
    """
    if form.mode == WorkflowMode.EXAMPLE:
        return {
            "workflowSpec": copy.deepcopy(EXAMPLE_WORKFLOW_SPEC),
            "imageInputName": DEFAULT_IMAGE_INPUT,
            "streamOutputNames": [EXAMPLE_STREAM_OUTPUT],
        }

    workspace_name = form.workspace_name.strip()
    workflow_id = form.workflow_id.strip()
    if not workspace_name or not workflow_id:
        raise ValueError("Workspace name and workflow ID are required for a custom workflow")

    params: Dict[str, Any] = {
        "workspaceName": workspace_name,
        "workflowId": workflow_id,
        "imageInputName": form.image_input_name.strip() or DEFAULT_IMAGE_INPUT,
        "streamOutputNames": _split_names(form.stream_output),
    }
    data_outputs = _split_names(form.data_outputs)
    if data_outputs:
        params["dataOutputNames"] = data_outputs
    return params


def build_stream_config(form: StreamForm) -> StreamConfig:
    """Assemble the full connector config from form state."""
    camera = CameraConstraints(
        device_id=form.device_id or None,
        width=form.resolution.width if form.resolution else None,
        height=form.resolution.height if form.resolution else None,
        frame_rate=form.frame_rate,
        facing_mode=form.facing_mode,
    )
    return StreamConfig(camera=camera, wrtc_params=build_wrtc_params(form))
