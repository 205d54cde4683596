"""WebRTC routes for the proxy API."""

from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from webrtc_proxy.api.dependencies import get_proxy_service
from webrtc_proxy.core.errors import ProxyError
from webrtc_proxy.core.webrtc import WebRTCProxyService

router = APIRouter(prefix="/api", tags=["WebRTC"])


@router.post("/init-webrtc")
async def init_webrtc_route(
    request: Request,
    service: WebRTCProxyService = Depends(get_proxy_service),
):
    """Proxy WebRTC initialization to Roboflow, keeping the API key server-side.

    - **offer**: `{sdp, type}` generated by the browser
    - **wrtcParams**: `workflowSpec` or `workspaceName` + `workflowId`, plus
      `imageInputName`, `streamOutputNames`, `dataOutputNames`,
      `workflowParameters`, `threadPoolWorkers`

    Returns Roboflow's answer (`sdp`, `type`, `context`) unchanged.
    """
    payload: Any
    try:
        payload = await request.json()
    except ValueError:
        payload = None

    try:
        answer = await service.init_webrtc(payload)
    except ProxyError as e:
        return JSONResponse(status_code=e.status_code, content=e.to_response())

    return JSONResponse(content=answer)
