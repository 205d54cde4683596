"""FastAPI application factory for the WebRTC proxy."""

from pathlib import Path
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from webrtc_proxy.api.middleware import request_id_middleware
from webrtc_proxy.api.routes import system, webrtc
from webrtc_proxy.api.utils import mount_frontend
from webrtc_proxy.config import config
from webrtc_proxy.core.webrtc import InitiatorFactory, WebRTCProxyService


def create_app(
    initiator_factory: Optional[InitiatorFactory] = None,
    development: Optional[bool] = None,
    public_dir: Optional[Path] = None,
) -> FastAPI:
    """Create and configure FastAPI app. Factory pattern for testability.

    Args:
        initiator_factory: Override for the vendor session initiator (tests pass fakes)
        development: Runtime mode; defaults to APP_ENV
        public_dir: Prebuilt frontend directory; defaults to PUBLIC_DIR
    """
    if development is None:
        development = config.is_development()
    if public_dir is None:
        public_dir = config.public_dir()

    app = FastAPI(
        title="webrtc-proxy",
        description=(
            "Secure proxy for Roboflow WebRTC streaming. Forwards browser offers "
            "to Roboflow with a server-held API key and serves the camera frontend."
        ),
        version="1.0.0",
        docs_url="/docs" if development else None,
        redoc_url=None,
    )

    # Add middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.allowed_origins(),
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(request_id_middleware)

    # Register routes
    app.include_router(system.router)
    app.include_router(webrtc.router)

    app.state.proxy_service = WebRTCProxyService(initiator_factory)

    # Frontend last: "/" mount would otherwise shadow the API
    app.state.frontend_dir = mount_frontend(app, development, public_dir)

    return app
