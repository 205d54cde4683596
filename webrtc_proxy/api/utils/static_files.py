"""Frontend asset serving for the proxy.

Development serves the editable sources in the package's ``static/`` directory
with caching disabled; production serves a prebuilt directory. Mount after the
API routers so ``/api/*`` keeps priority over the catch-all ``/`` mount.
"""

from pathlib import Path
from typing import Optional

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from webrtc_proxy.config import STATIC_SOURCE_DIR
from webrtc_proxy.core.logging import logger


class NoCacheStaticFiles(StaticFiles):
    """StaticFiles that tells the browser never to cache (development)."""

    async def get_response(self, path: str, scope):
        response = await super().get_response(path, scope)
        response.headers["Cache-Control"] = "no-store"
        return response


def mount_frontend(app: FastAPI, development: bool, public_dir: Path) -> Optional[Path]:
    """Mount the frontend at "/".

    Args:
        app: FastAPI app with API routers already registered
        development: Serve sources (True) or prebuilt assets (False)
        public_dir: Prebuilt asset directory used in production

    Returns:
        The directory being served, or None when production assets are missing
    """
    if development:
        app.mount("/", NoCacheStaticFiles(directory=STATIC_SOURCE_DIR, html=True), name="frontend")
        return STATIC_SOURCE_DIR

    if not public_dir.is_dir():
        logger.warning("frontend_not_mounted", reason="public directory missing", path=str(public_dir))
        return None

    app.mount("/", StaticFiles(directory=public_dir, html=True), name="frontend")
    return public_dir
