"""Main entry point for the WebRTC proxy.

Loads .env, builds the FastAPI app and makes it runnable standalone.

Usage:
    Development: webrtc-proxy                     (APP_ENV unset, reload on)
    Production:  APP_ENV=production webrtc-proxy  (serves PUBLIC_DIR)
    Or directly: uvicorn webrtc_proxy.main:app --port 3000
"""

import uvicorn
from dotenv import load_dotenv

from webrtc_proxy.api import create_app
from webrtc_proxy.config import config
from webrtc_proxy.core.logging import logger

load_dotenv()

app = create_app()


def run() -> None:
    """Start uvicorn with the configured port and mode."""
    port = config.port()
    development = config.is_development()

    logger.info(
        "server_starting",
        mode="development" if development else "production",
        local=f"http://localhost:{port}",
        api=f"http://localhost:{port}/api/init-webrtc",
        health=f"http://localhost:{port}/api/health",
        serving=str(app.state.frontend_dir) if app.state.frontend_dir else None,
    )
    missing = config.get_missing_config()
    if missing:
        logger.warning("config_missing", variables=missing, hint="set them in .env")

    uvicorn.run(
        "webrtc_proxy.main:app",
        host="0.0.0.0",
        port=port,
        reload=development,
        log_level="info",
    )


if __name__ == "__main__":
    run()
