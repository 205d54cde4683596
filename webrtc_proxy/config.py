"""Configuration management for the WebRTC proxy.

Centralizes all environment variable access for better testability. Values are
read on every call so a changed environment (or a test's monkeypatch) is picked
up without restarting the process.
"""

import os
from pathlib import Path
from typing import List, Optional

DEFAULT_ROBOFLOW_SERVER_URL = "https://serverless.roboflow.com"
DEFAULT_REQUEST_TIMEOUT = 60.0
DEFAULT_PORT = 3000

STATIC_SOURCE_DIR = Path(__file__).parent / "static"


class Config:
    """Application configuration loaded from environment variables."""

    # Roboflow API
    @staticmethod
    def roboflow_api_key() -> Optional[str]:
        """Get Roboflow API key from environment. Empty values count as unset."""
        return os.environ.get("ROBOFLOW_API_KEY") or None

    @staticmethod
    def roboflow_server_url() -> Optional[str]:
        """Get optional Roboflow server URL override."""
        return os.environ.get("ROBOFLOW_SERVER_URL") or None

    @staticmethod
    def roboflow_request_timeout() -> float:
        """Get timeout (seconds) for the outbound WebRTC initialization call."""
        raw = os.environ.get("ROBOFLOW_REQUEST_TIMEOUT")
        if not raw:
            return DEFAULT_REQUEST_TIMEOUT
        try:
            return float(raw)
        except ValueError:
            return DEFAULT_REQUEST_TIMEOUT

    # Server
    @staticmethod
    def port() -> int:
        """Get listen port."""
        raw = os.environ.get("PORT")
        if not raw:
            return DEFAULT_PORT
        try:
            return int(raw)
        except ValueError:
            return DEFAULT_PORT

    @staticmethod
    def app_env() -> str:
        """Get runtime mode ("development" or "production")."""
        return os.environ.get("APP_ENV", "development").strip().lower()

    @staticmethod
    def is_development() -> bool:
        """Anything other than production runs in development mode."""
        return Config.app_env() != "production"

    @staticmethod
    def public_dir() -> Path:
        """Directory holding prebuilt frontend assets for production."""
        return Path(os.environ.get("PUBLIC_DIR", "public"))

    @staticmethod
    def allowed_origins() -> List[str]:
        """CORS origins, comma separated in ALLOWED_ORIGINS."""
        raw = os.environ.get("ALLOWED_ORIGINS", "*")
        return [origin.strip() for origin in raw.split(",") if origin.strip()] or ["*"]

    # Helper methods
    @staticmethod
    def is_configured() -> bool:
        """Check if all required configuration is present."""
        return Config.roboflow_api_key() is not None

    @staticmethod
    def get_missing_config() -> List[str]:
        """Get list of missing required configuration keys."""
        missing = []
        if not Config.roboflow_api_key():
            missing.append("ROBOFLOW_API_KEY")
        return missing


# Singleton instance for easy access
config = Config()
