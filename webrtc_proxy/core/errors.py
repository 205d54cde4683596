"""Error taxonomy for the WebRTC proxy.

Every failure of an init request maps to one of three terminal categories.
None of them are retried by the proxy.
"""

from typing import Optional

UPSTREAM_FALLBACK_MESSAGE = "Failed to initialize WebRTC worker"


class ProxyError(Exception):
    """Base error carrying the HTTP status and client-facing message."""

    status_code: int = 500

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def to_response(self) -> dict:
        """Body returned to the client."""
        return {"error": self.message}


class BadRequestError(ProxyError):
    """Client payload failed shape validation."""

    status_code = 400


class ConfigError(ProxyError):
    """Server is missing required configuration (reported as a server fault)."""

    status_code = 500


class UpstreamError(ProxyError):
    """The vendor call failed."""

    status_code = 500

    @classmethod
    def from_exception(cls, error: Exception) -> "UpstreamError":
        """Wrap an arbitrary exception, keeping its message when it has one."""
        if isinstance(error, UpstreamError):
            return error
        message = str(error).strip() or UPSTREAM_FALLBACK_MESSAGE
        return cls(message)
