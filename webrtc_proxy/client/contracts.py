"""Interfaces the stream controller drives.

``StreamConnector`` and ``StreamConnection`` stand for the vendor's client SDK
(in the browser: ``webrtc.useStream`` and the connection it resolves to).
``StreamView`` is whatever renders state: the DOM, a terminal, a test double.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Optional

from webrtc_proxy.client.stream_config import StreamConfig

DataHandler = Callable[[Any], None]


class StreamConnection(ABC):
    """An established peer connection to the remote worker."""

    @abstractmethod
    async def remote_stream(self) -> Any:
        """Return the processed media stream sent back by the worker."""
        pass

    @abstractmethod
    async def cleanup(self) -> None:
        """Close the peer connection and stop local capture."""
        pass


class StreamConnector(ABC):
    """Negotiates a connection through the proxy URL in the config."""

    @abstractmethod
    async def connect(
        self, config: StreamConfig, on_data: Optional[DataHandler] = None
    ) -> StreamConnection:
        """Open a connection.

        Args:
            config: Proxy URL, camera constraints and wrtcParams
            on_data: Called with each data-channel message

        Raises:
            Exception: Any failure; the message is shown to the user
        """
        pass


class StreamView(ABC):
    """Presentation surface for the controller."""

    @abstractmethod
    def set_status(self, text: str) -> None:
        pass

    @abstractmethod
    def set_start_enabled(self, enabled: bool) -> None:
        pass

    @abstractmethod
    def set_stop_enabled(self, enabled: bool) -> None:
        pass

    @abstractmethod
    def attach_stream(self, stream: Any) -> None:
        pass

    @abstractmethod
    def detach_stream(self) -> None:
        pass

    @abstractmethod
    async def play(self) -> None:
        """Start playback. May raise (autoplay policies); callers only log that."""
        pass

    @abstractmethod
    def show_alert(self, message: str) -> None:
        pass
