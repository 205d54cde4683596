"""Capture-and-render stream controller.

State machine: idle -> connecting -> connected -> stopping -> idle, with
connecting -> idle on failure. The active connection lives in a
``StreamSession`` owned by the controller; start/stop are guarded by it
(checked, not locked: callers drive the controller from one event loop).
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional

from webrtc_proxy.client.contracts import (
    DataHandler,
    StreamConnection,
    StreamConnector,
    StreamView,
)
from webrtc_proxy.client.stream_config import StreamConfig
from webrtc_proxy.core.logging import get_logger

logger = get_logger(component="stream_controller")

API_KEY_STATUS = "Error: Server API key not configured"
API_KEY_ALERT = (
    "Server configuration error. Please check that ROBOFLOW_API_KEY is set in the .env file."
)


class StreamState(str, Enum):
    IDLE = "idle"
    CONNECTING = "connecting"
    CONNECTED = "connected"
    STOPPING = "stopping"


@dataclass
class StreamSession:
    """The active connection plus its preview counters."""

    connection: Optional[StreamConnection] = None
    data_messages: int = 0
    last_data: Any = None

    @property
    def active(self) -> bool:
        return self.connection is not None

    def record_data(self, data: Any) -> None:
        self.data_messages += 1
        self.last_data = data

    def reset(self) -> None:
        self.connection = None
        self.data_messages = 0
        self.last_data = None


class StreamController:
    """Drives one stream session against a connector and a view."""

    def __init__(
        self,
        connector: StreamConnector,
        view: StreamView,
        config_factory: Callable[[], StreamConfig],
        on_data: Optional[DataHandler] = None,
    ):
        """Initialize controller.

        Args:
            connector: Vendor stream connector
            view: Presentation surface
            config_factory: Reads the form and builds a StreamConfig at start time
            on_data: Optional extra handler for data-channel messages
        """
        self.connector = connector
        self.view = view
        self.config_factory = config_factory
        self.on_data = on_data
        self.session = StreamSession()
        self.state = StreamState.IDLE

    def _set_status(self, text: str) -> None:
        self.view.set_status(text)
        logger.info("status_changed", status=text, state=self.state.value)

    def _handle_data(self, data: Any) -> None:
        self.session.record_data(data)
        logger.debug("data_received", count=self.session.data_messages)
        if self.on_data:
            self.on_data(data)

    async def _cleanup_quietly(self, connection: StreamConnection) -> None:
        try:
            await connection.cleanup()
            logger.info("cleanup_complete")
        except Exception as e:
            logger.error("cleanup_failed", error=str(e))

    def _superseded(self, connection: StreamConnection) -> bool:
        """True once stop() or teardown() has taken over this attempt's connection."""
        return self.session.connection is not connection or self.state != StreamState.CONNECTING

    async def start(self) -> bool:
        """Connect and start rendering.

        Returns:
            True when connected; False when already active, the attempt failed,
            or a stop landed while the attempt was still connecting
        """
        if self.state != StreamState.IDLE or self.session.active:
            logger.warning("already_connected", state=self.state.value)
            return False

        self.state = StreamState.CONNECTING
        self.view.set_start_enabled(False)
        self._set_status("Connecting...")

        connection = None
        try:
            config = self.config_factory()
            connection = await self.connector.connect(config, on_data=self._handle_data)
            self.session.connection = connection

            stream = await connection.remote_stream()
            if self._superseded(connection):
                logger.info("start_superseded", state=self.state.value)
                return False
            self.view.attach_stream(stream)
            try:
                await self.view.play()
            except Exception as e:
                logger.warning("autoplay_failed", error=str(e))
        except Exception as e:
            if connection is not None and self._superseded(connection):
                logger.info("start_superseded", state=self.state.value, error=str(e))
                return False
            await self._fail(e)
            return False

        if self._superseded(connection):
            logger.info("start_superseded", state=self.state.value)
            return False

        self.state = StreamState.CONNECTED
        self._set_status("Connected - Processing video")
        self.view.set_stop_enabled(True)
        return True

    async def _fail(self, error: Exception) -> None:
        message = str(error) or type(error).__name__
        logger.error("connection_failed", error=message)

        # A connection that came up before the failure still holds the camera
        if self.session.connection is not None:
            await self._cleanup_quietly(self.session.connection)

        if "API key" in message:
            self._set_status(API_KEY_STATUS)
            self.view.show_alert(API_KEY_ALERT)
        else:
            self._set_status(f"Error: {message}")

        self.session.reset()
        self.state = StreamState.IDLE
        self.view.set_start_enabled(True)

    async def stop(self) -> bool:
        """Clean up the active connection. Always returns the UI to idle.

        Returns:
            False when there was nothing to stop
        """
        if not self.session.active:
            return False

        self.state = StreamState.STOPPING
        self.view.set_stop_enabled(False)
        self._set_status("Stopping...")

        try:
            await self._cleanup_quietly(self.session.connection)
        finally:
            self.session.reset()
            self.view.detach_stream()
            self.view.set_start_enabled(True)
            self.view.set_stop_enabled(False)
            self.state = StreamState.IDLE
            self._set_status("Idle")
        return True

    async def teardown(self) -> None:
        """Page/process exit: best-effort cleanup without touching the view."""
        if not self.session.active:
            return
        await self._cleanup_quietly(self.session.connection)
        self.session.reset()
        self.state = StreamState.IDLE
