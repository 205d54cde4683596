"""Unit tests for the StreamController state machine."""

import asyncio
from typing import Any, List, Optional

import pytest

from webrtc_proxy.client import (
    StreamConnection,
    StreamConnector,
    StreamController,
    StreamForm,
    StreamState,
    StreamView,
    WorkflowMode,
    build_stream_config,
)


class FakeView(StreamView):
    """Records every call for assertions."""

    def __init__(self, play_error: Optional[Exception] = None):
        self.statuses: List[str] = []
        self.start_enabled = True
        self.stop_enabled = False
        self.stream: Any = None
        self.alerts: List[str] = []
        self.play_error = play_error
        self.played = False

    def set_status(self, text):
        self.statuses.append(text)

    def set_start_enabled(self, enabled):
        self.start_enabled = enabled

    def set_stop_enabled(self, enabled):
        self.stop_enabled = enabled

    def attach_stream(self, stream):
        self.stream = stream

    def detach_stream(self):
        self.stream = None

    async def play(self):
        if self.play_error:
            raise self.play_error
        self.played = True

    def show_alert(self, message):
        self.alerts.append(message)


class FakeConnection(StreamConnection):
    def __init__(
        self,
        cleanup_error: Optional[Exception] = None,
        stream_gate: Optional[asyncio.Event] = None,
        stream_error: Optional[Exception] = None,
    ):
        self.cleanup_error = cleanup_error
        self.stream_gate = stream_gate
        self.stream_error = stream_error
        self.cleanups = 0

    async def remote_stream(self):
        if self.stream_gate is not None:
            await self.stream_gate.wait()
        if self.stream_error:
            raise self.stream_error
        return "remote-media-stream"

    async def cleanup(self):
        self.cleanups += 1
        if self.cleanup_error:
            raise self.cleanup_error


class FakeConnector(StreamConnector):
    def __init__(self, connection=None, error=None, gate: Optional[asyncio.Event] = None):
        self.connection = connection or FakeConnection()
        self.error = error
        self.gate = gate
        self.configs = []
        self.on_data = None

    async def connect(self, config, on_data=None):
        self.configs.append(config)
        self.on_data = on_data
        if self.gate is not None:
            await self.gate.wait()
        if self.error:
            raise self.error
        return self.connection


def make_controller(connector, view=None, form=None):
    view = view or FakeView()
    form = form or StreamForm()
    return StreamController(connector, view, lambda: build_stream_config(form)), view


class TestStart:
    @pytest.mark.asyncio
    async def test_successful_start(self):
        """Test idle -> connecting -> connected wiring."""
        connector = FakeConnector()
        controller, view = make_controller(connector)

        assert await controller.start() is True

        assert controller.state == StreamState.CONNECTED
        assert controller.session.connection is connector.connection
        assert view.stream == "remote-media-stream"
        assert view.played is True
        assert view.statuses == ["Connecting...", "Connected - Processing video"]
        assert view.start_enabled is False
        assert view.stop_enabled is True
        assert connector.configs[0].proxy_url == "/api/init-webrtc"

    @pytest.mark.asyncio
    async def test_second_start_is_noop(self):
        """Test two starts without a stop connect only once."""
        connector = FakeConnector()
        controller, _ = make_controller(connector)

        assert await controller.start() is True
        assert await controller.start() is False

        assert len(connector.configs) == 1

    @pytest.mark.asyncio
    async def test_start_while_connecting_is_noop(self):
        """Test a start issued before the first resolves does not reconnect."""
        gate = asyncio.Event()
        connector = FakeConnector(gate=gate)
        controller, _ = make_controller(connector)

        first = asyncio.create_task(controller.start())
        await asyncio.sleep(0)
        assert controller.state == StreamState.CONNECTING

        assert await controller.start() is False
        gate.set()
        assert await first is True
        assert len(connector.configs) == 1

    @pytest.mark.asyncio
    async def test_autoplay_failure_is_not_fatal(self):
        """Test a play() rejection still ends connected."""
        view = FakeView(play_error=RuntimeError("autoplay blocked"))
        controller, _ = make_controller(FakeConnector(), view=view)

        assert await controller.start() is True
        assert controller.state == StreamState.CONNECTED


class TestStartFailure:
    @pytest.mark.asyncio
    async def test_failed_connect_returns_to_idle(self):
        """Test a rejected connect leaves start enabled and no session."""
        controller, view = make_controller(FakeConnector(error=RuntimeError("ICE failed")))

        assert await controller.start() is False

        assert controller.state == StreamState.IDLE
        assert controller.session.connection is None
        assert view.start_enabled is True
        assert view.statuses[-1] == "Error: ICE failed"
        assert view.alerts == []

    @pytest.mark.asyncio
    async def test_api_key_failure_shows_hint(self):
        """Test credential errors get the targeted status and alert."""
        error = RuntimeError("Server configuration error: API key not configured")
        controller, view = make_controller(FakeConnector(error=error))

        await controller.start()

        assert view.statuses[-1] == "Error: Server API key not configured"
        assert len(view.alerts) == 1
        assert "ROBOFLOW_API_KEY" in view.alerts[0]

    @pytest.mark.asyncio
    async def test_invalid_form_is_a_failed_attempt(self):
        """Test custom mode without ids fails before connecting."""
        connector = FakeConnector()
        form = StreamForm(mode=WorkflowMode.CUSTOM, workspace_name="acme")
        controller, view = make_controller(connector, form=form)

        assert await controller.start() is False

        assert connector.configs == []
        assert view.start_enabled is True
        assert view.statuses[-1].startswith("Error: Workspace name and workflow ID")

    @pytest.mark.asyncio
    async def test_retry_after_failure(self):
        """Test the user can start again after a failure."""
        connector = FakeConnector(error=RuntimeError("boom"))
        controller, _ = make_controller(connector)
        await controller.start()

        connector.error = None
        assert await controller.start() is True
        assert len(connector.configs) == 2


class TestStop:
    @pytest.mark.asyncio
    async def test_stop_resets_everything(self):
        """Test connected -> stopping -> idle with counters reset."""
        connector = FakeConnector()
        controller, view = make_controller(connector)
        await controller.start()
        connector.on_data({"count": 3})
        connector.on_data({"count": 4})
        assert controller.session.data_messages == 2

        assert await controller.stop() is True

        assert connector.connection.cleanups == 1
        assert controller.state == StreamState.IDLE
        assert controller.session.connection is None
        assert controller.session.data_messages == 0
        assert controller.session.last_data is None
        assert view.stream is None
        assert view.start_enabled is True
        assert view.stop_enabled is False
        assert view.statuses[-2:] == ["Stopping...", "Idle"]

    @pytest.mark.asyncio
    async def test_cleanup_error_is_swallowed(self):
        """Test a failing cleanup still returns the UI to idle."""
        connection = FakeConnection(cleanup_error=RuntimeError("already closed"))
        controller, view = make_controller(FakeConnector(connection=connection))
        await controller.start()

        assert await controller.stop() is True

        assert controller.state == StreamState.IDLE
        assert controller.session.connection is None
        assert view.start_enabled is True

    @pytest.mark.asyncio
    async def test_stop_when_idle(self):
        controller, view = make_controller(FakeConnector())

        assert await controller.stop() is False
        assert view.statuses == []


class TestDataAndTeardown:
    @pytest.mark.asyncio
    async def test_data_messages_forwarded(self):
        """Test data-channel messages update counters and reach on_data."""
        received = []
        connector = FakeConnector()
        view = FakeView()
        controller = StreamController(
            connector, view, lambda: build_stream_config(StreamForm()), on_data=received.append
        )
        await controller.start()

        connector.on_data({"predictions": []})

        assert controller.session.data_messages == 1
        assert controller.session.last_data == {"predictions": []}
        assert received == [{"predictions": []}]

    @pytest.mark.asyncio
    async def test_teardown_cleans_active_connection(self):
        connector = FakeConnector()
        controller, _ = make_controller(connector)
        await controller.start()

        await controller.teardown()

        assert connector.connection.cleanups == 1
        assert controller.session.active is False
        assert controller.state == StreamState.IDLE

    @pytest.mark.asyncio
    async def test_teardown_without_connection(self):
        connector = FakeConnector()
        controller, _ = make_controller(connector)

        await controller.teardown()

        assert connector.connection.cleanups == 0


class TestStopDuringStart:
    """A stop that lands while start() is still awaiting wins."""

    @pytest.mark.asyncio
    async def test_stop_while_awaiting_remote_stream(self):
        """Test start yields to stop and the controller can start again."""
        gate = asyncio.Event()
        connector = FakeConnector(connection=FakeConnection(stream_gate=gate))
        controller, view = make_controller(connector)

        pending = asyncio.create_task(controller.start())
        await asyncio.sleep(0)
        assert controller.session.connection is connector.connection

        assert await controller.stop() is True
        gate.set()
        assert await pending is False

        assert controller.state == StreamState.IDLE
        assert controller.session.active is False
        assert view.stream is None
        assert view.start_enabled is True
        assert view.stop_enabled is False
        assert view.statuses[-1] == "Idle"

        connector.connection = FakeConnection()
        assert await controller.start() is True
        assert controller.state == StreamState.CONNECTED
        assert len(connector.configs) == 2
        assert await controller.stop() is True
        assert controller.state == StreamState.IDLE

    @pytest.mark.asyncio
    async def test_remote_stream_error_after_stop(self):
        """Test a failure surfacing after stop does not overwrite the idle UI."""
        gate = asyncio.Event()
        connection = FakeConnection(stream_gate=gate, stream_error=RuntimeError("closed"))
        controller, view = make_controller(FakeConnector(connection=connection))

        pending = asyncio.create_task(controller.start())
        await asyncio.sleep(0)
        await controller.stop()
        gate.set()

        assert await pending is False
        assert connection.cleanups == 1
        assert view.statuses[-1] == "Idle"
        assert controller.state == StreamState.IDLE

    @pytest.mark.asyncio
    async def test_teardown_while_awaiting_remote_stream(self):
        gate = asyncio.Event()
        connector = FakeConnector(connection=FakeConnection(stream_gate=gate))
        controller, view = make_controller(connector)

        pending = asyncio.create_task(controller.start())
        await asyncio.sleep(0)
        await controller.teardown()
        gate.set()

        assert await pending is False
        assert view.stream is None
        assert controller.state == StreamState.IDLE
        assert controller.session.active is False
