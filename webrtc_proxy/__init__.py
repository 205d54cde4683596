"""WebRTC proxy: keeps the Roboflow API key server-side while the browser streams."""

__version__ = "1.0.0"
