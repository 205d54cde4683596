"""Core building blocks: errors, logging and the WebRTC proxy service."""
