"""Data transfer objects for the application layer."""

from playvideo_mcp.application.dtos.tools import CallState, RemoteCall, RenderedResponse

__all__ = [
    "CallState",
    "RemoteCall",
    "RenderedResponse",
]
