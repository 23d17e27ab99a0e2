"""PlayVideo API clients."""

from playvideo_mcp.infrastructure.playvideo.base import RemoteClientBase
from playvideo_mcp.infrastructure.playvideo.client import PlayVideoClient

__all__ = [
    "RemoteClientBase",
    "PlayVideoClient",
]
