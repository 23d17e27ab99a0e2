"""Infrastructure layer - external service implementations."""

from playvideo_mcp.infrastructure.factory import (
    InfrastructureFactory,
    get_factory,
    require_api_key,
    reset_factory,
)
from playvideo_mcp.infrastructure.playvideo import PlayVideoClient, RemoteClientBase

__all__ = [
    # Factory
    "InfrastructureFactory",
    "get_factory",
    "reset_factory",
    "require_api_key",
    # PlayVideo
    "RemoteClientBase",
    "PlayVideoClient",
]
