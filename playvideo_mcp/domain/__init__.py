"""Domain layer - catalog models, remote payload models and exceptions."""

from playvideo_mcp.domain.exceptions import (
    ConfigurationError,
    DomainException,
    RemoteError,
    ResourceNotFoundError,
    ToolValidationError,
    UnexpectedResponseError,
    UnknownToolError,
)

__all__ = [
    "DomainException",
    "ConfigurationError",
    "UnknownToolError",
    "ToolValidationError",
    "RemoteError",
    "UnexpectedResponseError",
    "ResourceNotFoundError",
]
