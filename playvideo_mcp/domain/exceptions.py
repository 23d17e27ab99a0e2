"""Domain exceptions for the PlayVideo MCP gateway."""

from __future__ import annotations

from collections.abc import Sequence


class DomainException(Exception):
    """Base exception for domain errors."""


class ConfigurationError(DomainException):
    """Raised at startup when required configuration is missing or invalid."""


class UnknownToolError(DomainException):
    """Raised when a tool name is not in the catalog."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown tool: {name}")


class ToolValidationError(DomainException):
    """Raised when tool arguments do not satisfy the tool's input schema."""

    def __init__(self, tool: str, problems: Sequence[str]) -> None:
        self.tool = tool
        self.problems = tuple(problems)
        super().__init__(
            f"Invalid arguments for {tool}: {'; '.join(self.problems)}"
        )


class RemoteError(DomainException):
    """Raised when the PlayVideo API call fails.

    ``status_code`` is None for transport failures (connection errors,
    timeouts) where no HTTP response was received.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class UnexpectedResponseError(DomainException):
    """Raised when a successful response does not have the expected shape."""

    def __init__(self, tool: str, reason: str) -> None:
        self.tool = tool
        self.reason = reason
        super().__init__(f"Unexpected response from PlayVideo API for {tool}: {reason}")


class ResourceNotFoundError(DomainException):
    """Raised when a resource URI is not in the registry."""

    def __init__(self, uri: str) -> None:
        self.uri = uri
        super().__init__(f"Unknown resource: {uri}")
