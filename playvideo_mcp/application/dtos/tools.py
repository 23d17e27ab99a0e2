"""DTOs for tool dispatch."""

from enum import Enum
from typing import Any, Literal, Self

from pydantic import BaseModel, ConfigDict, Field


class CallState(str, Enum):
    """Terminal state of a tool call."""

    COMPLETED = "completed"
    REJECTED = "rejected"  # Unknown tool or invalid arguments; nothing sent
    FAILED = "failed"  # Remote or transport failure after dispatch


class RemoteCall(BaseModel):
    """One HTTP request against the PlayVideo API."""

    model_config = ConfigDict(frozen=True)

    method: Literal["GET", "POST", "PATCH", "DELETE"]
    path: str = Field(description="Path below the API prefix, already escaped")
    params: dict[str, str] = Field(default_factory=dict)
    body: dict[str, Any] | None = None


class RenderedResponse(BaseModel):
    """Text returned to the assistant runtime for a tool call."""

    model_config = ConfigDict(frozen=True)

    state: CallState
    text: str
    error_message: str | None = None

    @property
    def is_error(self) -> bool:
        """Whether the runtime should flag the result as an error."""
        return self.state is not CallState.COMPLETED

    @classmethod
    def success(cls, text: str) -> Self:
        """Build a completed response."""
        return cls(state=CallState.COMPLETED, text=text)

    @classmethod
    def error(cls, state: CallState, message: str) -> Self:
        """Build an error response carrying the originating message."""
        return cls(state=state, text=f"Error: {message}", error_message=message)
