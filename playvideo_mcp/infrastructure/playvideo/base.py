"""Abstract base class for PlayVideo API clients."""

from abc import ABC, abstractmethod
from typing import Any

from playvideo_mcp.application.dtos.tools import RemoteCall


class RemoteClientBase(ABC):
    """Issues one authenticated request per call against the PlayVideo API.

    Implementations raise ``RemoteError`` for non-success responses and
    transport failures, and never retry.
    """

    @abstractmethod
    async def request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, str] | None = None,
        body: dict[str, Any] | None = None,
    ) -> Any:
        """Send a request and return the decoded JSON body.

        Args:
            method: HTTP method.
            path: Path below the API prefix, e.g. ``/videos/vid_1``.
            params: Optional query parameters.
            body: Optional JSON body.

        Returns:
            Decoded JSON response.
        """

    async def execute(self, call: RemoteCall) -> Any:
        """Send the request described by ``call``."""
        return await self.request(
            call.method,
            call.path,
            params=call.params or None,
            body=call.body,
        )

    @abstractmethod
    async def close(self) -> None:
        """Release network resources."""
