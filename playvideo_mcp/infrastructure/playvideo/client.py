"""httpx-based PlayVideo API client."""

from typing import Any

import httpx

from playvideo_mcp.commons.telemetry import get_logger, timed
from playvideo_mcp.domain.exceptions import RemoteError
from playvideo_mcp.infrastructure.playvideo.base import RemoteClientBase

logger = get_logger(__name__)


class PlayVideoClient(RemoteClientBase):
    """PlayVideo REST client with bearer authentication.

    Every request carries ``Authorization: Bearer <api_key>``. Failures are
    raised as ``RemoteError`` with the server's ``message`` (or ``error``)
    field when the error body is JSON, else the HTTP reason phrase.
    """

    def __init__(
        self,
        api_url: str,
        api_key: str,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            api_url: API root including the version prefix,
                e.g. ``https://api.playvideo.dev/api/v1``.
            api_key: Bearer token.
            timeout: Request timeout in seconds.
            transport: Optional transport override (used by tests).
        """
        self._api_url = api_url.rstrip("/")
        self._timeout = timeout
        self._client = httpx.AsyncClient(
            base_url=self._api_url,
            headers={"Authorization": f"Bearer {api_key}"},
            timeout=httpx.Timeout(timeout),
            transport=transport,
        )

    @property
    def api_url(self) -> str:
        """API root this client talks to."""
        return self._api_url

    @timed
    async def request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, str] | None = None,
        body: dict[str, Any] | None = None,
    ) -> Any:
        """Send a request and return the decoded JSON body."""
        try:
            response = await self._client.request(
                method,
                path,
                params=params,
                json=body,
            )
        except httpx.TimeoutException as e:
            raise RemoteError(
                f"Request timed out after {self._timeout:g}s: {method} {path}"
            ) from e
        except httpx.HTTPError as e:
            raise RemoteError(f"Request failed: {e}") from e

        logger.debug(
            f"{method} {path} -> {response.status_code}",
            extra={"status_code": response.status_code},
        )

        if not response.is_success:
            raise RemoteError(
                f"API error: {self._error_detail(response)}",
                status_code=response.status_code,
            )

        if not response.content:
            return {}
        try:
            return response.json()
        except ValueError as e:
            raise RemoteError(
                f"API returned a non-JSON response ({response.status_code})",
                status_code=response.status_code,
            ) from e

    @staticmethod
    def _error_detail(response: httpx.Response) -> str:
        """Extract a human-readable message from an error response."""
        try:
            data = response.json()
        except ValueError:
            data = None
        if isinstance(data, dict):
            for field in ("message", "error"):
                value = data.get(field)
                if value:
                    return str(value)
        return response.reason_phrase or f"HTTP {response.status_code}"

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()
