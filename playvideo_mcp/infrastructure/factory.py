"""Infrastructure factory for creating service instances from configuration."""

from typing import Any, cast

from pydantic import SecretStr

from playvideo_mcp.commons.settings.models import Settings
from playvideo_mcp.commons.telemetry import get_logger
from playvideo_mcp.domain.exceptions import ConfigurationError
from playvideo_mcp.infrastructure.playvideo import PlayVideoClient, RemoteClientBase

logger = get_logger(__name__)


def require_api_key(settings: Settings) -> SecretStr:
    """Return the configured API key.

    Raises:
        ConfigurationError: If no API key is configured.
    """
    api_key = settings.playvideo.api_key
    if api_key is None or not api_key.get_secret_value().strip():
        raise ConfigurationError(
            "PLAYVIDEO_API_KEY environment variable is required"
        )
    return api_key


class InfrastructureFactory:
    """Factory for creating infrastructure service instances.

    Creates concrete implementations based on configuration settings.
    """

    def __init__(self, settings: Settings) -> None:
        """Initialize factory with settings.

        Args:
            settings: Application settings.
        """
        self._settings = settings
        self._instances: dict[str, Any] = {}

    def get_remote_client(self) -> RemoteClientBase:
        """Get the PlayVideo API client.

        Returns:
            Configured remote client.

        Raises:
            ConfigurationError: If no API key is configured.
        """
        if "remote_client" not in self._instances:
            pv_settings = self._settings.playvideo
            self._instances["remote_client"] = PlayVideoClient(
                api_url=pv_settings.api_url,
                api_key=require_api_key(self._settings).get_secret_value(),
                timeout=pv_settings.timeout_seconds,
            )
        return cast("RemoteClientBase", self._instances["remote_client"])

    async def close_all(self) -> None:
        """Close all service connections."""
        for name, instance in self._instances.items():
            try:
                await instance.close()
            except Exception:
                logger.warning(f"Failed to close {name}", exc_info=True)

        self._instances.clear()


class _FactoryHolder:
    """Holder for the factory singleton to avoid global statements."""

    instance: InfrastructureFactory | None = None


def get_factory(settings: Settings | None = None) -> InfrastructureFactory:
    """Get or create the infrastructure factory singleton.

    Args:
        settings: Settings to use. Required on first call.

    Returns:
        Infrastructure factory instance.

    Raises:
        ValueError: If settings not provided on first call.
    """
    if _FactoryHolder.instance is None:
        if settings is None:
            raise ValueError("Settings required to initialize factory")
        _FactoryHolder.instance = InfrastructureFactory(settings)

    return _FactoryHolder.instance


def reset_factory() -> None:
    """Reset the factory singleton (for testing)."""
    _FactoryHolder.instance = None
