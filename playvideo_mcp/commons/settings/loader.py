"""Settings loader with hierarchical configuration support."""

import json
import os
from pathlib import Path
from typing import Any

from playvideo_mcp.commons.settings.models import Settings


class SettingsLoader:
    """Loads and merges configuration from multiple sources.

    Configuration precedence (highest to lowest):
    1. Environment variables
    2. Environment-specific config (appsettings.{env}.json)
    3. Base config (appsettings.json)
    """

    ENV_PREFIX = "PLAYVIDEO_MCP__"

    # Short variable names published in the client configuration docs.
    ENV_ALIASES: dict[str, tuple[str, ...]] = {
        "PLAYVIDEO_API_KEY": ("playvideo", "api_key"),
        "PLAYVIDEO_URL": ("playvideo", "base_url"),
    }

    def __init__(
        self,
        config_dir: Path | None = None,
        environment: str | None = None,
    ) -> None:
        """Initialize the settings loader.

        Args:
            config_dir: Directory containing configuration files.
                       Defaults to 'config' in current working directory.
            environment: Environment name (dev, staging, prod).
                        Defaults to PLAYVIDEO_MCP__APP__ENVIRONMENT or 'dev'.
        """
        self.config_dir = config_dir or Path("config")
        self.environment = environment or os.getenv(
            "PLAYVIDEO_MCP__APP__ENVIRONMENT", "dev"
        )

    def load(self) -> Settings:
        """Load settings with proper precedence.

        Returns:
            Fully resolved Settings instance.
        """
        config = self._load_json("appsettings.json")

        env_config = self._load_json(f"appsettings.{self.environment}.json")
        config = self._deep_merge(config, env_config)

        config = self._deep_merge(config, self._load_env_aliases())
        config = self._deep_merge(config, self._load_env_vars())

        return Settings(**config)

    def _load_env_aliases(self) -> dict[str, Any]:
        """Map the short PLAYVIDEO_* variables onto their nested keys."""
        result: dict[str, Any] = {}
        for env_name, (section, key) in self.ENV_ALIASES.items():
            value = os.getenv(env_name)
            if value:
                result.setdefault(section, {})[key] = value
        return result

    def _load_env_vars(self) -> dict[str, Any]:
        """Load environment variables with the PLAYVIDEO_MCP__ prefix.

        Parses env vars like PLAYVIDEO_MCP__PLAYVIDEO__BASE_URL into nested
        dicts: {"playvideo": {"base_url": "value"}}

        Returns:
            Nested dictionary of environment variable overrides.
        """
        result: dict[str, Any] = {}

        for key, value in os.environ.items():
            if not key.upper().startswith(self.ENV_PREFIX):
                continue

            key_path = key[len(self.ENV_PREFIX) :].lower().split("__")

            current = result
            for part in key_path[:-1]:
                current = current.setdefault(part, {})

            current[key_path[-1]] = self._coerce_value(value)

        return result

    def _coerce_value(self, value: str) -> Any:
        """Decode JSON lists and objects; scalars are left to pydantic.

        Args:
            value: String value from environment.

        Returns:
            Decoded JSON container, or the original string.
        """
        if value.startswith(("[", "{")):
            try:
                return json.loads(value)
            except json.JSONDecodeError:
                pass
        return value

    def _load_json(self, filename: str) -> dict[str, Any]:
        """Load JSON config file.

        Args:
            filename: Name of the config file.

        Returns:
            Parsed JSON as dictionary, or empty dict if file doesn't exist.
        """
        path = self.config_dir / filename
        if path.exists():
            with path.open(encoding="utf-8") as f:
                return dict(json.load(f))
        return {}

    def _deep_merge(
        self,
        base: dict[str, Any],
        override: dict[str, Any],
    ) -> dict[str, Any]:
        """Deep merge two dictionaries, override winning on conflicts."""
        result = base.copy()
        for key, value in override.items():
            if (
                key in result
                and isinstance(result[key], dict)
                and isinstance(value, dict)
            ):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value
        return result


# Global settings instance
_settings: Settings | None = None


def get_settings(
    config_dir: Path | None = None,
    environment: str | None = None,
    *,
    reload: bool = False,
) -> Settings:
    """Get or create the global settings instance.

    Args:
        config_dir: Optional config directory override.
        environment: Optional environment override.
        reload: Force reload settings from files.

    Returns:
        Settings instance.
    """
    global _settings  # noqa: PLW0603
    if _settings is None or reload:
        loader = SettingsLoader(config_dir=config_dir, environment=environment)
        _settings = loader.load()
    return _settings


def reset_settings() -> None:
    """Reset the global settings instance. Useful for testing."""
    global _settings  # noqa: PLW0603
    _settings = None
