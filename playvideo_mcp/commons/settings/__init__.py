"""Settings management module."""

from playvideo_mcp.commons.settings.loader import (
    SettingsLoader,
    get_settings,
    reset_settings,
)
from playvideo_mcp.commons.settings.models import (
    DEFAULT_BASE_URL,
    AppSettings,
    PlayVideoSettings,
    Settings,
    TelemetrySettings,
)

__all__ = [
    # Loader
    "SettingsLoader",
    "get_settings",
    "reset_settings",
    # Models
    "DEFAULT_BASE_URL",
    "Settings",
    "AppSettings",
    "PlayVideoSettings",
    "TelemetrySettings",
]
