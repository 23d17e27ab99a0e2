"""Pydantic settings models for application configuration."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://api.playvideo.dev"


class AppSettings(BaseModel):
    """Application-level settings."""

    model_config = ConfigDict(frozen=True)

    name: str = "playvideo"
    version: str = "1.0.0"
    environment: Literal["dev", "staging", "prod"] = "dev"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"


class PlayVideoSettings(BaseModel):
    """Remote PlayVideo API settings."""

    model_config = ConfigDict(frozen=True)

    api_key: SecretStr | None = None
    base_url: str = DEFAULT_BASE_URL
    api_prefix: str = "/api/v1"
    timeout_seconds: float = Field(default=30.0, gt=0, le=600)

    @property
    def api_url(self) -> str:
        """Base URL all endpoint paths are appended to."""
        return f"{self.base_url.rstrip('/')}{self.api_prefix}"


class TelemetrySettings(BaseModel):
    """Logging settings."""

    model_config = ConfigDict(frozen=True)

    log_format: Literal["json", "text"] = "text"
    log_level: str | None = None


class Settings(BaseSettings):
    """Root settings container with environment loading."""

    app: AppSettings = Field(default_factory=AppSettings)
    playvideo: PlayVideoSettings = Field(default_factory=PlayVideoSettings)
    telemetry: TelemetrySettings = Field(default_factory=TelemetrySettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="PLAYVIDEO_MCP__",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    @property
    def log_level(self) -> str:
        """Effective log level, telemetry override first."""
        return self.telemetry.log_level or self.app.log_level
