"""Unit tests for settings models and loader."""

import json
from pathlib import Path
from tempfile import TemporaryDirectory

import pytest
from pydantic import SecretStr

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


class TestAppSettings:
    """Tests for AppSettings model."""

    def test_default_values(self):
        settings = AppSettings()
        assert settings.name == "playvideo"
        assert settings.version == "1.0.0"
        assert settings.environment == "dev"
        assert settings.log_level == "INFO"

    def test_invalid_environment(self):
        with pytest.raises(ValueError):
            AppSettings(environment="invalid")  # type: ignore[arg-type]

    def test_invalid_log_level(self):
        with pytest.raises(ValueError):
            AppSettings(log_level="TRACE")  # type: ignore[arg-type]


class TestPlayVideoSettings:
    """Tests for PlayVideoSettings model."""

    def test_default_values(self):
        settings = PlayVideoSettings()
        assert settings.api_key is None
        assert settings.base_url == DEFAULT_BASE_URL
        assert settings.timeout_seconds == 30.0
        assert settings.api_url == "https://api.playvideo.dev/api/v1"

    def test_api_url_strips_trailing_slash(self):
        settings = PlayVideoSettings(base_url="http://localhost:8787/")
        assert settings.api_url == "http://localhost:8787/api/v1"

    def test_timeout_validation(self):
        with pytest.raises(ValueError):
            PlayVideoSettings(timeout_seconds=0)

        with pytest.raises(ValueError):
            PlayVideoSettings(timeout_seconds=601)

    def test_api_key_hidden_from_repr(self):
        settings = PlayVideoSettings(api_key=SecretStr("play_live_secret"))
        assert "play_live_secret" not in repr(settings)
        assert settings.api_key is not None
        assert settings.api_key.get_secret_value() == "play_live_secret"


class TestRootSettings:
    """Tests for root Settings model."""

    def test_default_values(self):
        settings = Settings()
        assert isinstance(settings.app, AppSettings)
        assert isinstance(settings.playvideo, PlayVideoSettings)
        assert isinstance(settings.telemetry, TelemetrySettings)
        assert settings.telemetry.log_format == "text"

    def test_log_level_prefers_telemetry_override(self):
        settings = Settings(
            app=AppSettings(log_level="WARNING"),
            telemetry=TelemetrySettings(log_level="DEBUG"),
        )
        assert settings.log_level == "DEBUG"

    def test_log_level_falls_back_to_app(self):
        settings = Settings(app=AppSettings(log_level="ERROR"))
        assert settings.log_level == "ERROR"


class TestSettingsLoader:
    """Tests for SettingsLoader."""

    def test_load_empty_config(self):
        with TemporaryDirectory() as tmpdir:
            loader = SettingsLoader(config_dir=Path(tmpdir), environment="dev")
            settings = loader.load()
            assert settings.app.name == "playvideo"
            assert settings.playvideo.api_key is None

    def test_load_environment_override(self):
        with TemporaryDirectory() as tmpdir:
            config_dir = Path(tmpdir)

            base_config = {
                "app": {"name": "test-app"},
                "playvideo": {"timeout_seconds": 10},
            }
            with (config_dir / "appsettings.json").open("w") as f:
                json.dump(base_config, f)

            prod_config = {
                "app": {"log_level": "WARNING"},
                "playvideo": {"base_url": "https://staging.playvideo.dev"},
            }
            with (config_dir / "appsettings.prod.json").open("w") as f:
                json.dump(prod_config, f)

            loader = SettingsLoader(config_dir=config_dir, environment="prod")
            settings = loader.load()

            # Base values
            assert settings.app.name == "test-app"
            assert settings.playvideo.timeout_seconds == 10
            # Overridden values
            assert settings.app.log_level == "WARNING"
            assert settings.playvideo.api_url == "https://staging.playvideo.dev/api/v1"

    def test_short_env_aliases(self, monkeypatch):
        monkeypatch.setenv("PLAYVIDEO_API_KEY", "play_live_abc")
        monkeypatch.setenv("PLAYVIDEO_URL", "http://localhost:8787")

        with TemporaryDirectory() as tmpdir:
            settings = SettingsLoader(config_dir=Path(tmpdir)).load()

        assert settings.playvideo.api_key is not None
        assert settings.playvideo.api_key.get_secret_value() == "play_live_abc"
        assert settings.playvideo.api_url == "http://localhost:8787/api/v1"

    def test_empty_alias_is_ignored(self, monkeypatch):
        monkeypatch.setenv("PLAYVIDEO_URL", "")

        with TemporaryDirectory() as tmpdir:
            settings = SettingsLoader(config_dir=Path(tmpdir)).load()

        assert settings.playvideo.base_url == DEFAULT_BASE_URL

    def test_prefixed_env_wins_over_alias(self, monkeypatch):
        monkeypatch.setenv("PLAYVIDEO_URL", "http://alias.local")
        monkeypatch.setenv("PLAYVIDEO_MCP__PLAYVIDEO__BASE_URL", "http://prefixed.local")

        with TemporaryDirectory() as tmpdir:
            settings = SettingsLoader(config_dir=Path(tmpdir)).load()

        assert settings.playvideo.base_url == "http://prefixed.local"

    def test_env_overrides_json(self, monkeypatch):
        monkeypatch.setenv("PLAYVIDEO_MCP__TELEMETRY__LOG_FORMAT", "json")

        with TemporaryDirectory() as tmpdir:
            config_dir = Path(tmpdir)
            with (config_dir / "appsettings.json").open("w") as f:
                json.dump({"telemetry": {"log_format": "text"}}, f)

            settings = SettingsLoader(config_dir=config_dir).load()

        assert settings.telemetry.log_format == "json"

    def test_coerce_value(self):
        loader = SettingsLoader()
        assert loader._coerce_value('["a", "b"]') == ["a", "b"]
        assert loader._coerce_value('{"a": 1}') == {"a": 1}
        assert loader._coerce_value("[not json") == "[not json"
        assert loader._coerce_value("30") == "30"

    def test_deep_merge(self):
        loader = SettingsLoader()
        base = {"a": {"b": 1, "c": 2}, "d": 3}
        override = {"a": {"b": 10, "e": 4}, "f": 5}

        result = loader._deep_merge(base, override)

        assert result == {"a": {"b": 10, "c": 2, "e": 4}, "d": 3, "f": 5}


class TestGetSettings:
    """Tests for the global settings accessor."""

    def test_get_settings_cached(self):
        with TemporaryDirectory() as tmpdir:
            settings1 = get_settings(config_dir=Path(tmpdir))
            settings2 = get_settings(config_dir=Path(tmpdir))
            assert settings1 is settings2

    def test_get_settings_reload(self):
        with TemporaryDirectory() as tmpdir:
            settings1 = get_settings(config_dir=Path(tmpdir))
            settings2 = get_settings(config_dir=Path(tmpdir), reload=True)
            assert settings1 is not settings2

    def test_reset_settings(self):
        with TemporaryDirectory() as tmpdir:
            settings1 = get_settings(config_dir=Path(tmpdir))
            reset_settings()
            settings2 = get_settings(config_dir=Path(tmpdir))
            assert settings1 is not settings2
