"""Unit tests for the command-line entry point."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from pydantic import SecretStr

from playvideo_mcp import __main__ as entry
from playvideo_mcp.commons.settings.models import PlayVideoSettings, Settings


@pytest.fixture
def configure_logging():
    with patch.object(entry, "configure_logging", MagicMock()) as mock:
        yield mock


class TestMain:
    """Tests for main()."""

    def test_missing_api_key_exits(self, configure_logging):
        run = AsyncMock()
        with (
            patch.object(entry, "get_settings", return_value=Settings()),
            patch.object(entry, "run_mcp_server", run),
            pytest.raises(SystemExit) as exc_info,
        ):
            entry.main()

        assert exc_info.value.code == 1
        run.assert_not_called()

    def test_runs_server(self, configure_logging):
        settings = Settings(
            playvideo=PlayVideoSettings(api_key=SecretStr("play_live_test"))
        )
        run = AsyncMock()
        with (
            patch.object(entry, "get_settings", return_value=settings),
            patch.object(entry, "run_mcp_server", run),
        ):
            entry.main()

        run.assert_awaited_once_with(settings)
        configure_logging.assert_called_once_with(level="INFO", format_type="text")
