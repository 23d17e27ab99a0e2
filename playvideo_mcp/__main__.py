"""Entry point: ``python -m playvideo_mcp`` or the ``playvideo-mcp`` script."""

import asyncio
import sys

from pydantic import ValidationError

from playvideo_mcp.api.mcp.server import run_mcp_server
from playvideo_mcp.commons.settings import get_settings
from playvideo_mcp.commons.telemetry import configure_logging, get_logger
from playvideo_mcp.domain.exceptions import ConfigurationError
from playvideo_mcp.infrastructure.factory import require_api_key

logger = get_logger("playvideo_mcp.main")


def main() -> None:
    """Load configuration, check credentials and serve MCP over stdio."""
    try:
        settings = get_settings()
    except ValidationError as e:
        configure_logging()
        logger.error(f"Invalid configuration: {e.error_count()} problem(s)")
        sys.exit(1)

    configure_logging(
        level=settings.log_level,
        format_type=settings.telemetry.log_format,
    )

    try:
        require_api_key(settings)
    except ConfigurationError as e:
        logger.error(f"Error: {e}")
        sys.exit(1)

    try:
        asyncio.run(run_mcp_server(settings))
    except KeyboardInterrupt:
        logger.info("Shutting down")


if __name__ == "__main__":
    main()
