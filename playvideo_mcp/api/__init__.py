"""API layer - MCP endpoint."""

from playvideo_mcp.api.mcp import create_mcp_server, run_mcp_server

__all__ = [
    "create_mcp_server",
    "run_mcp_server",
]
