"""MCP server implementation."""

from playvideo_mcp.api.mcp.server import (
    create_mcp_server,
    run_mcp_server,
    to_call_tool_result,
    to_mcp_resource,
    to_mcp_tool,
)

__all__ = [
    "create_mcp_server",
    "run_mcp_server",
    "to_call_tool_result",
    "to_mcp_resource",
    "to_mcp_tool",
]
