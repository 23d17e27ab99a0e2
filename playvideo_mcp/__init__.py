"""MCP server exposing the PlayVideo API to AI assistants."""

__version__ = "1.0.0"
