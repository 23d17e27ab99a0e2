"""Unit tests for the MCP server wiring."""

import pytest
from mcp.shared.exceptions import McpError
from mcp.shared.memory import create_connected_server_and_client_session
from mcp.types import TextContent
from pydantic import AnyUrl

from playvideo_mcp.api.mcp.server import (
    create_mcp_server,
    run_mcp_server,
    to_call_tool_result,
    to_mcp_tool,
)
from playvideo_mcp.application.dtos.tools import CallState, RenderedResponse
from playvideo_mcp.application.services.catalog import DEFAULT_CATALOG
from playvideo_mcp.application.services.dispatcher import ToolDispatcher
from playvideo_mcp.application.services.resources import ResourceRegistry
from playvideo_mcp.commons.settings.models import Settings
from playvideo_mcp.domain.exceptions import ConfigurationError, RemoteError
from playvideo_mcp.infrastructure.playvideo.base import RemoteClientBase

API_URL = "https://api.playvideo.dev/api/v1"


class FakeClient(RemoteClientBase):
    """Answers every request with ``response`` or raises ``error``."""

    def __init__(self) -> None:
        self.response: object = {}
        self.error: Exception | None = None
        self.requests: list[tuple[str, str]] = []

    async def request(self, method, path, *, params=None, body=None):
        self.requests.append((method, path))
        if self.error is not None:
            raise self.error
        return self.response

    async def close(self):
        pass


@pytest.fixture
def client():
    return FakeClient()


@pytest.fixture
def server(client):
    return create_mcp_server(
        ToolDispatcher(client, API_URL),
        ResourceRegistry(API_URL),
        Settings(),
    )


class TestConversions:
    """Tests for wire-format helpers."""

    def test_tool_schema(self):
        tool = to_mcp_tool(DEFAULT_CATALOG.get("get_video"))
        assert tool.name == "get_video"
        assert tool.inputSchema["required"] == ["id"]

    def test_error_result(self):
        result = to_call_tool_result(
            RenderedResponse.error(CallState.FAILED, "API error: not found")
        )
        assert result.isError is True
        assert result.content == [
            TextContent(type="text", text="Error: API error: not found")
        ]

    def test_success_result(self):
        result = to_call_tool_result(RenderedResponse.success("ok"))
        assert result.isError is False


class TestMcpServer:
    """Round trips through an in-memory MCP session."""

    async def test_list_tools(self, server):
        async with create_connected_server_and_client_session(server) as session:
            result = await session.list_tools()

        assert [tool.name for tool in result.tools] == list(DEFAULT_CATALOG.names)

    async def test_call_tool(self, server, client):
        client.response = {"collections": []}

        async with create_connected_server_and_client_session(server) as session:
            result = await session.call_tool("list_collections", {})

        assert result.isError is False
        assert result.content[0].text == "Found 0 collections."
        assert client.requests == [("GET", "/collections")]

    async def test_invalid_arguments_are_error_results(self, server, client):
        async with create_connected_server_and_client_session(server) as session:
            result = await session.call_tool("list_videos", {"status": "DONE"})

        assert result.isError is True
        assert result.content[0].text.startswith("Error: Invalid arguments for list_videos")
        assert client.requests == []

    async def test_remote_failure(self, server, client):
        client.error = RemoteError("API error: not found", status_code=404)

        async with create_connected_server_and_client_session(server) as session:
            result = await session.call_tool("delete_video", {"id": "vid_missing"})

        assert result.isError is True
        assert "not found" in result.content[0].text

    async def test_unknown_tool(self, server):
        async with create_connected_server_and_client_session(server) as session:
            result = await session.call_tool("frobnicate", {})

        assert result.isError is True
        assert "Unknown tool: frobnicate" in result.content[0].text

    async def test_list_resources(self, server):
        async with create_connected_server_and_client_session(server) as session:
            result = await session.list_resources()

        assert [str(r.uri) for r in result.resources] == [
            "playvideo://docs/quickstart",
            "playvideo://docs/api",
            "playvideo://docs/sdks",
            "playvideo://docs/webhooks",
        ]
        assert {r.mimeType for r in result.resources} == {"text/markdown"}

    async def test_read_resource(self, server):
        async with create_connected_server_and_client_session(server) as session:
            result = await session.read_resource(AnyUrl("playvideo://docs/api"))

        contents = result.contents[0]
        assert contents.mimeType == "text/markdown"
        assert f"Base URL: {API_URL}" in contents.text

    async def test_read_unknown_resource(self, server):
        async with create_connected_server_and_client_session(server) as session:
            with pytest.raises(McpError, match="Unknown resource"):
                await session.read_resource(AnyUrl("playvideo://docs/nope"))


class TestRunMcpServer:
    """Startup checks."""

    async def test_requires_api_key(self):
        with pytest.raises(ConfigurationError, match="PLAYVIDEO_API_KEY"):
            await run_mcp_server(Settings())
