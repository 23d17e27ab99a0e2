"""MCP server exposing the PlayVideo tools and documentation resources."""

from typing import Any

from mcp.server import Server
from mcp.server.lowlevel.helper_types import ReadResourceContents
from mcp.server.stdio import stdio_server
from mcp.types import CallToolResult, Resource, TextContent, Tool
from pydantic import AnyUrl

from playvideo_mcp.application.dtos.tools import RenderedResponse
from playvideo_mcp.application.services.dispatcher import ToolDispatcher
from playvideo_mcp.application.services.resources import ResourceRegistry
from playvideo_mcp.commons.settings.loader import get_settings
from playvideo_mcp.commons.settings.models import Settings
from playvideo_mcp.commons.telemetry.logger import get_logger
from playvideo_mcp.domain.models.catalog import ResourceDescriptor, ToolDescriptor
from playvideo_mcp.infrastructure.factory import get_factory

logger = get_logger(__name__)


def to_mcp_tool(tool: ToolDescriptor) -> Tool:
    """Convert a catalog descriptor into its MCP wire form."""
    return Tool(
        name=tool.name,
        description=tool.description,
        inputSchema=tool.input_schema(),
    )


def to_mcp_resource(resource: ResourceDescriptor) -> Resource:
    """Convert a resource descriptor into its MCP wire form."""
    return Resource(
        uri=AnyUrl(resource.uri),
        name=resource.name,
        description=resource.description,
        mimeType=resource.mime_type,
    )


def to_call_tool_result(response: RenderedResponse) -> CallToolResult:
    """Wrap a rendered response as a single text block."""
    return CallToolResult(
        content=[TextContent(type="text", text=response.text)],
        isError=response.is_error,
    )


def create_mcp_server(
    dispatcher: ToolDispatcher,
    resources: ResourceRegistry,
    settings: Settings,
) -> Server:
    """Create and configure the MCP server.

    Args:
        dispatcher: Tool dispatcher backing list_tools/call_tool.
        resources: Documentation resources.
        settings: Application settings (server name and version).

    Returns:
        Configured MCP server instance.
    """
    server: Server = Server(settings.app.name, version=settings.app.version)

    @server.list_tools()
    async def list_tools() -> list[Tool]:
        """List all available tools."""
        return [to_mcp_tool(tool) for tool in dispatcher.list_tools()]

    # Arguments are validated by the dispatcher so malformed calls come back
    # as regular error results.
    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: dict[str, Any]) -> CallToolResult:
        """Handle tool calls."""
        response = await dispatcher.call_tool(name, arguments)
        return to_call_tool_result(response)

    @server.list_resources()
    async def list_resources() -> list[Resource]:
        """List documentation resources."""
        return [to_mcp_resource(r) for r in resources.list_resources()]

    @server.read_resource()
    async def read_resource(uri: AnyUrl) -> list[ReadResourceContents]:
        """Read a documentation resource; unknown URIs raise."""
        descriptor = resources.get(str(uri))
        return [
            ReadResourceContents(
                content=resources.read_resource(descriptor.uri),
                mime_type=descriptor.mime_type,
            )
        ]

    return server


async def run_mcp_server(settings: Settings | None = None) -> None:
    """Run the MCP server using stdio transport.

    Raises:
        ConfigurationError: If no API key is configured.
    """
    settings = settings or get_settings()
    factory = get_factory(settings)
    api_url = settings.playvideo.api_url

    dispatcher = ToolDispatcher(factory.get_remote_client(), api_url)
    server = create_mcp_server(dispatcher, ResourceRegistry(api_url), settings)

    logger.info(
        "PlayVideo MCP server running",
        extra={"api_url": api_url, "tool_count": len(dispatcher.list_tools())},
    )
    try:
        async with stdio_server() as (read_stream, write_stream):
            await server.run(
                read_stream,
                write_stream,
                server.create_initialization_options(),
            )
    finally:
        await factory.close_all()
