"""Tool dispatcher: validate, route, call the API and render the result."""

import time
from collections.abc import Callable, Mapping
from typing import Any
from urllib.parse import quote

from pydantic import ValidationError

from playvideo_mcp.application.dtos.tools import CallState, RemoteCall, RenderedResponse
from playvideo_mcp.application.services.catalog import DEFAULT_CATALOG, ToolCatalog
from playvideo_mcp.application.services.presentation import (
    RENDERERS,
    Renderer,
    render_upload_instructions,
)
from playvideo_mcp.application.services.validation import validate_arguments
from playvideo_mcp.commons.telemetry import LogContext, get_logger, set_correlation_id
from playvideo_mcp.domain.exceptions import (
    RemoteError,
    ToolValidationError,
    UnexpectedResponseError,
    UnknownToolError,
)
from playvideo_mcp.domain.models.catalog import ToolDescriptor
from playvideo_mcp.infrastructure.playvideo.base import RemoteClientBase

logger = get_logger(__name__)

LocalHandler = Callable[[Mapping[str, Any]], str]


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _is_blank(value: Any) -> bool:
    # mirrors a falsy check; booleans are real filter values
    if isinstance(value, bool):
        return False
    return value == "" or (isinstance(value, int | float) and value == 0)


def _path_segment(tool: ToolDescriptor, name: str, value: Any) -> str:
    segment = quote(str(value), safe="")
    # dot segments are collapsed by URL normalization and would change the endpoint
    if segment in {"", ".", ".."}:
        raise ToolValidationError(
            tool.name, [f"{name}: {segment!r} is not a valid path segment"]
        )
    return segment


def build_remote_call(tool: ToolDescriptor, arguments: Mapping[str, Any]) -> RemoteCall:
    """Derive the HTTP request for a validated tool invocation.

    Path placeholders are percent-escaped; query parameters are included
    only when supplied and non-empty, body fields only when supplied.

    Raises:
        ValueError: If the tool is answered locally.
        ToolValidationError: If a path value is empty or a dot segment.
    """
    route = tool.route
    if route is None:
        raise ValueError(f"{tool.name} has no remote route")

    path = route.path.format_map(
        {
            name: _path_segment(tool, name, arguments[name])
            for name in route.path_params
        }
    )
    params = {
        name: _query_value(arguments[name])
        for name in route.query
        if name in arguments and not _is_blank(arguments[name])
    }
    body = (
        None
        if route.body is None
        else {name: arguments[name] for name in route.body if name in arguments}
    )
    return RemoteCall(method=route.method, path=path, params=params, body=body)


def _describe_shape_problem(error: ValueError) -> str:
    # pydantic messages embed input values, which may hold secrets
    if isinstance(error, ValidationError):
        return "; ".join(
            f"{'.'.join(str(part) for part in detail['loc']) or 'result'}: {detail['msg']}"
            for detail in error.errors(include_input=False)
        )
    return str(error)


class ToolDispatcher:
    """Turns a tool invocation into exactly one rendered response.

    Every call ends COMPLETED, REJECTED (unknown tool or invalid
    arguments, nothing sent) or FAILED (remote, transport or shape error).
    Exceptions never escape ``call_tool`` apart from task cancellation.
    """

    def __init__(
        self,
        client: RemoteClientBase,
        api_url: str,
        catalog: ToolCatalog = DEFAULT_CATALOG,
        renderers: Mapping[str, Renderer] = RENDERERS,
    ) -> None:
        """Initialize the dispatcher.

        Args:
            client: PlayVideo API client.
            api_url: API root used in locally rendered instructions.
            catalog: Tools to expose.
            renderers: Result renderer per remote tool name.

        Raises:
            ValueError: If a catalog tool has no renderer or local handler.
        """
        self._client = client
        self._api_url = api_url
        self._catalog = catalog
        self._renderers = dict(renderers)
        self._local_handlers: dict[str, LocalHandler] = {
            "get_upload_instructions": self._upload_instructions,
        }

        unbound = [
            tool.name
            for tool in catalog
            if (tool.route is not None and tool.name not in self._renderers)
            or (tool.route is None and tool.name not in self._local_handlers)
        ]
        if unbound:
            raise ValueError(f"No handler for tools: {', '.join(unbound)}")

    @property
    def catalog(self) -> ToolCatalog:
        return self._catalog

    def list_tools(self) -> tuple[ToolDescriptor, ...]:
        """The tool catalog, in order."""
        return self._catalog.list_tools()

    async def call_tool(
        self,
        name: str,
        arguments: Mapping[str, Any] | None,
    ) -> RenderedResponse:
        """Run one tool invocation.

        Args:
            name: Tool name.
            arguments: Raw arguments from the runtime.

        Returns:
            The rendered response; ``is_error`` is set unless COMPLETED.
        """
        set_correlation_id()
        start = time.perf_counter()
        with LogContext(tool=name):
            try:
                response = await self._dispatch(name, arguments)
            except Exception as e:
                logger.exception("Unhandled error during tool call")
                response = RenderedResponse.error(
                    CallState.FAILED, f"Internal error: {type(e).__name__}"
                )

            logger.info(
                f"Tool call {response.state.value}",
                extra={
                    "state": response.state.value,
                    "duration_ms": round((time.perf_counter() - start) * 1000, 2),
                },
            )
        return response

    async def _dispatch(
        self,
        name: str,
        arguments: Mapping[str, Any] | None,
    ) -> RenderedResponse:
        try:
            tool = self._catalog.get(name)
            args = validate_arguments(tool, arguments)
            call = None if tool.route is None else build_remote_call(tool, args)
        except UnknownToolError as e:
            logger.warning(str(e))
            return RenderedResponse.error(CallState.REJECTED, str(e))
        except ToolValidationError as e:
            logger.warning(
                "Rejected invalid arguments",
                extra={"problem_count": len(e.problems)},
            )
            return RenderedResponse.error(CallState.REJECTED, str(e))

        logger.debug("Arguments validated", extra={"argument_keys": sorted(args)})

        if tool.route is None or call is None:
            return RenderedResponse.success(self._local_handlers[tool.name](args))

        try:
            result = await self._client.execute(call)
        except RemoteError as e:
            logger.warning(
                f"Remote call failed: {call.method} {tool.route.path}",
                extra={"status_code": e.status_code},
            )
            return RenderedResponse.error(CallState.FAILED, e.message)

        try:
            text = self._renderers[tool.name](result, args)
        except ValueError as e:
            error = UnexpectedResponseError(tool.name, _describe_shape_problem(e))
            logger.error(str(error))
            return RenderedResponse.error(CallState.FAILED, str(error))

        return RenderedResponse.success(text)

    def _upload_instructions(self, arguments: Mapping[str, Any]) -> str:
        return render_upload_instructions(arguments["collection"], self._api_url)
