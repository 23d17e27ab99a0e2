"""Application services - catalog, validation, dispatch, rendering, resources."""

from playvideo_mcp.application.services.catalog import (
    DEFAULT_CATALOG,
    TOOLS,
    ToolCatalog,
)
from playvideo_mcp.application.services.dispatcher import (
    ToolDispatcher,
    build_remote_call,
)
from playvideo_mcp.application.services.presentation import (
    RENDERERS,
    render_upload_instructions,
)
from playvideo_mcp.application.services.resources import RESOURCES, ResourceRegistry
from playvideo_mcp.application.services.validation import validate_arguments

__all__ = [
    # Catalog
    "TOOLS",
    "DEFAULT_CATALOG",
    "ToolCatalog",
    "validate_arguments",
    # Dispatch
    "ToolDispatcher",
    "build_remote_call",
    # Presentation
    "RENDERERS",
    "render_upload_instructions",
    # Resources
    "RESOURCES",
    "ResourceRegistry",
]
