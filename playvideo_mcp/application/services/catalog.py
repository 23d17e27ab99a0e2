"""Tool catalog: every operation the gateway exposes and how it is routed."""

from collections.abc import Iterable, Iterator

from playvideo_mcp.domain.exceptions import UnknownToolError
from playvideo_mcp.domain.models.catalog import (
    ArgumentSpec,
    ArgumentType,
    RemoteRoute,
    ToolDescriptor,
)
from playvideo_mcp.domain.models.video import VideoStatus
from playvideo_mcp.domain.models.webhook import WebhookEvent

_STRING = ArgumentType.STRING
_BOOLEAN = ArgumentType.BOOLEAN
_ARRAY = ArgumentType.ARRAY


def _id(description: str) -> ArgumentSpec:
    return ArgumentSpec(name="id", type=_STRING, description=description, required=True)


def _domains(description: str) -> ArgumentSpec:
    return ArgumentSpec(
        name="allowedDomains",
        type=_ARRAY,
        item_type=_STRING,
        description=description,
    )


def _allow_localhost(description: str) -> ArgumentSpec:
    return ArgumentSpec(name="allowLocalhost", type=_BOOLEAN, description=description)


class ToolCatalog:
    """Immutable, ordered set of tool descriptors with unique names."""

    def __init__(self, tools: Iterable[ToolDescriptor]) -> None:
        self._tools = tuple(tools)
        self._by_name: dict[str, ToolDescriptor] = {}
        for tool in self._tools:
            if tool.name in self._by_name:
                raise ValueError(f"Duplicate tool name: {tool.name}")
            self._by_name[tool.name] = tool

    def list_tools(self) -> tuple[ToolDescriptor, ...]:
        """All descriptors, in catalog order."""
        return self._tools

    def get(self, name: str) -> ToolDescriptor:
        """Look up a descriptor by name.

        Raises:
            UnknownToolError: If the name is not in the catalog.
        """
        try:
            return self._by_name[name]
        except KeyError:
            raise UnknownToolError(name) from None

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(self._by_name)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __iter__(self) -> Iterator[ToolDescriptor]:
        return iter(self._tools)

    def __len__(self) -> int:
        return len(self._tools)


TOOLS: tuple[ToolDescriptor, ...] = (
    # Collections
    ToolDescriptor(
        name="list_collections",
        description="List all video collections in your PlayVideo account",
        route=RemoteRoute(method="GET", path="/collections"),
    ),
    ToolDescriptor(
        name="create_collection",
        description="Create a new video collection to organize your videos",
        arguments=(
            ArgumentSpec(
                name="name",
                type=_STRING,
                description="Name for the collection (1-100 characters)",
                required=True,
            ),
            ArgumentSpec(
                name="description",
                type=_STRING,
                description="Optional description for the collection",
            ),
        ),
        route=RemoteRoute(
            method="POST", path="/collections", body=("name", "description")
        ),
    ),
    ToolDescriptor(
        name="delete_collection",
        description="Delete a collection and all its videos",
        arguments=(
            ArgumentSpec(
                name="slug",
                type=_STRING,
                description="The collection slug to delete",
                required=True,
            ),
        ),
        route=RemoteRoute(method="DELETE", path="/collections/{slug}"),
    ),
    # Videos
    ToolDescriptor(
        name="list_videos",
        description="List videos, optionally filtered by collection or status",
        arguments=(
            ArgumentSpec(
                name="collection",
                type=_STRING,
                description="Filter by collection slug",
            ),
            ArgumentSpec(
                name="status",
                type=_STRING,
                enum=tuple(status.value for status in VideoStatus),
                description="Filter by video status",
            ),
            ArgumentSpec(
                name="limit",
                type=ArgumentType.NUMBER,
                description="Number of results (max 100)",
            ),
        ),
        route=RemoteRoute(
            method="GET", path="/videos", query=("collection", "status", "limit")
        ),
    ),
    ToolDescriptor(
        name="get_video",
        description="Get details for a specific video including playback URLs",
        arguments=(_id("The video ID"),),
        route=RemoteRoute(method="GET", path="/videos/{id}"),
    ),
    ToolDescriptor(
        name="delete_video",
        description="Delete a video",
        arguments=(_id("The video ID to delete"),),
        route=RemoteRoute(method="DELETE", path="/videos/{id}"),
    ),
    ToolDescriptor(
        name="get_upload_instructions",
        description=(
            "Get instructions for uploading a video "
            "(file uploads require external tools like curl or an SDK)"
        ),
        arguments=(
            ArgumentSpec(
                name="collection",
                type=_STRING,
                description="The collection slug to upload to",
                required=True,
            ),
        ),
    ),
    # Webhooks
    ToolDescriptor(
        name="list_webhooks",
        description=(
            "List all webhooks configured for your account "
            "(requires PRO or BUSINESS plan)"
        ),
        route=RemoteRoute(method="GET", path="/webhooks"),
    ),
    ToolDescriptor(
        name="get_webhook",
        description="Get webhook details including recent delivery history",
        arguments=(_id("The webhook ID"),),
        route=RemoteRoute(method="GET", path="/webhooks/{id}"),
    ),
    ToolDescriptor(
        name="create_webhook",
        description=(
            "Create a new webhook to receive event notifications. "
            "IMPORTANT: The secret is only returned once - save it securely!"
        ),
        arguments=(
            ArgumentSpec(
                name="url",
                type=_STRING,
                description="The HTTPS URL to receive webhook events",
                required=True,
            ),
            ArgumentSpec(
                name="events",
                type=_ARRAY,
                item_type=_STRING,
                item_enum=tuple(event.value for event in WebhookEvent),
                description="Events to subscribe to",
                required=True,
            ),
        ),
        route=RemoteRoute(method="POST", path="/webhooks", body=("url", "events")),
    ),
    ToolDescriptor(
        name="update_webhook",
        description="Update a webhook's URL, events, or active status",
        arguments=(
            _id("The webhook ID to update"),
            ArgumentSpec(name="url", type=_STRING, description="New URL for the webhook"),
            ArgumentSpec(
                name="events",
                type=_ARRAY,
                item_type=_STRING,
                description="New events to subscribe to",
            ),
            ArgumentSpec(
                name="isActive",
                type=_BOOLEAN,
                description="Enable or disable the webhook",
            ),
        ),
        route=RemoteRoute(
            method="PATCH",
            path="/webhooks/{id}",
            body=("url", "events", "isActive"),
        ),
    ),
    ToolDescriptor(
        name="test_webhook",
        description="Send a test event to a webhook to verify it's working",
        arguments=(_id("The webhook ID to test"),),
        route=RemoteRoute(method="POST", path="/webhooks/{id}/test", body=()),
    ),
    ToolDescriptor(
        name="delete_webhook",
        description="Delete a webhook",
        arguments=(_id("The webhook ID to delete"),),
        route=RemoteRoute(method="DELETE", path="/webhooks/{id}"),
    ),
    # Embed
    ToolDescriptor(
        name="get_embed_settings",
        description="Get current embed player settings (colors, controls, behavior)",
        route=RemoteRoute(method="GET", path="/embed/settings"),
    ),
    ToolDescriptor(
        name="update_embed_settings",
        description="Update embed player settings",
        arguments=(
            ArgumentSpec(
                name="primaryColor",
                type=_STRING,
                description="Primary color (hex, e.g., #FF0000)",
            ),
            ArgumentSpec(name="accentColor", type=_STRING, description="Accent color (hex)"),
            ArgumentSpec(name="autoplay", type=_BOOLEAN, description="Auto-play videos"),
            ArgumentSpec(name="muted", type=_BOOLEAN, description="Start muted"),
            ArgumentSpec(name="loop", type=_BOOLEAN, description="Loop videos"),
            _allow_localhost("Allow embedding on localhost"),
            _domains("Domains allowed to embed videos"),
        ),
        route=RemoteRoute(
            method="PATCH",
            path="/embed/settings",
            body=(
                "primaryColor",
                "accentColor",
                "autoplay",
                "muted",
                "loop",
                "allowLocalhost",
                "allowedDomains",
            ),
        ),
    ),
    ToolDescriptor(
        name="sign_embed",
        description="Generate a signed embed URL and HTML code for a video",
        arguments=(
            ArgumentSpec(
                name="videoId",
                type=_STRING,
                description="The video ID to embed",
                required=True,
            ),
        ),
        route=RemoteRoute(method="POST", path="/embed/sign", body=("videoId",)),
    ),
    # API keys
    ToolDescriptor(
        name="list_api_keys",
        description="List all API keys for your account",
        route=RemoteRoute(method="GET", path="/api-keys"),
    ),
    ToolDescriptor(
        name="create_api_key",
        description=(
            "Create a new API key. "
            "IMPORTANT: The full key is only returned once - save it securely!"
        ),
        arguments=(
            ArgumentSpec(
                name="name",
                type=_STRING,
                description="Name for the API key (e.g., 'Production Server')",
                required=True,
            ),
        ),
        route=RemoteRoute(method="POST", path="/api-keys", body=("name",)),
    ),
    ToolDescriptor(
        name="delete_api_key",
        description="Delete an API key (cannot delete the key currently in use)",
        arguments=(_id("The API key ID to delete"),),
        route=RemoteRoute(method="DELETE", path="/api-keys/{id}"),
    ),
    # Account
    ToolDescriptor(
        name="get_account",
        description="Get account information including plan and settings",
        route=RemoteRoute(method="GET", path="/account"),
    ),
    ToolDescriptor(
        name="update_account",
        description="Update account settings",
        arguments=(
            _domains("Domains allowed to access your videos"),
            _allow_localhost("Allow access from localhost"),
        ),
        route=RemoteRoute(
            method="PATCH",
            path="/account",
            body=("allowedDomains", "allowLocalhost"),
        ),
    ),
    # Usage
    ToolDescriptor(
        name="get_usage",
        description="Get current usage statistics and plan limits",
        route=RemoteRoute(method="GET", path="/usage"),
    ),
)

DEFAULT_CATALOG = ToolCatalog(TOOLS)
