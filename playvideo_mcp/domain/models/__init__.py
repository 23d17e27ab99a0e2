"""Domain models for the PlayVideo MCP gateway."""

from playvideo_mcp.domain.models.account import (
    Account,
    ApiKey,
    PlanLimits,
    Usage,
    UsageCounters,
)
from playvideo_mcp.domain.models.base import RemoteModel
from playvideo_mcp.domain.models.catalog import (
    ArgumentSpec,
    ArgumentType,
    RemoteRoute,
    ResourceDescriptor,
    ToolDescriptor,
)
from playvideo_mcp.domain.models.embed import EmbedCode, EmbedSettings, SignedEmbed
from playvideo_mcp.domain.models.video import (
    Collection,
    CollectionRef,
    Video,
    VideoStatus,
)
from playvideo_mcp.domain.models.webhook import (
    Webhook,
    WebhookDelivery,
    WebhookEvent,
    WebhookTestResult,
    WebhookWithDeliveries,
)

__all__ = [
    # Catalog
    "ArgumentSpec",
    "ArgumentType",
    "RemoteRoute",
    "ToolDescriptor",
    "ResourceDescriptor",
    # Remote payloads
    "RemoteModel",
    "Collection",
    "CollectionRef",
    "Video",
    "VideoStatus",
    "Webhook",
    "WebhookDelivery",
    "WebhookEvent",
    "WebhookTestResult",
    "WebhookWithDeliveries",
    "EmbedCode",
    "EmbedSettings",
    "SignedEmbed",
    "ApiKey",
    "Account",
    "Usage",
    "UsageCounters",
    "PlanLimits",
]
