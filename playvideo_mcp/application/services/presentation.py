"""Text renderers for PlayVideo API results.

Every renderer is a pure function of the decoded JSON result and the call
arguments; the same input always produces the same text. Shape mismatches
surface as ``ValueError`` (pydantic's ``ValidationError`` included).
"""

from collections.abc import Callable, Mapping
from typing import Any

from pydantic import TypeAdapter

from playvideo_mcp.domain.models import (
    Account,
    ApiKey,
    Collection,
    EmbedSettings,
    SignedEmbed,
    Usage,
    Video,
    Webhook,
    WebhookTestResult,
    WebhookWithDeliveries,
)

Renderer = Callable[[Any, Mapping[str, Any]], str]

SAVE_SECRET_WARNING = "IMPORTANT: Save this {kind} securely! It won't be shown again."

_collections = TypeAdapter(list[Collection])
_videos = TypeAdapter(list[Video])
_webhooks = TypeAdapter(list[Webhook])
_api_keys = TypeAdapter(list[ApiKey])
_event_names = TypeAdapter(list[str])


def _unwrap(result: Any, key: str) -> Any:
    """Return ``result[key]`` from an envelope object."""
    if not isinstance(result, dict) or key not in result:
        raise ValueError(f"expected an object with a '{key}' field")
    return result[key]


def _plural(count: int, noun: str) -> str:
    return f"{count} {noun}" if count == 1 else f"{count} {noun}s"


def _yes_no(value: bool) -> str:
    return "Yes" if value else "No"


def _join(values: list[str], empty: str = "None") -> str:
    return ", ".join(values) if values else empty


def format_bytes(size: int) -> str:
    """Human-readable byte count (1024-based)."""
    value = float(size)
    for unit in ("B", "KB", "MB", "GB"):
        if value < 1024:
            return f"{value:.0f} {unit}" if unit == "B" else f"{value:.1f} {unit}"
        value /= 1024
    return f"{value:.1f} TB"


# Collections


def render_collections(result: Any, _arguments: Mapping[str, Any]) -> str:
    collections = _collections.validate_python(_unwrap(result, "collections"))
    if not collections:
        return "Found 0 collections."
    lines = [
        f"- {c.name} ({c.slug}): {_plural(c.video_count, 'video')}, "
        f"{format_bytes(c.storage_used)}"
        for c in collections
    ]
    return f"Found {_plural(len(collections), 'collection')}:\n\n" + "\n".join(lines)


def render_created_collection(result: Any, _arguments: Mapping[str, Any]) -> str:
    collection = Collection.model_validate(result)
    return (
        "Collection created successfully!\n\n"
        f"Slug: {collection.slug}\n"
        f"Name: {collection.name}"
    )


def _deleted(kind: str, key: str) -> Renderer:
    def render(_result: Any, arguments: Mapping[str, Any]) -> str:
        return f'{kind} "{arguments[key]}" deleted successfully.'

    render.__name__ = f"render_deleted_{kind.lower().replace(' ', '_')}"
    return render


# Videos


def render_videos(result: Any, _arguments: Mapping[str, Any]) -> str:
    videos = _videos.validate_python(_unwrap(result, "videos"))
    if not videos:
        return "No videos found."
    lines = []
    for video in videos:
        lines.append(f"- {video.filename} ({video.status})")
        if video.playlist_url:
            lines.append(f"  URL: {video.playlist_url}")
    return f"Found {_plural(len(videos), 'video')}:\n\n" + "\n".join(lines)


def render_video(result: Any, _arguments: Mapping[str, Any]) -> str:
    video = Video.model_validate(result)
    duration = f"{video.duration:g}s" if video.duration else "N/A"
    collection = video.collection.name if video.collection else "N/A"
    return (
        "Video Details:\n\n"
        f"ID: {video.id}\n"
        f"Filename: {video.filename}\n"
        f"Status: {video.status}\n"
        f"Duration: {duration}\n"
        f"Collection: {collection}\n\n"
        "URLs:\n"
        f"- Playlist (HLS): {video.playlist_url or 'Not ready'}\n"
        f"- Thumbnail: {video.thumbnail_url or 'Not ready'}"
    )


def render_upload_instructions(collection: str, api_url: str) -> str:
    """Upload how-to for a collection; uploads are multipart and not proxied."""
    return f"""To upload a video to the "{collection}" collection:

## Using curl:
```bash
curl -X POST {api_url}/videos \\
  -H "Authorization: Bearer ${{PLAYVIDEO_API_KEY}}" \\
  -F "file=@/path/to/video.mp4" \\
  -F "collection={collection}"
```

## Using the Python SDK:
```python
import os

from playvideo import PlayVideo

client = PlayVideo(os.environ["PLAYVIDEO_API_KEY"])
result = client.videos.upload("./video.mp4", "{collection}")
```

## Using the JavaScript SDK:
```javascript
import PlayVideo from 'playvideo';
const client = new PlayVideo(process.env.PLAYVIDEO_API_KEY);
const result = await client.videos.uploadFile('./video.mp4', '{collection}');
```

After uploading, use the get_video tool to check processing status."""


# Webhooks


def _webhook_block(webhook: Webhook) -> str:
    state = "active" if webhook.is_active else "inactive"
    return (
        f"- {webhook.id}: {webhook.url} [{state}]\n"
        f"  Events: {_join(webhook.events)}"
    )


def render_webhooks(result: Any, _arguments: Mapping[str, Any]) -> str:
    webhooks = _webhooks.validate_python(_unwrap(result, "webhooks"))
    available = _event_names.validate_python(result.get("availableEvents") or [])
    if webhooks:
        body = f"Webhooks ({len(webhooks)}):\n\n" + "\n".join(
            _webhook_block(w) for w in webhooks
        )
    else:
        body = "No webhooks configured."
    return f"{body}\n\nAvailable events: {_join(available)}"


def render_webhook(result: Any, _arguments: Mapping[str, Any]) -> str:
    webhook = WebhookWithDeliveries.model_validate(result)
    deliveries = []
    for delivery in webhook.recent_deliveries:
        line = (
            f"  - {delivery.event}: {delivery.status_code or 'pending'} "
            f"(attempts: {delivery.attempt_count})"
        )
        if delivery.error:
            line += f" - {delivery.error}"
        deliveries.append(line)
    return (
        "Webhook Details:\n\n"
        f"ID: {webhook.id}\n"
        f"URL: {webhook.url}\n"
        f"Active: {_yes_no(webhook.is_active)}\n"
        f"Events: {_join(webhook.events)}\n\n"
        "Recent Deliveries:\n"
        + ("\n".join(deliveries) or "  No recent deliveries")
    )


def render_created_webhook(result: Any, _arguments: Mapping[str, Any]) -> str:
    webhook = Webhook.model_validate(_unwrap(result, "webhook"))
    if not webhook.secret:
        raise ValueError("webhook secret missing from response")
    return (
        "Webhook created successfully!\n\n"
        f"ID: {webhook.id}\n"
        f"URL: {webhook.url}\n"
        f"Events: {_join(webhook.events)}\n\n"
        f"SECRET: {webhook.secret}\n\n"
        f"{SAVE_SECRET_WARNING.format(kind='secret')}\n"
        "Use it to verify webhook signatures."
    )


def render_updated_webhook(result: Any, _arguments: Mapping[str, Any]) -> str:
    webhook = Webhook.model_validate(result)
    return (
        "Webhook updated!\n\n"
        f"URL: {webhook.url}\n"
        f"Active: {_yes_no(webhook.is_active)}\n"
        f"Events: {_join(webhook.events)}"
    )


def render_webhook_test(result: Any, _arguments: Mapping[str, Any]) -> str:
    outcome = WebhookTestResult.model_validate(result)
    status = outcome.status_code if outcome.status_code is not None else "none"
    if outcome.error:
        return f"Webhook test failed: {outcome.error} (status: {status})"
    return f"Webhook test successful! Status: {status}"


# Embed


def _embed_block(settings: EmbedSettings) -> str:
    logo = settings.logo_url or "None"
    if settings.logo_url and settings.logo_position:
        logo += f" ({settings.logo_position})"
    return (
        f"Primary Color: {settings.primary_color or 'Default'}\n"
        f"Accent Color: {settings.accent_color or 'Default'}\n"
        f"Logo: {logo}\n"
        f"Autoplay: {_yes_no(settings.autoplay)}\n"
        f"Muted: {_yes_no(settings.muted)}\n"
        f"Loop: {_yes_no(settings.loop)}\n"
        f"Allow Localhost: {_yes_no(settings.allow_localhost)}\n"
        f"Allowed Domains: {_join(settings.allowed_domains)}"
    )


def render_embed_settings(result: Any, _arguments: Mapping[str, Any]) -> str:
    return "Embed Settings:\n\n" + _embed_block(EmbedSettings.model_validate(result))


def render_updated_embed_settings(result: Any, _arguments: Mapping[str, Any]) -> str:
    settings = EmbedSettings.model_validate(_unwrap(result, "settings"))
    return "Embed settings updated!\n\n" + _embed_block(settings)


def render_signed_embed(result: Any, _arguments: Mapping[str, Any]) -> str:
    embed = SignedEmbed.model_validate(result)
    return (
        f"Embed URL: {embed.embed_url}\n\n"
        f"Responsive HTML:\n{embed.embed_code.responsive}\n\n"
        f"Fixed Size HTML:\n{embed.embed_code.fixed}"
    )


# API keys


def render_api_keys(result: Any, _arguments: Mapping[str, Any]) -> str:
    keys = _api_keys.validate_python(_unwrap(result, "apiKeys"))
    lines = [
        f"- {k.name} ({k.key_prefix}...) - Last used: {k.last_used_at or 'Never'}"
        for k in keys
    ]
    return "API Keys:\n\n" + ("\n".join(lines) or "No API keys found.")


def render_created_api_key(result: Any, _arguments: Mapping[str, Any]) -> str:
    api_key = ApiKey.model_validate(_unwrap(result, "apiKey"))
    if not api_key.key:
        raise ValueError("API key value missing from response")
    return (
        "API Key created!\n\n"
        f"Name: {api_key.name}\n"
        f"Key: {api_key.key}\n\n"
        f"{SAVE_SECRET_WARNING.format(kind='key')}"
    )


# Account & usage


def render_account(result: Any, _arguments: Mapping[str, Any]) -> str:
    account = Account.model_validate(result)
    return (
        "Account Details:\n\n"
        f"Email: {account.email}\n"
        f"Name: {account.name or 'Not set'}\n"
        f"Plan: {account.plan}\n"
        f"Allowed Domains: {_join(account.allowed_domains)}\n"
        f"Allow Localhost: {_yes_no(account.allow_localhost)}"
    )


def render_updated_account(result: Any, _arguments: Mapping[str, Any]) -> str:
    account = Account.model_validate(_unwrap(result, "account"))
    return (
        "Account updated!\n\n"
        f"Allowed Domains: {_join(account.allowed_domains)}\n"
        f"Allow Localhost: {_yes_no(account.allow_localhost)}"
    )


def render_usage(result: Any, _arguments: Mapping[str, Any]) -> str:
    report = Usage.model_validate(result)
    usage, limits = report.usage, report.limits
    return (
        f"Plan: {report.plan}\n\n"
        "Usage:\n"
        f"- Videos this month: {usage.videos_this_month} / {usage.videos_limit}\n"
        f"- Storage: {usage.storage_used_gb} GB / {usage.storage_limit_gb} GB\n\n"
        "Limits:\n"
        f"- Max file size: {limits.max_file_size_mb} MB\n"
        f"- Max duration: {limits.max_duration_minutes} minutes\n"
        f"- Webhooks: {'Enabled' if limits.webhooks else 'Disabled'}"
    )


RENDERERS: dict[str, Renderer] = {
    "list_collections": render_collections,
    "create_collection": render_created_collection,
    "delete_collection": _deleted("Collection", "slug"),
    "list_videos": render_videos,
    "get_video": render_video,
    "delete_video": _deleted("Video", "id"),
    "list_webhooks": render_webhooks,
    "get_webhook": render_webhook,
    "create_webhook": render_created_webhook,
    "update_webhook": render_updated_webhook,
    "test_webhook": render_webhook_test,
    "delete_webhook": _deleted("Webhook", "id"),
    "get_embed_settings": render_embed_settings,
    "update_embed_settings": render_updated_embed_settings,
    "sign_embed": render_signed_embed,
    "list_api_keys": render_api_keys,
    "create_api_key": render_created_api_key,
    "delete_api_key": _deleted("API key", "id"),
    "get_account": render_account,
    "update_account": render_updated_account,
    "get_usage": render_usage,
}
