"""Unit tests for PlayVideo API payload models."""

import pytest
from pydantic import ValidationError

from playvideo_mcp.domain.models import (
    ApiKey,
    Collection,
    EmbedSettings,
    SignedEmbed,
    Usage,
    Video,
    VideoStatus,
    Webhook,
    WebhookEvent,
    WebhookWithDeliveries,
)


class TestVideoStatus:
    """Tests for VideoStatus enum."""

    def test_values(self):
        assert [s.value for s in VideoStatus] == [
            "PENDING",
            "PROCESSING",
            "COMPLETED",
            "FAILED",
        ]


class TestWebhookEvent:
    """Tests for WebhookEvent enum."""

    def test_values(self):
        assert WebhookEvent.VIDEO_COMPLETED == "video.completed"
        assert len(WebhookEvent) == 6


class TestVideo:
    """Tests for Video model."""

    def test_parses_camel_case(self):
        video = Video.model_validate(
            {
                "id": "vid_1",
                "filename": "intro.mp4",
                "status": "COMPLETED",
                "duration": 12.5,
                "playlistUrl": "https://cdn.example/vid_1.m3u8",
                "thumbnailUrl": "https://cdn.example/vid_1.jpg",
                "collection": {"slug": "demo", "name": "Demo"},
            }
        )
        assert video.playlist_url == "https://cdn.example/vid_1.m3u8"
        assert video.collection is not None
        assert video.collection.slug == "demo"

    def test_optional_fields(self):
        video = Video.model_validate(
            {"id": "vid_1", "filename": "a.mp4", "status": "PENDING"}
        )
        assert video.duration is None
        assert video.playlist_url is None
        assert video.collection is None

    def test_unknown_fields_ignored(self):
        video = Video.model_validate(
            {"id": "vid_1", "filename": "a.mp4", "status": "PENDING", "new": 1}
        )
        assert not hasattr(video, "new")

    def test_missing_required_field(self):
        with pytest.raises(ValidationError):
            Video.model_validate({"id": "vid_1"})


class TestCollection:
    """Tests for Collection model."""

    def test_defaults(self):
        collection = Collection.model_validate({"name": "Demo", "slug": "demo"})
        assert collection.video_count == 0
        assert collection.storage_used == 0

    def test_negative_count_rejected(self):
        with pytest.raises(ValidationError):
            Collection.model_validate(
                {"name": "Demo", "slug": "demo", "videoCount": -1}
            )


class TestSecrets:
    """Secrets are kept out of model reprs."""

    def test_webhook_secret_not_in_repr(self):
        webhook = Webhook.model_validate(
            {"id": "wh_1", "url": "https://x.test/hook", "secret": "whsec_abc"}
        )
        assert webhook.secret == "whsec_abc"
        assert "whsec_abc" not in repr(webhook)

    def test_api_key_not_in_repr(self):
        key = ApiKey.model_validate(
            {"id": "key_1", "name": "CI", "keyPrefix": "play_live_ab", "key": "play_live_abcdef"}
        )
        assert "play_live_abcdef" not in repr(key)


class TestWebhookWithDeliveries:
    """Tests for WebhookWithDeliveries."""

    def test_parses_deliveries(self):
        webhook = WebhookWithDeliveries.model_validate(
            {
                "id": "wh_1",
                "url": "https://x.test/hook",
                "events": ["video.completed"],
                "isActive": False,
                "recentDeliveries": [
                    {"id": "d_1", "event": "video.completed", "statusCode": 200, "attemptCount": 1}
                ],
            }
        )
        assert webhook.is_active is False
        assert webhook.recent_deliveries[0].status_code == 200


class TestEmbed:
    """Tests for embed models."""

    def test_settings_defaults(self):
        settings = EmbedSettings.model_validate({})
        assert settings.allowed_domains == []
        assert settings.autoplay is False

    def test_signed_embed(self):
        embed = SignedEmbed.model_validate(
            {
                "embedUrl": "https://play.test/e/vid_1?sig=x",
                "embedCode": {"responsive": "<div></div>", "fixed": "<iframe></iframe>"},
            }
        )
        assert embed.embed_code.fixed == "<iframe></iframe>"


class TestUsage:
    """Tests for Usage model."""

    def test_explicit_aliases(self):
        usage = Usage.model_validate(
            {
                "plan": "PRO",
                "usage": {
                    "videosThisMonth": 3,
                    "videosLimit": "unlimited",
                    "storageUsedGB": "1.25",
                    "storageLimitGB": 100,
                },
                "limits": {
                    "maxFileSizeMB": 2048,
                    "maxDurationMinutes": 120,
                    "webhooks": True,
                },
            }
        )
        assert usage.usage.videos_limit == "unlimited"
        assert usage.usage.storage_limit_gb == 100
        assert usage.limits.max_file_size_mb == 2048
