"""Webhook models."""

from enum import Enum

from pydantic import Field

from playvideo_mcp.domain.models.base import RemoteModel


class WebhookEvent(str, Enum):
    """Events a webhook can subscribe to."""

    VIDEO_UPLOADED = "video.uploaded"
    VIDEO_PROCESSING = "video.processing"
    VIDEO_COMPLETED = "video.completed"
    VIDEO_FAILED = "video.failed"
    COLLECTION_CREATED = "collection.created"
    COLLECTION_DELETED = "collection.deleted"


class Webhook(RemoteModel):
    """A webhook endpoint registration.

    ``secret`` is only present in the create response and is kept out of
    the model repr.
    """

    id: str
    url: str
    events: list[str] = Field(default_factory=list)
    is_active: bool = True
    secret: str | None = Field(default=None, repr=False)
    created_at: str | None = None


class WebhookDelivery(RemoteModel):
    """One delivery attempt record."""

    id: str
    event: str
    status_code: int | None = None
    error: str | None = None
    attempt_count: int = 0


class WebhookWithDeliveries(Webhook):
    """Webhook details with its recent delivery history."""

    recent_deliveries: list[WebhookDelivery] = Field(default_factory=list)


class WebhookTestResult(RemoteModel):
    """Outcome of sending a test event."""

    message: str | None = None
    status_code: int | None = None
    error: str | None = None
