"""Video and collection models."""

from enum import Enum

from pydantic import Field

from playvideo_mcp.domain.models.base import RemoteModel


class VideoStatus(str, Enum):
    """Processing status of an uploaded video."""

    PENDING = "PENDING"  # Uploaded, waiting for a worker
    PROCESSING = "PROCESSING"  # Transcoding to HLS
    COMPLETED = "COMPLETED"  # Playlist and thumbnail available
    FAILED = "FAILED"


class CollectionRef(RemoteModel):
    """Collection summary embedded in a video."""

    slug: str
    name: str


class Video(RemoteModel):
    """A video hosted on PlayVideo."""

    id: str
    filename: str
    status: str
    duration: int | float | None = Field(default=None, description="Seconds")
    playlist_url: str | None = Field(default=None, description="HLS playlist")
    thumbnail_url: str | None = None
    collection: CollectionRef | None = None


class Collection(RemoteModel):
    """A named group of videos, addressed by slug."""

    id: str | None = None
    name: str
    slug: str
    video_count: int = Field(default=0, ge=0)
    storage_used: int = Field(default=0, ge=0, description="Bytes")
