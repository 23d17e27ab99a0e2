"""Embed player models."""

from pydantic import Field

from playvideo_mcp.domain.models.base import RemoteModel


class EmbedSettings(RemoteModel):
    """Account-wide embed player configuration."""

    allowed_domains: list[str] = Field(default_factory=list)
    allow_localhost: bool = False
    primary_color: str | None = None
    accent_color: str | None = None
    logo_url: str | None = None
    logo_position: str | None = None
    autoplay: bool = False
    muted: bool = False
    loop: bool = False


class EmbedCode(RemoteModel):
    """Ready-to-paste iframe snippets."""

    responsive: str
    fixed: str


class SignedEmbed(RemoteModel):
    """Signed embed URL for one video."""

    embed_url: str
    embed_code: EmbedCode
