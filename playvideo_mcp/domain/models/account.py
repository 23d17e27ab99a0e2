"""Account, API key and usage models."""

from pydantic import Field

from playvideo_mcp.domain.models.base import RemoteModel


class ApiKey(RemoteModel):
    """An API key. ``key`` is only present right after creation."""

    id: str
    name: str
    key_prefix: str
    key: str | None = Field(default=None, repr=False)
    last_used_at: str | None = None
    created_at: str | None = None


class Account(RemoteModel):
    """The authenticated account."""

    id: str | None = None
    email: str
    name: str | None = None
    plan: str
    allowed_domains: list[str] = Field(default_factory=list)
    allow_localhost: bool = False


class UsageCounters(RemoteModel):
    """Consumption for the current billing period."""

    videos_this_month: int = 0
    videos_limit: int | str = Field(description="Count or 'unlimited'")
    storage_used_gb: str | int | float = Field(alias="storageUsedGB")
    storage_limit_gb: int | float = Field(alias="storageLimitGB")


class PlanLimits(RemoteModel):
    """Per-plan upload limits."""

    max_file_size_mb: int | float = Field(alias="maxFileSizeMB")
    max_duration_minutes: int | float
    webhooks: bool = False


class Usage(RemoteModel):
    """Usage report with the plan's limits."""

    plan: str
    usage: UsageCounters
    limits: PlanLimits
