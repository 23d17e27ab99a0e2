"""Base model for PlayVideo API payloads."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class RemoteModel(BaseModel):
    """Read-only view of a JSON object returned by the PlayVideo API.

    The API speaks camelCase; fields are declared in snake_case and
    unknown keys are ignored so new server fields do not break parsing.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )
