"""Tool and resource catalog models."""

from enum import Enum
from string import Formatter
from typing import Any, Literal, Self

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ArgumentType(str, Enum):
    """JSON Schema types accepted for tool arguments."""

    STRING = "string"
    NUMBER = "number"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    ARRAY = "array"


class ArgumentSpec(BaseModel):
    """A single named tool argument."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    type: ArgumentType
    description: str
    required: bool = False
    enum: tuple[str, ...] | None = Field(
        default=None,
        description="Allowed values for scalar arguments",
    )
    item_type: ArgumentType | None = Field(
        default=None,
        description="Element type for array arguments",
    )
    item_enum: tuple[str, ...] | None = Field(
        default=None,
        description="Allowed element values for array arguments",
    )

    @model_validator(mode="after")
    def _check_array_fields(self) -> Self:
        is_array = self.type is ArgumentType.ARRAY
        if not is_array and (self.item_type or self.item_enum):
            raise ValueError(f"{self.name}: item_type/item_enum need type=array")
        if is_array and self.enum:
            raise ValueError(f"{self.name}: use item_enum for array arguments")
        return self

    def to_schema(self) -> dict[str, Any]:
        """JSON Schema for this argument."""
        schema: dict[str, Any] = {"type": self.type.value}
        if self.type is ArgumentType.ARRAY:
            items: dict[str, Any] = {
                "type": (self.item_type or ArgumentType.STRING).value
            }
            if self.item_enum:
                items["enum"] = list(self.item_enum)
            schema["items"] = items
        if self.enum:
            schema["enum"] = list(self.enum)
        schema["description"] = self.description
        return schema


class RemoteRoute(BaseModel):
    """How a tool maps onto one PlayVideo API request.

    ``path`` may contain ``{placeholders}`` filled from arguments of the
    same name. ``body`` lists the arguments sent in the JSON body; None
    means no body, an empty tuple sends ``{}``.
    """

    model_config = ConfigDict(frozen=True)

    method: Literal["GET", "POST", "PATCH", "DELETE"]
    path: str = Field(pattern=r"^/")
    query: tuple[str, ...] = ()
    body: tuple[str, ...] | None = None

    @property
    def path_params(self) -> tuple[str, ...]:
        """Placeholder names in the path template, in order."""
        return tuple(
            field for _, field, _, _ in Formatter().parse(self.path) if field
        )


class ToolDescriptor(BaseModel):
    """A named operation exposed to the assistant runtime.

    Tools without a route are answered locally and never touch the network.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(pattern=r"^[a-z][a-z0-9_]*$")
    description: str
    arguments: tuple[ArgumentSpec, ...] = ()
    route: RemoteRoute | None = None

    @model_validator(mode="after")
    def _check_route(self) -> Self:
        names = [arg.name for arg in self.arguments]
        if len(names) != len(set(names)):
            raise ValueError(f"{self.name}: duplicate argument names")
        if self.route is None:
            return self

        by_name = {arg.name: arg for arg in self.arguments}
        for param in self.route.path_params:
            if param not in by_name or not by_name[param].required:
                raise ValueError(
                    f"{self.name}: path parameter '{param}' must be a required argument"
                )
        for field in (*self.route.query, *(self.route.body or ())):
            if field not in by_name:
                raise ValueError(f"{self.name}: route field '{field}' is not an argument")
        return self

    @property
    def required_arguments(self) -> tuple[str, ...]:
        """Names of the arguments that must be present."""
        return tuple(arg.name for arg in self.arguments if arg.required)

    def input_schema(self) -> dict[str, Any]:
        """JSON Schema object describing the accepted arguments."""
        schema: dict[str, Any] = {
            "type": "object",
            "properties": {arg.name: arg.to_schema() for arg in self.arguments},
        }
        if self.required_arguments:
            schema["required"] = list(self.required_arguments)
        return schema


class ResourceDescriptor(BaseModel):
    """A static, URI-addressed document."""

    model_config = ConfigDict(frozen=True)

    uri: str
    name: str
    description: str
    mime_type: str = "text/markdown"
