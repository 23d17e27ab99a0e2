"""Argument validation against a tool's input schema."""

from collections.abc import Mapping
from typing import Any

from jsonschema import Draft202012Validator, ValidationError

from playvideo_mcp.domain.exceptions import ToolValidationError
from playvideo_mcp.domain.models.catalog import ToolDescriptor


def _describe(error: ValidationError) -> str:
    location = ".".join(str(part) for part in error.absolute_path)
    return f"{location}: {error.message}" if location else error.message


def validate_arguments(
    tool: ToolDescriptor,
    arguments: Mapping[str, Any] | None,
) -> dict[str, Any]:
    """Check arguments against the tool's schema.

    Missing required fields, values outside an enum and JSON type
    mismatches (e.g. a string where an array is expected) are rejected.
    Unknown extra fields are accepted and left untouched.

    Args:
        tool: Descriptor of the tool being called.
        arguments: Raw arguments from the runtime; None means no arguments.

    Returns:
        The arguments as a plain dict, without null-valued entries.

    Raises:
        ToolValidationError: Listing every problem found.
    """
    if arguments is None:
        arguments = {}
    if not isinstance(arguments, Mapping):
        raise ToolValidationError(tool.name, ["arguments must be an object"])

    # null is treated as "not supplied"
    instance = {key: value for key, value in arguments.items() if value is not None}
    validator = Draft202012Validator(tool.input_schema())
    problems = sorted(
        _describe(error)
        for error in validator.iter_errors(instance)
    )
    if problems:
        raise ToolValidationError(tool.name, problems)
    return instance
