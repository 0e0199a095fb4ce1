"""Common types and validators for Pydantic models."""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import BeforeValidator, ConfigDict

# Shared config for every IR model: immutable, accepts both the camelCase wire
# names and the Python field names, and ignores keys added by newer parsers.
IR_MODEL_CONFIG = ConfigDict(
    frozen=True,
    populate_by_name=True,
    extra="ignore",
)


def none_as_empty_list(value: Any) -> Any:
    """Coerce a JSON ``null`` into an empty list.

    The upstream parser serializes unset collections as ``null``.

    Examples
    --------
        >>> none_as_empty_list(None)
        []
        >>> none_as_empty_list(["a"])
        ['a']

    """
    if value is None:
        return []
    return value


def none_as_empty_str(value: Any) -> Any:
    """Coerce a JSON ``null`` into an empty string."""
    if value is None:
        return ""
    return value


def none_as_empty_dict(value: Any) -> Any:
    """Coerce a JSON ``null`` into an empty mapping."""
    if value is None:
        return {}
    return value


def none_as_false(value: Any) -> Any:
    """Coerce a JSON ``null`` into ``False``."""
    if value is None:
        return False
    return value


# Text fields that are optional on the wire but always a string in the model
Text = Annotated[str, BeforeValidator(none_as_empty_str)]

# Boolean flags that may be missing or null on the wire
Flag = Annotated[bool, BeforeValidator(none_as_false)]

# String collections that may be null on the wire
NameList = Annotated[tuple[str, ...], BeforeValidator(none_as_empty_list)]
