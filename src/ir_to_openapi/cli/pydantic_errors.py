"""Translate Pydantic errors to user-friendly messages."""

from __future__ import annotations

from pydantic_core import ErrorDetails

# Translation map for Pydantic error types
ERROR_TRANSLATIONS: dict[str, str] = {
    "missing": "This field is required but was not provided",
    "extra_forbidden": "This setting is not recognized",
    "string_type": "Must be a string",
    "int_type": "Must be an integer",
    "int_parsing": "Must be an integer",
    "bool_type": "Must be true or false",
    "bool_parsing": "Must be true or false",
    "list_type": "Must be a list",
    "tuple_type": "Must be a list",
    "dict_type": "Must be an object/dictionary",
    "model_type": "Must be an object/dictionary",
    "enum": "Must be one of the allowed values",
    "value_error": "Invalid value",
    "too_short": "Must not be empty",
    "string_too_short": "String is too short",
    "greater_than_equal": "Value is too small",
}


def translate_pydantic_error(error: ErrorDetails) -> str:
    """Translate a Pydantic error to a user-friendly message.

    Args:
    ----
        error: The Pydantic error details.

    Returns:
    -------
        User-friendly error message.

    """
    error_type = error["type"]
    ctx = error.get("ctx") or {}

    base_msg = ERROR_TRANSLATIONS.get(error_type, error["msg"])

    if error_type == "enum":
        expected = ctx.get("expected", "unknown")
        base_msg = f"Must be one of: {expected}"

    elif error_type == "string_too_short":
        min_length = ctx.get("min_length", 0)
        base_msg = f"Must be at least {min_length} characters"

    elif error_type == "greater_than_equal":
        ge = ctx.get("ge", 0)
        base_msg = f"Must be at least {ge}"

    return base_msg


def format_pydantic_location(loc: tuple[str | int, ...]) -> str:
    """Format Pydantic location tuple to readable path.

    Examples
    --------
        >>> format_pydantic_location(("endpoints", 0, "parameters", 1, "in"))
        'endpoints[0].parameters[1].in'

    """
    parts: list[str] = []
    for part in loc:
        if isinstance(part, int):
            parts.append(f"[{part}]")
        else:
            if parts:
                parts.append(".")
            parts.append(str(part))

    return "".join(parts)


def get_suggestion_for_error(error: ErrorDetails) -> str | None:
    """Get a suggestion for how to fix the error, if one is known."""
    error_type = error["type"]
    ctx = error.get("ctx") or {}

    suggestions: dict[str, str] = {
        "missing": "Check that the upstream parser emitted this key",
        "extra_forbidden": "Remove this setting or check for typos",
        "enum": f"Use one of the allowed values: {ctx.get('expected', 'see documentation')}",
    }

    return suggestions.get(error_type)
