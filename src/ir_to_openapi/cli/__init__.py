"""CLI support module for ir-to-openapi.

The Typer application itself lives in ``ir_to_openapi.cli_main``.
"""

from ir_to_openapi.cli.error_formatter import ErrorFormatter, ErrorTable, ErrorTree
from ir_to_openapi.cli.exception_handler import handle_exceptions
from ir_to_openapi.cli.pydantic_errors import (
    format_pydantic_location,
    get_suggestion_for_error,
    translate_pydantic_error,
)

__all__ = [
    "ErrorFormatter",
    "ErrorTable",
    "ErrorTree",
    "handle_exceptions",
    "format_pydantic_location",
    "get_suggestion_for_error",
    "translate_pydantic_error",
]
