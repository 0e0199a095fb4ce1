"""CLI exception handling."""

from __future__ import annotations

import logging
import traceback
from collections.abc import Callable
from functools import wraps
from typing import TypeVar

import typer
from pydantic import ValidationError as PydanticValidationError
from rich.console import Console
from rich.panel import Panel

from ir_to_openapi.models.loader import LoaderError
from ir_to_openapi.parser.runner import ParserError
from ir_to_openapi.validation.validator import IRValidationError

T = TypeVar("T")

logger = logging.getLogger(__name__)

console = Console(stderr=True)

STDERR_TAIL_LINES = 20


def handle_exceptions(
    verbose: bool = False,
) -> Callable[[Callable[..., T]], Callable[..., T]]:
    """Handle exceptions in CLI commands with formatted output.

    A ``verbose`` keyword passed to the wrapped command overrides the
    decorator default.

    Args:
    ----
        verbose: Whether to show full tracebacks.

    Returns:
    -------
        Decorator function.

    """

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @wraps(func)
        def wrapper(*args: object, **kwargs: object) -> T:
            show_details = bool(kwargs.get("verbose", verbose))
            try:
                return func(*args, **kwargs)
            except typer.Exit:
                raise
            except IRValidationError as e:
                _handle_validation_error(e, show_details)
                raise typer.Exit(1) from None
            except LoaderError as e:
                _handle_loader_error(e, show_details)
                raise typer.Exit(1) from None
            except ParserError as e:
                _handle_parser_error(e, show_details)
                raise typer.Exit(1) from None
            except PydanticValidationError as e:
                _handle_pydantic_error(e, show_details)
                raise typer.Exit(1) from None
            except PermissionError as e:
                _handle_permission_error(e, show_details)
                raise typer.Exit(1) from None
            except Exception as e:
                _handle_generic_error(e, show_details)
                raise typer.Exit(1) from None

        return wrapper

    return decorator


def _handle_validation_error(error: IRValidationError, verbose: bool) -> None:
    """Handle strict lint failures."""
    from ir_to_openapi.cli.error_formatter import ErrorFormatter

    formatter = ErrorFormatter(console, show_infos=verbose)
    formatter.format_validation_result(error.result)


def _handle_loader_error(error: LoaderError, verbose: bool) -> None:
    """Handle IR and configuration loading errors."""
    cause = error.__cause__
    if isinstance(cause, PydanticValidationError):
        title = "Malformed IR" if "Malformed IR" in str(error) else "Invalid Configuration"
        location = f"File: {error.path}\n\n" if error.path else ""
        console.print(Panel(f"[red]{location}{title}[/red]", title="Error", border_style="red"))
        _print_pydantic_details(cause)
        return

    console.print(
        Panel(
            f"[red]{error}[/red]",
            title="Load Error",
            border_style="red",
        )
    )


def _handle_parser_error(error: ParserError, verbose: bool) -> None:
    """Handle upstream parser failures."""
    body = f"[red]{error}[/red]"
    if error.stderr:
        lines = error.stderr.rstrip().splitlines()
        if not verbose:
            lines = lines[-STDERR_TAIL_LINES:]
        body += "\n\n[dim]" + "\n".join(lines) + "[/dim]"
    console.print(Panel(body, title="Parser Error", border_style="red"))


def _handle_pydantic_error(error: PydanticValidationError, verbose: bool) -> None:
    """Handle Pydantic validation errors."""
    console.print("[red bold]Schema Validation Failed[/red bold]")
    console.print()
    _print_pydantic_details(error)

    if verbose:
        console.print("[dim]Full error:[/dim]")
        console.print(str(error))


def _print_pydantic_details(error: PydanticValidationError) -> None:
    from ir_to_openapi.cli.pydantic_errors import (
        format_pydantic_location,
        get_suggestion_for_error,
        translate_pydantic_error,
    )

    for err in error.errors():
        location = format_pydantic_location(err["loc"])
        msg = translate_pydantic_error(err)
        suggestion = get_suggestion_for_error(err)

        console.print(f"[red]✗[/red] {location}")
        console.print(f"  {msg}")
        console.print(f"  [dim]({err['type']})[/dim]")

        if suggestion:
            console.print(f"  [green]💡 {suggestion}[/green]")

        console.print()


def _handle_permission_error(error: PermissionError, verbose: bool) -> None:
    """Handle permission errors."""
    filename = error.filename or "unknown"
    console.print(
        Panel(
            f"[red]Permission denied: {filename}[/red]\n\nCheck file permissions and try again.",
            title="Error",
            border_style="red",
        )
    )


def _handle_generic_error(error: Exception, verbose: bool) -> None:
    """Handle unexpected errors."""
    logger.debug("Unhandled exception", exc_info=error)
    console.print(
        Panel(
            f"[red]An unexpected error occurred:[/red]\n{error}",
            title="Error",
            border_style="red",
        )
    )

    if verbose:
        console.print("\n[dim]Traceback:[/dim]")
        console.print(traceback.format_exc())
    else:
        console.print("\n[dim]Use --verbose for full traceback[/dim]")
