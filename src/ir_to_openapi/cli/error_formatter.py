"""Lint result formatting with Rich."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.tree import Tree

from ir_to_openapi.validation.errors import ValidationSeverity

if TYPE_CHECKING:
    from ir_to_openapi.validation.errors import ValidationIssue, ValidationResult

SEVERITY_COLORS: dict[ValidationSeverity, str] = {
    ValidationSeverity.ERROR: "red",
    ValidationSeverity.WARNING: "yellow",
    ValidationSeverity.INFO: "blue",
}


class ErrorFormatter:
    """Formats lint issues for terminal display."""

    def __init__(
        self,
        console: Console | None = None,
        show_infos: bool = False,
    ) -> None:
        """Initialize formatter.

        Args:
        ----
            console: Rich Console for output.
            show_infos: Whether informational issues are printed too.

        """
        self.console = console or Console(stderr=True)
        self.show_infos = show_infos

    def format_validation_result(
        self,
        result: ValidationResult,
        source_path: Path | None = None,
    ) -> None:
        """Format and print a lint result.

        Args:
        ----
            result: The validation result to format.
            source_path: IR file or source directory (for display).

        """
        infos = result.infos if self.show_infos else []
        if result.is_valid and not result.warnings and not infos:
            self._print_success("Validation passed")
            return

        error_count = len(result.errors)
        warning_count = len(result.warnings)

        summary = self._build_summary(error_count, warning_count, len(infos), source_path)
        self.console.print(summary)
        self.console.print()

        for issue in result.errors:
            self._print_issue(issue)

        for issue in result.warnings:
            self._print_issue(issue)

        for issue in infos:
            self._print_issue(issue)

        self.console.print()
        if error_count > 0:
            self.console.print(f"[red bold]✗ {error_count} error(s)[/red bold]", end="")
        if warning_count > 0:
            if error_count > 0:
                self.console.print(", ", end="")
            self.console.print(f"[yellow]{warning_count} warning(s)[/yellow]", end="")
        self.console.print()

    def _build_summary(
        self,
        errors: int,
        warnings: int,
        infos: int,
        source_path: Path | None,
    ) -> Panel:
        """Build summary panel."""
        if errors > 0:
            title, style = "Validation Failed", "red"
        elif warnings > 0:
            title, style = "Validation Warnings", "yellow"
        else:
            title, style = "Validation Notes", "blue"

        content = Text()
        if source_path:
            content.append(f"Input: {source_path}\n", style="dim")

        counts = []
        if errors > 0:
            counts.append((f"Errors: {errors}", "red bold"))
        if warnings > 0:
            counts.append((f"Warnings: {warnings}", "yellow"))
        if infos > 0:
            counts.append((f"Notes: {infos}", "blue"))
        for i, (text, text_style) in enumerate(counts):
            if i:
                content.append("  ")
            content.append(text, style=text_style)

        return Panel(content, title=title, border_style=style)

    def _print_issue(self, issue: ValidationIssue) -> None:
        """Print a single issue."""
        color = SEVERITY_COLORS[issue.severity]
        severity = issue.severity.value.upper()
        self.console.print(
            f"[{color} bold]{severity}[/{color} bold] "
            f"[{color}]\\[{issue.code}][/{color}] "
            f"{issue.message}"
        )

        if issue.location:
            self.console.print(f"  [dim]at {issue.location}[/dim]")

        if issue.suggestion:
            self.console.print(f"  [green]💡 {issue.suggestion}[/green]")

        self.console.print()

    def _print_success(self, message: str) -> None:
        """Print success message."""
        self.console.print(f"[green]✓ {message}[/green]")


class ErrorTree:
    """Display issues as a tree grouped by IR section."""

    def __init__(self, console: Console | None = None) -> None:
        """Initialize error tree formatter."""
        self.console = console or Console(stderr=True)

    def print_result(self, result: ValidationResult) -> None:
        """Print validation result as tree."""
        tree = Tree("[bold]Validation Issues[/bold]")

        by_section: dict[str, list[ValidationIssue]] = {}
        for issue in result.issues:
            section = issue.location.section if issue.location else "general"
            by_section.setdefault(section, []).append(issue)

        for section, issues in sorted(by_section.items()):
            section_node = tree.add(f"[cyan]{section}[/cyan] ({len(issues)} issues)")

            for issue in issues:
                color = SEVERITY_COLORS[issue.severity]
                section_node.add(f"[{color}]{issue.code}[/{color}] {issue.message}")

        self.console.print(tree)


class ErrorTable:
    """Display issues as a table."""

    def __init__(self, console: Console | None = None) -> None:
        """Initialize error table formatter."""
        self.console = console or Console(stderr=True)

    def print_result(self, result: ValidationResult) -> None:
        """Print validation result as table."""
        table = Table(title="Validation Issues")

        table.add_column("Code", style="cyan", width=6)
        table.add_column("Severity", width=8)
        table.add_column("Location", style="dim")
        table.add_column("Message")

        for issue in result.issues:
            color = SEVERITY_COLORS[issue.severity]
            severity = f"[{color}]{issue.severity.value.upper()}[/{color}]"
            location = str(issue.location) if issue.location else "-"
            table.add_row(issue.code, severity, location, issue.message)

        self.console.print(table)
