"""Markdown rendering for the endpoint table and the model reference."""

from __future__ import annotations

from collections.abc import Sequence

from ir_to_openapi.views.tables import EndpointRow, ModelSection

EMPTY_CELL = "-"


def cell(value: str) -> str:
    """Make a value safe for a table cell; empty values become ``-``."""
    value = " ".join(value.split())
    if not value:
        return EMPTY_CELL
    return value.replace("|", "\\|")


def render_endpoint_table(rows: Sequence[EndpointRow]) -> str:
    """Render endpoint rows as a Markdown table."""
    lines = [
        "| Group | Method | Path | Params | Description |",
        "|-------|--------|------|--------|-------------|",
    ]
    for row in rows:
        path = f"`{row.path}`" if row.path else EMPTY_CELL
        lines.append(
            f"| {cell(row.group)} | {cell(row.method)} | {path} "
            f"| {cell(row.param_summary)} | {cell(row.description)} |"
        )
    return "\n".join(lines) + "\n"


def _render_section(section: ModelSection) -> list[str]:
    heading = f"### {cell(section.name)}"
    if section.deprecated:
        heading += " _(deprecated)_"
    lines = [heading, "", f"_Description_: {cell(section.description)}", ""]

    if section.extends:
        lines.extend([f"_Extends_: {', '.join(section.extends)}", ""])
    if section.implements:
        lines.extend([f"_Implements_: {', '.join(section.implements)}", ""])

    if section.is_enum:
        lines.append("| Value |")
        lines.append("|-------|")
        if not section.enum_values:
            lines.append(f"| {EMPTY_CELL} |")
        for value in section.enum_values:
            lines.append(f"| {cell(value)} |")
    else:
        lines.append("| Field | Type | Required | Description |")
        lines.append("|-------|------|----------|-------------|")
        if not section.fields:
            lines.append("| - | - | - | - |")
        for row in section.fields:
            required = "yes" if row.required else "no"
            type_text = f"`{row.type}`" if row.type else EMPTY_CELL
            description = row.description
            if row.deprecated:
                description = f"(deprecated) {description}".strip()
            lines.append(
                f"| {cell(row.name)} | {type_text} | {required} | {cell(description)} |"
            )

    lines.append("")
    return lines


def render_model_reference(sections: Sequence[ModelSection]) -> str:
    """Render one heading and table per model."""
    lines: list[str] = []
    for section in sections:
        lines.extend(_render_section(section))
    return "\n".join(lines)
