"""Encode the OpenAPI document tree as YAML or JSON."""

from __future__ import annotations

import json
from enum import Enum
from typing import Any

import yaml


class OutputFormat(str, Enum):
    """Supported document encodings."""

    YAML = "yaml"
    JSON = "json"


def dump_openapi(document: dict[str, Any], output_format: OutputFormat | str = "yaml") -> str:
    """Serialize the document.

    Key order is kept as built; the transformer already sorts every mapping
    derived from the IR.

    Args:
    ----
        document: Document tree from the transformer.
        output_format: ``yaml`` or ``json``.

    Returns:
    -------
        Encoded text ending with a newline.

    """
    fmt = OutputFormat(output_format)
    if fmt == OutputFormat.JSON:
        return json.dumps(document, indent=2, ensure_ascii=False) + "\n"

    text: str = yaml.safe_dump(
        document,
        sort_keys=False,
        allow_unicode=True,
        default_flow_style=False,
    )
    return text


def format_for_suffix(suffix: str) -> OutputFormat:
    """Pick the encoding from an output file suffix (YAML unless ``.json``)."""
    return OutputFormat.JSON if suffix.lower() == ".json" else OutputFormat.YAML
