"""IR file loading utilities."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from ir_to_openapi.models.root import IntermediateRepresentation

logger = logging.getLogger(__name__)

SUPPORTED_SUFFIXES = frozenset({".json", ".yaml", ".yml"})


class LoaderError(Exception):
    """Error during IR or configuration loading."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        """Initialize LoaderError.

        Args:
        ----
            message: Error message describing what went wrong.
            path: Optional path to the file that caused the error.

        """
        self.path = path
        super().__init__(f"{path}: {message}" if path else message)


def load_mapping_file(path: Path) -> dict[str, Any]:
    """Load a YAML or JSON file and return the raw dictionary.

    Args:
    ----
        path: Path to the YAML or JSON file.

    Returns:
    -------
        Parsed dictionary from the file.

    Raises:
    ------
        LoaderError: If the file cannot be loaded or parsed.

    """
    path = Path(path)
    if not path.exists():
        raise LoaderError(f"File not found: {path}", path)

    if not path.is_file():
        raise LoaderError(f"Not a file: {path}", path)

    suffix = path.suffix.lower()
    if suffix not in SUPPORTED_SUFFIXES:
        raise LoaderError(
            f"Unsupported file extension: {suffix}. Use .json, .yaml, or .yml",
            path,
        )

    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise LoaderError(f"Parsing error: {e}", path) from e
    except OSError as e:
        raise LoaderError(f"File read error: {e}", path) from e

    if data is None:
        raise LoaderError("File is empty", path)

    if not isinstance(data, dict):
        raise LoaderError(
            f"Expected dictionary at root level, got {type(data).__name__}",
            path,
        )

    return data


def _format_validation_error(error: ValidationError) -> str:
    lines = []
    for err in error.errors():
        loc = ".".join(str(x) for x in err["loc"])
        lines.append(f"{loc}: {err['msg']}")
    return "; ".join(lines)


def decode_ir(data: Any, path: Path | None = None) -> IntermediateRepresentation:
    """Decode an already-parsed mapping into the IR.

    Raises
    ------
        LoaderError: If the data does not have the IR shape.

    """
    if not isinstance(data, dict):
        raise LoaderError(
            f"Expected dictionary at root level, got {type(data).__name__}",
            path,
        )

    try:
        ir = IntermediateRepresentation.model_validate(data)
    except ValidationError as e:
        raise LoaderError(f"Malformed IR: {_format_validation_error(e)}", path) from e

    logger.debug("Decoded IR with %d models and %d endpoints", len(ir.models), len(ir.endpoints))
    return ir


def parse_ir_text(text: str, source: Path | None = None) -> IntermediateRepresentation:
    """Decode IR from JSON text (the upstream parser's stdout).

    Args:
    ----
        text: JSON document.
        source: Optional origin used in error messages.

    Raises:
    ------
        LoaderError: If the text is not valid JSON or not an IR.

    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise LoaderError(f"Invalid JSON: {e}", source) from e
    return decode_ir(data, source)


def load_ir_file(path: Path | str) -> IntermediateRepresentation:
    """Load and decode an IR file.

    Args:
    ----
        path: Path to a ``.json``, ``.yaml`` or ``.yml`` IR file.

    Returns:
    -------
        Decoded IntermediateRepresentation.

    Raises:
    ------
        LoaderError: If the file cannot be loaded or decoded.

    """
    path = Path(path)
    return decode_ir(load_mapping_file(path), path)
