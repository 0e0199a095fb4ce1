"""Invoke the upstream source parser."""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Sequence
from pathlib import Path

from ir_to_openapi.models.loader import LoaderError, parse_ir_text
from ir_to_openapi.models.root import IntermediateRepresentation

logger = logging.getLogger(__name__)


class ParserError(Exception):
    """The upstream parser failed or produced output that is not an IR."""

    def __init__(self, message: str, stderr: str = "") -> None:
        """Initialize ParserError.

        Args:
        ----
            message: What went wrong.
            stderr: Captured standard error of the parser process.

        """
        self.stderr = stderr
        super().__init__(message)


class ParserRunner:
    """Run an external parser that prints the IR as JSON on stdout.

    The source directory is appended to ``command``. The call blocks until
    the process exits; there is no retry and no partial result.

    Usage:
        runner = ParserRunner(["java", "-jar", "parser.jar"])
        ir = runner.run(Path("src/main/java"))
    """

    def __init__(self, command: Sequence[str]) -> None:
        """Initialize with the parser argv prefix."""
        if not command:
            raise ValueError("Parser command must not be empty")
        self.command = list(command)

    def run(self, source_dir: Path) -> IntermediateRepresentation:
        """Parse ``source_dir`` and decode the resulting IR.

        Raises
        ------
            ParserError: If the process cannot start, exits non-zero, or
                prints something that does not decode as an IR.

        """
        argv = [*self.command, str(source_dir)]
        logger.info("Running parser: %s", " ".join(argv))

        try:
            completed = subprocess.run(
                argv,
                capture_output=True,
                text=True,
                check=False,
            )
        except FileNotFoundError as e:
            raise ParserError(f"Parser executable not found: {self.command[0]}") from e
        except OSError as e:
            raise ParserError(f"Failed to start parser: {e}") from e

        if completed.returncode != 0:
            raise ParserError(
                f"Parser exited with status {completed.returncode}",
                stderr=completed.stderr or "",
            )

        try:
            return parse_ir_text(completed.stdout, source=source_dir)
        except LoaderError as e:
            raise ParserError(
                f"Parser output is not a valid IR: {e}",
                stderr=completed.stderr or "",
            ) from e
