"""Main validator combining all IR lint rules."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ir_to_openapi.config import CompilerConfig
from ir_to_openapi.validation.base import CompositeValidator
from ir_to_openapi.validation.consistency_validators import (
    DuplicateModelValidator,
    DuplicateOperationValidator,
    PathParameterValidator,
    RequestBodyValidator,
    ValidationKeyValidator,
)
from ir_to_openapi.validation.errors import ValidationResult
from ir_to_openapi.validation.reference_validators import TypeReferenceValidator

if TYPE_CHECKING:
    from ir_to_openapi.models.root import IntermediateRepresentation


class IRValidator:
    """Lint an IR before compilation.

    The compiler itself accepts any decodable IR; this validator reports the
    places where it will fall back to a default or drop data.
    """

    def __init__(self, config: CompilerConfig | None = None, strict: bool = False) -> None:
        """Initialize validator.

        Args:
        ----
            config: Compiler configuration the checks are evaluated against.
            strict: If True, treat warnings as errors.

        """
        self.config = config or CompilerConfig()
        self.strict = strict
        self._validator = CompositeValidator(
            [
                # Reference validators
                TypeReferenceValidator(self.config),
                # Consistency validators
                DuplicateModelValidator(),
                DuplicateOperationValidator(),
                RequestBodyValidator(self.config),
                PathParameterValidator(),
                ValidationKeyValidator(self.config),
            ]
        )

    def validate(self, ir: IntermediateRepresentation) -> ValidationResult:
        """Validate an intermediate representation.

        Args:
        ----
            ir: The IR to validate.

        Returns:
        -------
            ValidationResult with all issues found.

        """
        result = ValidationResult()
        self._validator.validate(ir, result)
        return result

    def validate_and_raise(self, ir: IntermediateRepresentation) -> ValidationResult:
        """Validate and raise if the IR fails the lint.

        Raises
        ------
            IRValidationError: On errors, or on warnings in strict mode.

        """
        result = self.validate(ir)

        if not result.is_valid:
            raise IRValidationError(result)

        if self.strict and result.warnings:
            raise IRValidationError(result)

        return result


class IRValidationError(Exception):
    """Raised when IR validation fails."""

    def __init__(self, result: ValidationResult) -> None:
        """Initialize with validation result."""
        self.result = result
        error_count = len(result.errors)
        warning_count = len(result.warnings)

        parts = []
        if error_count:
            parts.append(f"{error_count} error(s)")
        if warning_count:
            parts.append(f"{warning_count} warning(s)")

        message = f"Validation failed: {', '.join(parts)}"
        super().__init__(message)
