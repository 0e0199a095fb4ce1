"""Lint rules for intermediate representations."""

from ir_to_openapi.validation.errors import (
    ErrorCodes,
    ValidationIssue,
    ValidationLocation,
    ValidationResult,
    ValidationSeverity,
)
from ir_to_openapi.validation.validator import (
    IRValidationError,
    IRValidator,
)

__all__ = [
    "ErrorCodes",
    "IRValidationError",
    "IRValidator",
    "ValidationIssue",
    "ValidationLocation",
    "ValidationResult",
    "ValidationSeverity",
]
