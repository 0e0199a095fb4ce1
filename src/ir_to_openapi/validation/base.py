"""Base validator class."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from ir_to_openapi.validation.errors import ValidationResult

if TYPE_CHECKING:
    from ir_to_openapi.models.root import IntermediateRepresentation


class BaseValidator(ABC):
    """Base class for validators."""

    @abstractmethod
    def validate(
        self,
        ir: IntermediateRepresentation,
        result: ValidationResult,
    ) -> None:
        """Validate the IR and add issues to result.

        Args:
        ----
            ir: The intermediate representation to validate.
            result: The result object to add issues to.

        """
        ...


class CompositeValidator(BaseValidator):
    """Combines multiple validators."""

    def __init__(self, validators: list[BaseValidator] | None = None) -> None:
        """Initialize with optional list of validators."""
        self.validators = validators or []

    def add(self, validator: BaseValidator) -> None:
        """Add a validator."""
        self.validators.append(validator)

    def validate(
        self,
        ir: IntermediateRepresentation,
        result: ValidationResult,
    ) -> None:
        """Run all validators in order."""
        for validator in self.validators:
            validator.validate(ir, result)
