"""Validation issue types."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ValidationSeverity(Enum):
    """Severity level for validation issues."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


@dataclass(frozen=True)
class ValidationLocation:
    """Location in the IR where an issue was found."""

    path: str
    """Dotted path to the issue (e.g., 'models.User.fields.roles')."""

    def __str__(self) -> str:
        """Format location as string."""
        return self.path

    @property
    def section(self) -> str:
        """Top-level section of the path (``models`` or ``endpoints``)."""
        return self.path.split(".", 1)[0]


@dataclass(frozen=True)
class ValidationIssue:
    """A single validation issue."""

    code: str
    """Unique issue code (e.g., 'E001', 'W001')."""

    message: str
    """Human-readable message."""

    severity: ValidationSeverity
    """Severity level."""

    location: ValidationLocation | None = None
    """Location in the IR."""

    suggestion: str | None = None
    """Suggested fix."""

    context: dict[str, Any] = field(default_factory=dict)
    """Additional context for debugging."""

    def __str__(self) -> str:
        """Format issue as string."""
        parts = [f"[{self.code}]", self.severity.value.upper(), self.message]
        if self.location:
            parts.append(f"at {self.location}")
        if self.suggestion:
            parts.append(f"(hint: {self.suggestion})")
        return " ".join(parts)


@dataclass
class ValidationResult:
    """Result of validation containing all issues."""

    issues: list[ValidationIssue] = field(default_factory=list)

    @property
    def errors(self) -> list[ValidationIssue]:
        """Get only error-level issues."""
        return [i for i in self.issues if i.severity == ValidationSeverity.ERROR]

    @property
    def warnings(self) -> list[ValidationIssue]:
        """Get only warning-level issues."""
        return [i for i in self.issues if i.severity == ValidationSeverity.WARNING]

    @property
    def infos(self) -> list[ValidationIssue]:
        """Get only info-level issues."""
        return [i for i in self.issues if i.severity == ValidationSeverity.INFO]

    @property
    def is_valid(self) -> bool:
        """Check if there are no errors (warnings are OK)."""
        return len(self.errors) == 0

    def add(self, issue: ValidationIssue) -> None:
        """Add an issue to the result."""
        self.issues.append(issue)

    def _add(
        self,
        severity: ValidationSeverity,
        code: str,
        message: str,
        path: str,
        suggestion: str | None,
        context: dict[str, Any],
    ) -> None:
        self.add(
            ValidationIssue(
                code=code,
                message=message,
                severity=severity,
                location=ValidationLocation(path=path),
                suggestion=suggestion,
                context=context,
            )
        )

    def add_error(
        self,
        code: str,
        message: str,
        path: str,
        suggestion: str | None = None,
        **context: Any,
    ) -> None:
        """Add an error issue."""
        self._add(ValidationSeverity.ERROR, code, message, path, suggestion, context)

    def add_warning(
        self,
        code: str,
        message: str,
        path: str,
        suggestion: str | None = None,
        **context: Any,
    ) -> None:
        """Add a warning issue."""
        self._add(ValidationSeverity.WARNING, code, message, path, suggestion, context)

    def add_info(
        self,
        code: str,
        message: str,
        path: str,
        suggestion: str | None = None,
        **context: Any,
    ) -> None:
        """Add an informational issue."""
        self._add(ValidationSeverity.INFO, code, message, path, suggestion, context)

    def merge(self, other: ValidationResult) -> None:
        """Merge another result into this one."""
        self.issues.extend(other.issues)


class ErrorCodes:
    """Standard validation issue codes."""

    # E0xx - Structural errors
    E001_UNDECLARED_PATH_PARAMETER = "E001"

    # W0xx - Warnings (the compiler falls back to a default)
    W001_UNKNOWN_TYPE = "W001"
    W002_CONTAINER_WITHOUT_ARGUMENT = "W002"
    W003_DUPLICATE_MODEL = "W003"
    W004_DUPLICATE_OPERATION = "W004"
    W005_BODY_ON_READ_ONLY_METHOD = "W005"

    # I0xx - Informational (data the compiler drops on purpose)
    I001_EXTRA_TYPE_ARGUMENTS = "I001"
    I002_UNSUPPORTED_VALIDATION_KEY = "I002"
