"""Validators for semantic consistency of the IR."""

from __future__ import annotations

import re
from collections import Counter
from typing import TYPE_CHECKING

from ir_to_openapi.config import CompilerConfig
from ir_to_openapi.models.endpoints import ParameterLocation
from ir_to_openapi.validation.base import BaseValidator
from ir_to_openapi.validation.errors import ErrorCodes, ValidationResult
from ir_to_openapi.validation.reference_validators import endpoint_path

if TYPE_CHECKING:
    from ir_to_openapi.models.root import IntermediateRepresentation

_TEMPLATE_PARAM = re.compile(r"\{([^{}/]+)\}")


class DuplicateModelValidator(BaseValidator):
    """Warns when several models share a name (the last one wins)."""

    def validate(
        self,
        ir: IntermediateRepresentation,
        result: ValidationResult,
    ) -> None:
        """Check for duplicate model names."""
        counts = Counter(model.name for model in ir.models)
        for name in sorted(counts):
            if counts[name] > 1:
                result.add_warning(
                    code=ErrorCodes.W003_DUPLICATE_MODEL,
                    message=f"Model '{name}' is defined {counts[name]} times",
                    path=f"models.{name}",
                    suggestion="Only the last definition is kept",
                )


class DuplicateOperationValidator(BaseValidator):
    """Warns when several endpoints share a path and method."""

    def validate(
        self,
        ir: IntermediateRepresentation,
        result: ValidationResult,
    ) -> None:
        """Check for duplicate (path, method) pairs."""
        counts = Counter((ep.path, ep.method.lower()) for ep in ir.endpoints)
        for path, method in sorted(counts):
            if counts[(path, method)] > 1:
                result.add_warning(
                    code=ErrorCodes.W004_DUPLICATE_OPERATION,
                    message=(
                        f"Operation {method.upper()} {path} is declared "
                        f"{counts[(path, method)]} times"
                    ),
                    path=f"endpoints.{method.upper()} {path}",
                    suggestion="Only the last declaration is kept",
                )


class RequestBodyValidator(BaseValidator):
    """Warns about request bodies on read-only methods (they are dropped)."""

    def __init__(self, config: CompilerConfig | None = None) -> None:
        """Initialize with the configured read-only methods."""
        self.config = config or CompilerConfig()

    def validate(
        self,
        ir: IntermediateRepresentation,
        result: ValidationResult,
    ) -> None:
        """Check request bodies against the endpoint method."""
        for endpoint in ir.endpoints:
            if endpoint.request_body_type is None:
                continue
            if endpoint.method.upper() in self.config.read_only_methods:
                result.add_warning(
                    code=ErrorCodes.W005_BODY_ON_READ_ONLY_METHOD,
                    message=(
                        f"{endpoint.method.upper()} {endpoint.path} declares a request body "
                        f"'{endpoint.request_body_type.display()}'"
                    ),
                    path=f"{endpoint_path(endpoint)}.requestBodyType",
                    suggestion="The request body is omitted from the document",
                )


class PathParameterValidator(BaseValidator):
    """Errors when a ``{name}`` path template has no matching path parameter."""

    def validate(
        self,
        ir: IntermediateRepresentation,
        result: ValidationResult,
    ) -> None:
        """Check path templates against declared path parameters."""
        for endpoint in ir.endpoints:
            declared = {
                p.name for p in endpoint.parameters if p.location == ParameterLocation.PATH
            }
            for name in _TEMPLATE_PARAM.findall(endpoint.path):
                if name not in declared:
                    result.add_error(
                        code=ErrorCodes.E001_UNDECLARED_PATH_PARAMETER,
                        message=f"Path parameter '{name}' is not declared",
                        path=f"{endpoint_path(endpoint)}.parameters",
                        suggestion=f"Add a parameter named '{name}' with in: path",
                        parameter=name,
                    )


class ValidationKeyValidator(BaseValidator):
    """Reports validation rule keys the compiler drops."""

    def __init__(self, config: CompilerConfig | None = None) -> None:
        """Initialize with the configured allow-list."""
        self.config = config or CompilerConfig()

    def validate(
        self,
        ir: IntermediateRepresentation,
        result: ValidationResult,
    ) -> None:
        """Check field validation rules against the allow-list."""
        for model in ir.models:
            for field in model.fields:
                for key in sorted(field.validation_rules):
                    if key in self.config.validation_keys:
                        continue
                    result.add_info(
                        code=ErrorCodes.I002_UNSUPPORTED_VALIDATION_KEY,
                        message=f"Validation rule '{key}' is not carried into the schema",
                        path=f"models.{model.name}.fields.{field.name}.validationRules",
                        rule=key,
                    )
