"""Validators for type references."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ir_to_openapi.config import CompilerConfig
from ir_to_openapi.validation.base import BaseValidator
from ir_to_openapi.validation.errors import ErrorCodes, ValidationResult

if TYPE_CHECKING:
    from ir_to_openapi.models.endpoints import EndpointDefinition
    from ir_to_openapi.models.root import IntermediateRepresentation
    from ir_to_openapi.models.type_refs import TypeRef


def endpoint_path(endpoint: EndpointDefinition) -> str:
    """Location prefix for an endpoint, e.g. ``endpoints.GET /users``."""
    return f"endpoints.{endpoint.method.upper()} {endpoint.path}"


class TypeReferenceValidator(BaseValidator):
    """Reports type references the compiler will replace with a default.

    The compiler never fails on these; the validator makes the fallbacks
    visible.
    """

    def __init__(self, config: CompilerConfig | None = None) -> None:
        """Initialize with the vocabulary used by the compiler."""
        self.config = config or CompilerConfig()
        self.vocabulary = self.config.type_vocabulary

    def validate(
        self,
        ir: IntermediateRepresentation,
        result: ValidationResult,
    ) -> None:
        """Validate type references in models and endpoints."""
        known = ir.model_names

        for model in ir.models:
            if model.is_enumeration:
                continue
            for field in model.fields:
                path = f"models.{model.name}.fields.{field.name}"
                if field.is_untyped:
                    result.add_warning(
                        code=ErrorCodes.W001_UNKNOWN_TYPE,
                        message=f"Field '{field.name}' of model '{model.name}' has no type",
                        path=path,
                        suggestion="The field is rendered as a string",
                    )
                    continue
                self._check_ref(field.type_ref, known, path, result)

        for endpoint in ir.endpoints:
            prefix = endpoint_path(endpoint)
            for param in endpoint.parameters:
                self._check_parameter(
                    param.type_ref, known, f"{prefix}.parameters.{param.name}", result
                )
            if endpoint.request_body_type is not None and endpoint.request_body_type.base:
                self._check_ref(
                    endpoint.request_body_type, known, f"{prefix}.requestBodyType", result
                )
            response = endpoint.response_type
            if response.base and response.base not in self.config.void_types:
                self._check_ref(response, known, f"{prefix}.responseType", result)

    def _check_parameter(
        self,
        ref: TypeRef,
        known: frozenset[str],
        path: str,
        result: ValidationResult,
    ) -> None:
        if self.vocabulary.is_container(ref.base):
            result.add_warning(
                code=ErrorCodes.W001_UNKNOWN_TYPE,
                message=f"Collection type '{ref.display()}' is not supported for parameters",
                path=path,
                suggestion="The parameter is rendered as a string",
            )
            return
        if self._is_resolvable(ref.base, known):
            return
        result.add_warning(
            code=ErrorCodes.W001_UNKNOWN_TYPE,
            message=f"Unknown parameter type '{ref.base}'",
            path=path,
            suggestion="The parameter is rendered as a string",
            referenced_type=ref.base,
        )

    def _check_ref(
        self,
        ref: TypeRef,
        known: frozenset[str],
        path: str,
        result: ValidationResult,
    ) -> None:
        base = ref.base
        if len(ref.args) > 1:
            result.add_info(
                code=ErrorCodes.I001_EXTRA_TYPE_ARGUMENTS,
                message=(
                    f"Type '{ref.display()}' has {len(ref.args)} type arguments; "
                    "only the first is used"
                ),
                path=path,
            )

        if self.vocabulary.is_container(base):
            if not ref.args:
                result.add_warning(
                    code=ErrorCodes.W002_CONTAINER_WITHOUT_ARGUMENT,
                    message=f"Container '{base}' has no type argument",
                    path=path,
                    suggestion="The value is rendered as a string",
                )
        elif not self._is_resolvable(base, known):
            result.add_warning(
                code=ErrorCodes.W001_UNKNOWN_TYPE,
                message=f"Unknown type '{base or '<empty>'}'",
                path=path,
                suggestion=f"Add a model named '{base}' or map it as a primitive",
                referenced_type=base,
            )

        # Arguments past the first are never resolved
        if ref.args:
            self._check_ref(ref.args[0], known, path, result)

    def _is_resolvable(self, base: str, known: frozenset[str]) -> bool:
        return self.vocabulary.primitive(base) is not None or base in known
