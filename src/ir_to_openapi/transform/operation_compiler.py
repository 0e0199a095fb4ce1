"""Compile IR endpoints into path operations."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from ir_to_openapi.config import CompilerConfig
from ir_to_openapi.models.endpoints import EndpointDefinition, ParameterDefinition
from ir_to_openapi.models.type_refs import TypeRef
from ir_to_openapi.transform.type_resolver import SchemaFragment, TypeResolver

logger = logging.getLogger(__name__)

Operation = dict[str, Any]


class OperationCompiler:
    """Produce one operation per (path, method) pair.

    Response types follow three shapes:
        - direct container (``List<User>``) -> inline array schema
        - generic wrapper (``ApiResponse<User>``) -> ``allOf`` of the wrapper
          reference and an override of its payload property
        - anything else -> the resolved schema

    Usage:
        compiler = OperationCompiler(TypeResolver({"User"}))
        paths = compiler.compile(ir.endpoints)
    """

    def __init__(self, resolver: TypeResolver, config: CompilerConfig | None = None) -> None:
        """Initialize the compiler.

        Args:
        ----
            resolver: Resolver aware of all model names.
            config: Compiler configuration.

        """
        self.resolver = resolver
        self.config = config or resolver.config

    def compile(self, endpoints: Sequence[EndpointDefinition]) -> dict[str, dict[str, Operation]]:
        """Compile all endpoints.

        Endpoints sharing a path merge into one path entry. A repeated
        (path, method) pair keeps the last endpoint. Paths and methods are
        returned in lexicographic order.

        Args:
        ----
            endpoints: Endpoints in source order.

        Returns:
        -------
            Mapping of path to mapping of lower-case method to operation.

        """
        paths: dict[str, dict[str, Operation]] = {}
        for endpoint in endpoints:
            method = endpoint.method.lower()
            item = paths.setdefault(endpoint.path, {})
            if method in item:
                logger.debug("Duplicate operation %s %s; keeping the last", method, endpoint.path)
            item[method] = self.operation(endpoint)

        return {
            path: {method: paths[path][method] for method in sorted(paths[path])}
            for path in sorted(paths)
        }

    def operation(self, endpoint: EndpointDefinition) -> Operation:
        """Compile a single endpoint into an operation."""
        op: Operation = {}
        if endpoint.summary:
            op["summary"] = endpoint.summary
        if endpoint.description:
            op["description"] = endpoint.description
        if endpoint.tags:
            op["tags"] = list(endpoint.tags)
        if endpoint.deprecated:
            op["deprecated"] = True

        if endpoint.parameters:
            op["parameters"] = [self.parameter(p) for p in endpoint.parameters]

        if (
            endpoint.request_body_type is not None
            and endpoint.method.upper() not in self.config.read_only_methods
        ):
            op["requestBody"] = self.request_body(endpoint.request_body_type)

        op["responses"] = self.responses(endpoint.response_type)
        return op

    def parameter(self, param: ParameterDefinition) -> dict[str, Any]:
        """Compile a parameter; only scalar and model types are recognized."""
        compiled: dict[str, Any] = {
            "name": param.name,
            "in": param.location.value,
            "required": param.required,
            "schema": self.resolver.resolve_scalar(param.type_ref),
        }
        if param.description:
            compiled["description"] = param.description
        return compiled

    def request_body(self, ref: TypeRef) -> dict[str, Any]:
        """Build a required request body referencing the request type.

        Request types that are not known models fall back to the resolved
        schema so that no reference dangles.
        """
        if self.resolver.is_model(ref.base):
            schema = self.resolver.reference(ref.base)
        else:
            schema = self.resolver.resolve(ref)
        return {
            "required": True,
            "content": {self.config.media_type: {"schema": schema}},
        }

    def response_schema(self, ref: TypeRef) -> SchemaFragment | None:
        """Return the success response schema, or None for void responses."""
        base = ref.base
        if not base or base in self.config.void_types:
            return None

        if self.config.type_vocabulary.is_container(base):
            return self.resolver.resolve(ref)

        if ref.args:
            if len(ref.args) > 1:
                logger.debug("Wrapper %s: only the first type argument is used", ref.display())
            if self.resolver.is_model(base):
                wrapper = self.resolver.reference(base)
            else:
                wrapper = {"type": "object"}
            payload = self.resolver.resolve(ref.args[0])
            return {
                "allOf": [
                    wrapper,
                    {"properties": {self.config.envelope_payload_property: payload}},
                ]
            }

        return self.resolver.resolve(ref)

    def responses(self, ref: TypeRef) -> dict[str, Any]:
        """Build the responses mapping with a single success entry."""
        success: dict[str, Any] = {"description": self.config.success_description}
        schema = self.response_schema(ref)
        if schema is not None:
            success["content"] = {self.config.media_type: {"schema": schema}}
        return {self.config.success_status: success}


def compile_operations(
    endpoints: Sequence[EndpointDefinition],
    resolver: TypeResolver,
) -> dict[str, dict[str, Operation]]:
    """Compile ``endpoints`` into the ``paths`` mapping."""
    return OperationCompiler(resolver).compile(endpoints)
