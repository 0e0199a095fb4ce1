"""Resolve IR type references to schema fragments."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from ir_to_openapi.config import CompilerConfig
from ir_to_openapi.models.type_refs import TypeRef
from ir_to_openapi.resolved.types import (
    ContainerType,
    ModelReference,
    PrimitiveType,
    ResolvedType,
    UnknownType,
)

logger = logging.getLogger(__name__)

SchemaFragment = dict[str, Any]

# Fragment used wherever a type cannot be placed; never a dangling $ref
UNKNOWN_SCHEMA: SchemaFragment = {"type": "string"}


def to_schema(resolved: ResolvedType, ref_prefix: str = "#/components/schemas/") -> SchemaFragment:
    """Render a resolved type as a schema fragment.

    Args:
    ----
        resolved: The classified type.
        ref_prefix: Prefix for named references.

    Returns:
    -------
        A fresh schema fragment (safe for the caller to mutate).

    """
    if isinstance(resolved, ContainerType):
        return {"type": "array", "items": to_schema(resolved.item, ref_prefix)}
    if isinstance(resolved, PrimitiveType):
        fragment: SchemaFragment = {"type": resolved.type}
        if resolved.format:
            fragment["format"] = resolved.format
        return fragment
    if isinstance(resolved, ModelReference):
        return {"$ref": f"{ref_prefix}{resolved.name}"}
    return dict(UNKNOWN_SCHEMA)


class TypeResolver:
    """Classify type references and render them as schema fragments.

    Resolution order:
        1. Container with at least one argument -> array of the first argument
        2. Primitive or wrapper name -> canonical primitive
        3. Known model name -> named reference
        4. Anything else -> string default

    Only the first type argument of a container is used; further arguments
    are ignored.

    Usage:
        resolver = TypeResolver({"User"})
        resolver.resolve(TypeRef.of("List", "User"))
        # {"type": "array", "items": {"$ref": "#/components/schemas/User"}}
    """

    def __init__(
        self,
        known_models: Iterable[str] = (),
        config: CompilerConfig | None = None,
    ) -> None:
        """Initialize the resolver.

        Args:
        ----
            known_models: Names of the models that may be referenced.
            config: Compiler configuration (vocabulary and ref prefix).

        """
        self.config = config or CompilerConfig()
        self.known_models = frozenset(known_models)
        self._vocabulary = self.config.type_vocabulary

    def classify(self, ref: TypeRef) -> ResolvedType:
        """Classify a type reference, recursing through containers."""
        base = ref.base

        if self._vocabulary.is_container(base):
            if not ref.args:
                logger.debug("Container %r has no type argument; using default schema", base)
                return UnknownType(base=base, reason="container without type argument")
            if len(ref.args) > 1:
                logger.debug(
                    "Container %s has %d type arguments; only the first is used",
                    ref.display(),
                    len(ref.args),
                )
            return ContainerType(item=self.classify(ref.args[0]))

        return self.classify_scalar(ref)

    def classify_scalar(self, ref: TypeRef) -> ResolvedType:
        """Classify a reference without container support (parameters)."""
        base = ref.base

        primitive = self._vocabulary.primitive(base)
        if primitive is not None:
            return PrimitiveType(type=primitive.type, format=primitive.format)

        if base in self.known_models:
            return ModelReference(name=base)

        if base:
            logger.debug("Unknown type %r; using default schema", base)
        return UnknownType(base=base)

    def resolve(self, ref: TypeRef) -> SchemaFragment:
        """Resolve a type reference to a schema fragment."""
        return to_schema(self.classify(ref), self.config.schema_ref_prefix)

    def resolve_scalar(self, ref: TypeRef) -> SchemaFragment:
        """Resolve a parameter type reference to a schema fragment."""
        return to_schema(self.classify_scalar(ref), self.config.schema_ref_prefix)

    def reference(self, name: str) -> SchemaFragment:
        """Return a named reference fragment for a model."""
        return {"$ref": f"{self.config.schema_ref_prefix}{name}"}

    def is_model(self, name: str) -> bool:
        """Return True if ``name`` is a known model."""
        return name in self.known_models


def resolve(
    ref: TypeRef,
    known_model_names: Iterable[str],
    config: CompilerConfig | None = None,
) -> SchemaFragment:
    """Resolve a single type reference against a set of model names.

    Convenience wrapper around :class:`TypeResolver`.
    """
    return TypeResolver(known_model_names, config).resolve(ref)
