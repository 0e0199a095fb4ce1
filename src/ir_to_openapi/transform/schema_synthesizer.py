"""Synthesize component schemas from IR models."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from ir_to_openapi.config import CompilerConfig
from ir_to_openapi.models.schemas import FieldDefinition, ModelDefinition
from ir_to_openapi.transform.type_resolver import SchemaFragment, TypeResolver

logger = logging.getLogger(__name__)


def _attach_deprecation(fragment: SchemaFragment, deprecated: bool, notes: str) -> None:
    if deprecated:
        fragment["deprecated"] = True
    if notes:
        fragment["x-deprecation-notes"] = notes


def enum_schema(model: ModelDefinition) -> SchemaFragment:
    """Build a string enumeration schema; values are the field names in order."""
    fragment: SchemaFragment = {
        "type": "string",
        "enum": [f.name for f in model.fields],
    }
    if model.description:
        fragment["description"] = model.description
    _attach_deprecation(fragment, model.deprecated, model.deprecation_notes)
    return fragment


class SchemaSynthesizer:
    """Produce one component schema per model.

    Models are classified as enumerations (explicit flag, or every field
    untyped) or objects. Object properties are resolved through the
    :class:`TypeResolver` and overlaid with field metadata.

    Usage:
        synthesizer = SchemaSynthesizer(TypeResolver({"User"}))
        schemas = synthesizer.synthesize(ir.models)
    """

    def __init__(self, resolver: TypeResolver, config: CompilerConfig | None = None) -> None:
        """Initialize the synthesizer.

        Args:
        ----
            resolver: Resolver aware of all model names.
            config: Compiler configuration (validation key allow-list).

        """
        self.resolver = resolver
        self.config = config or resolver.config

    def synthesize(self, models: Sequence[ModelDefinition]) -> dict[str, SchemaFragment]:
        """Synthesize schemas for all models.

        Duplicate model names keep the last definition. The returned mapping
        is ordered by model name.

        Args:
        ----
            models: Models in source order.

        Returns:
        -------
            Mapping of model name to schema fragment, sorted by name.

        """
        schemas: dict[str, SchemaFragment] = {}
        for model in models:
            if model.name in schemas:
                logger.debug("Duplicate model %r; keeping the last definition", model.name)
            schemas[model.name] = self.model_schema(model)

        return {name: schemas[name] for name in sorted(schemas)}

    def model_schema(self, model: ModelDefinition) -> SchemaFragment:
        """Build the schema for a single model."""
        if model.is_enumeration:
            return enum_schema(model)
        return self.object_schema(model)

    def object_schema(self, model: ModelDefinition) -> SchemaFragment:
        """Build an object schema with resolved properties."""
        fragment: SchemaFragment = {"type": "object"}
        if model.description:
            fragment["description"] = model.description

        fragment["properties"] = {f.name: self.property_schema(f) for f in model.fields}

        required = model.required_fields
        if required:
            fragment["required"] = required

        if model.example:
            fragment["example"] = model.example
        _attach_deprecation(fragment, model.deprecated, model.deprecation_notes)
        if model.extends:
            fragment["x-extends"] = sorted(set(model.extends))
        if model.implements:
            fragment["x-implements"] = sorted(set(model.implements))
        if model.is_interface:
            fragment["x-interface"] = True
        if model.since:
            fragment["x-since"] = model.since
        return fragment

    def property_schema(self, field: FieldDefinition) -> SchemaFragment:
        """Resolve a field type and overlay its metadata.

        Named references cannot carry sibling keywords in OpenAPI 3.0, so
        metadata on a reference is wrapped with ``allOf``.
        """
        fragment = self.resolver.resolve(field.type_ref)

        overlay: SchemaFragment = {}
        if field.description:
            overlay["description"] = field.description
        if field.example:
            overlay["example"] = field.example
        _attach_deprecation(overlay, field.deprecated, field.deprecation_notes)
        for key in sorted(field.validation_rules):
            if key in self.config.validation_keys:
                overlay[key] = field.validation_rules[key]

        if not overlay:
            return fragment
        if "$ref" in fragment:
            return {"allOf": [fragment], **overlay}
        fragment.update(overlay)
        return fragment


def synthesize(
    models: Sequence[ModelDefinition],
    config: CompilerConfig | None = None,
) -> dict[str, SchemaFragment]:
    """Synthesize component schemas for ``models``.

    Convenience wrapper building a resolver from the model names.
    """
    resolver = TypeResolver((m.name for m in models), config)
    return SchemaSynthesizer(resolver).synthesize(models)
