"""Compiler configuration.

All classification tables used by the compiler and the grouping engine live
here as plain data so they can be overridden from a YAML file and tested on
their own.

Example:
-------
    ```yaml
    core_service_threshold: 2
    default_group: Misc
    type_vocabulary:
      primitives:
        UUID: {type: string, format: uuid}
    service_buckets:
      - {name: client, patterns: [client, gateway]}
    ```

"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ir_to_openapi.models.loader import LoaderError, load_mapping_file


class PrimitiveMapping(BaseModel):
    """Canonical schema primitive for a source type name."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    type: Annotated[str, Field(description="Schema type: integer, number, boolean, string")]
    format: Annotated[str | None, Field(default=None, description="Optional format annotation")]


def _primitive(type_: str, format_: str | None = None) -> PrimitiveMapping:
    return PrimitiveMapping(type=type_, format=format_)


_INTEGER = ("int", "Integer", "long", "Long", "short", "Short", "byte", "Byte", "BigInteger")
_NUMBER = ("double", "Double", "float", "Float", "BigDecimal")
_BOOLEAN = ("boolean", "Boolean", "bool")
_STRING = ("String", "string", "char", "Character", "java.lang.String", "CharSequence")
_DATE_TIME = (
    "LocalDateTime",
    "LocalDate",
    "LocalTime",
    "Date",
    "Instant",
    "OffsetDateTime",
    "ZonedDateTime",
    "Timestamp",
)


def default_primitives() -> dict[str, PrimitiveMapping]:
    """Return the built-in primitive and wrapper vocabulary."""
    table: dict[str, PrimitiveMapping] = {}
    table.update({name: _primitive("integer") for name in _INTEGER})
    table.update({name: _primitive("number") for name in _NUMBER})
    table.update({name: _primitive("boolean") for name in _BOOLEAN})
    table.update({name: _primitive("string") for name in _STRING})
    table.update({name: _primitive("string", "date-time") for name in _DATE_TIME})
    return table


class TypeVocabulary(BaseModel):
    """Names the type resolver recognizes without consulting the model list."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    containers: Annotated[
        frozenset[str],
        Field(
            default=frozenset({"List", "Set", "Array"}),
            description="Single-argument collection types rendered as arrays",
        ),
    ]
    primitives: Annotated[
        dict[str, PrimitiveMapping],
        Field(default_factory=default_primitives),
    ]

    @field_validator("primitives", mode="after")
    @classmethod
    def _merge_with_defaults(
        cls, value: dict[str, PrimitiveMapping]
    ) -> dict[str, PrimitiveMapping]:
        # Overrides extend the built-in table instead of replacing it
        return {**default_primitives(), **value}

    def is_container(self, name: str) -> bool:
        """Return True if ``name`` is a collection type."""
        return name in self.containers

    def primitive(self, name: str) -> PrimitiveMapping | None:
        """Return the mapping for a primitive name, or None."""
        return self.primitives.get(name)


class ServiceBucket(BaseModel):
    """A named service category selected by case-insensitive substrings."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: Annotated[str, Field(min_length=1)]
    title: Annotated[str, Field(default="", description="Heading used in diagrams")]
    patterns: Annotated[tuple[str, ...], Field(min_length=1)]

    def matches(self, type_name: str) -> bool:
        """Return True if any pattern occurs in ``type_name`` (case-insensitive)."""
        lowered = type_name.lower()
        return any(pattern.lower() in lowered for pattern in self.patterns)


DEFAULT_SERVICE_BUCKETS: tuple[ServiceBucket, ...] = (
    ServiceBucket(name="repository", title="Repositories", patterns=("repository", "dao", "repo")),
    ServiceBucket(name="utility", title="Utilities", patterns=("util", "helper")),
)

DEFAULT_VALIDATION_KEYS: frozenset[str] = frozenset(
    {
        "minLength",
        "maxLength",
        "pattern",
        "minimum",
        "maximum",
        "exclusiveMinimum",
        "exclusiveMaximum",
        "format",
    }
)


class CompilerConfig(BaseModel):
    """Settings shared by the compiler, the grouping engine and the CLI."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    openapi_version: Annotated[str, Field(default="3.0.0")]
    schema_ref_prefix: Annotated[str, Field(default="#/components/schemas/")]
    media_type: Annotated[str, Field(default="application/json")]
    success_status: Annotated[str, Field(default="200")]
    success_description: Annotated[str, Field(default="Successful Response")]
    envelope_payload_property: Annotated[
        str,
        Field(default="data", description="Generic payload property of envelope types"),
    ]
    void_types: Annotated[frozenset[str], Field(default=frozenset({"void", "Void"}))]
    read_only_methods: Annotated[
        frozenset[str],
        Field(default=frozenset({"GET"}), description="Methods that never carry a body"),
    ]

    type_vocabulary: Annotated[TypeVocabulary, Field(default_factory=TypeVocabulary)]
    validation_keys: Annotated[
        frozenset[str],
        Field(
            default=DEFAULT_VALIDATION_KEYS,
            description="Validation rule keys copied into property schemas",
        ),
    ]

    default_group: Annotated[str, Field(default="Default", min_length=1)]
    service_buckets: Annotated[
        tuple[ServiceBucket, ...],
        Field(default=DEFAULT_SERVICE_BUCKETS, description="Checked in order"),
    ]
    fallback_bucket: Annotated[str, Field(default="service")]
    fallback_bucket_title: Annotated[str, Field(default="Services")]
    core_service_threshold: Annotated[int, Field(default=3, ge=1)]

    parser_command: Annotated[
        tuple[str, ...],
        Field(
            default=("autodoc-parser",),
            min_length=1,
            description="Upstream parser argv; the source directory is appended",
        ),
    ]

    @field_validator("read_only_methods", mode="after")
    @classmethod
    def _upper_case_methods(cls, value: frozenset[str]) -> frozenset[str]:
        # Endpoint methods are upper-cased before the lookup
        return frozenset(method.upper() for method in value)

    def categorize_service(self, type_name: str) -> str:
        """Return the bucket name for a collaborator type."""
        for bucket in self.service_buckets:
            if bucket.matches(type_name):
                return bucket.name
        return self.fallback_bucket

    def bucket_title(self, bucket_name: str) -> str:
        """Return the diagram heading for a bucket name."""
        for bucket in self.service_buckets:
            if bucket.name == bucket_name:
                return bucket.title or bucket.name.title()
        return self.fallback_bucket_title


def load_config(path: Path | None) -> CompilerConfig:
    """Load compiler configuration from a YAML/JSON file.

    Args:
    ----
        path: Path to the configuration file, or None for defaults.

    Returns:
    -------
        Validated CompilerConfig.

    Raises:
    ------
        LoaderError: If the file cannot be read or does not validate.

    """
    if path is None:
        return CompilerConfig()

    data = load_mapping_file(path)

    try:
        return CompilerConfig.model_validate(data)
    except ValidationError as e:
        raise LoaderError(f"Invalid configuration: {e}", path) from e
