"""Resolved type variants.

A ``TypeRef`` from the IR is classified exactly once into one of four
shapes. Every schema-producing code path dispatches on this closed set
instead of re-inspecting base names.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class TypeKind(Enum):
    """Discriminator for resolved types."""

    PRIMITIVE = "primitive"
    CONTAINER = "container"
    MODEL_REFERENCE = "model_reference"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class PrimitiveType:
    """A canonical schema primitive.

    Attributes
    ----------
        type: Schema type (integer, number, boolean, string).
        format: Optional format annotation (e.g. date-time).

    """

    type: str
    format: str | None = None

    kind = TypeKind.PRIMITIVE


@dataclass(frozen=True)
class ContainerType:
    """A single-argument collection, rendered as an array."""

    item: ResolvedType

    kind = TypeKind.CONTAINER


@dataclass(frozen=True)
class ModelReference:
    """A reference to a known model's schema slot."""

    name: str

    kind = TypeKind.MODEL_REFERENCE


@dataclass(frozen=True)
class UnknownType:
    """A type the resolver could not place.

    Attributes
    ----------
        base: The base name as written in the IR (may be empty).
        reason: Short note on why resolution fell back.

    """

    base: str
    reason: str = "unrecognized"

    kind = TypeKind.UNKNOWN


ResolvedType = Union[PrimitiveType, ContainerType, ModelReference, UnknownType]
