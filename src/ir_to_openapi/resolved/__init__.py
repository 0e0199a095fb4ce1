"""Resolved type variants produced by the type resolver."""

from ir_to_openapi.resolved.types import (
    ContainerType,
    ModelReference,
    PrimitiveType,
    ResolvedType,
    TypeKind,
    UnknownType,
)

__all__ = [
    "ContainerType",
    "ModelReference",
    "PrimitiveType",
    "ResolvedType",
    "TypeKind",
    "UnknownType",
]
