"""Pydantic models for the API intermediate representation (IR).

The upstream source parser emits the IR as JSON. These models decode it into
immutable, type-safe objects:

- Tolerating ``null`` collections and unknown keys from the parser
- Exposing snake_case attributes over the parser's camelCase wire names
- Carrying caller-supplied API metadata (``info`` and ``servers``)

Primary Entry Points:
    load_ir_file(path): Load and decode an IR file
    parse_ir_text(text): Decode IR from JSON text
    IntermediateRepresentation: Root model for the entire IR

Example:
-------
    >>> from ir_to_openapi.models import load_ir_file
    >>> ir = load_ir_file("ir.json")
    >>> print(f"Models: {len(ir.models)}, endpoints: {len(ir.endpoints)}")

Model Hierarchy:
    IntermediateRepresentation (root)
    ├── ModelDefinition - data models
    │   └── FieldDefinition - fields, each with a TypeRef
    └── EndpointDefinition - endpoints
        ├── ParameterDefinition - parameters, each with a TypeRef
        └── DependencyDefinition - controller collaborators
"""

from ir_to_openapi.models.endpoints import (
    DependencyDefinition,
    EndpointDefinition,
    ParameterDefinition,
    ParameterLocation,
)
from ir_to_openapi.models.loader import (
    LoaderError,
    decode_ir,
    load_ir_file,
    load_mapping_file,
    parse_ir_text,
)
from ir_to_openapi.models.meta import (
    DEFAULT_INFO,
    DEFAULT_SERVERS,
    ApiInfo,
    Server,
    parse_info,
    parse_servers,
)
from ir_to_openapi.models.root import IntermediateRepresentation
from ir_to_openapi.models.schemas import FieldDefinition, ModelDefinition
from ir_to_openapi.models.type_refs import TypeRef

__all__ = [
    # Root
    "IntermediateRepresentation",
    # Types
    "TypeRef",
    # Models
    "FieldDefinition",
    "ModelDefinition",
    # Endpoints
    "DependencyDefinition",
    "EndpointDefinition",
    "ParameterDefinition",
    "ParameterLocation",
    # Metadata
    "ApiInfo",
    "DEFAULT_INFO",
    "DEFAULT_SERVERS",
    "Server",
    "parse_info",
    "parse_servers",
    # Loader
    "LoaderError",
    "decode_ir",
    "load_ir_file",
    "load_mapping_file",
    "parse_ir_text",
]
