"""Derived views consumed by the Markdown and Mermaid renderers."""

from ir_to_openapi.views.graph import (
    DependencyEdge,
    DependencyGraph,
    ServiceNode,
    build_dependency_graph,
)
from ir_to_openapi.views.tables import (
    EndpointRow,
    FieldRow,
    ModelSection,
    build_endpoint_table,
    build_model_reference,
    build_model_section,
    summarize_parameters,
)

__all__ = [
    "DependencyEdge",
    "DependencyGraph",
    "EndpointRow",
    "FieldRow",
    "ModelSection",
    "ServiceNode",
    "build_dependency_graph",
    "build_endpoint_table",
    "build_model_reference",
    "build_model_section",
    "summarize_parameters",
]
