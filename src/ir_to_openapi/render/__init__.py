"""Text encoders for the compiled document and the derived views."""

from ir_to_openapi.render.markdown import render_endpoint_table, render_model_reference
from ir_to_openapi.render.mermaid import (
    NodeIds,
    render_dependency_graph,
    render_endpoint_map,
    sanitize,
)
from ir_to_openapi.render.openapi import OutputFormat, dump_openapi, format_for_suffix

__all__ = [
    "NodeIds",
    "OutputFormat",
    "dump_openapi",
    "format_for_suffix",
    "render_dependency_graph",
    "render_endpoint_map",
    "render_endpoint_table",
    "render_model_reference",
    "sanitize",
]
