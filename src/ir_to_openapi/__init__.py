"""ir-to-openapi: Compiler from an API intermediate representation to OpenAPI.

This package provides tools for:
- Loading the intermediate representation (IR) produced by an upstream source parser
- Compiling the IR into a deterministic OpenAPI 3 document tree
- Grouping endpoints and controller dependencies for reference tables and diagrams

Quick Start:
    >>> from ir_to_openapi.models import load_ir_file
    >>> from ir_to_openapi.transform import IRToOpenAPITransformer
    >>> from ir_to_openapi.render import dump_openapi
    >>>
    >>> ir = load_ir_file("ir.json")
    >>> document = IRToOpenAPITransformer().transform(ir)
    >>> print(dump_openapi(document))

Modules:
    models: Pydantic models for the IR, API metadata and configuration
    transform: Type resolution, schema synthesis and operation compilation
    grouping: Common-prefix extraction, group keys and dependency aggregation
    views: Endpoint tables, model reference and dependency graph views
    render: YAML/JSON, Markdown and Mermaid encoders
    parser: Upstream parser invocation
    validation: IR lint checks
    cli: Command-line interface
"""

__version__ = "0.1.0"
