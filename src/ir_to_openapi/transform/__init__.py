"""IR to OpenAPI transformation module.

This module compiles a decoded intermediate representation into an
OpenAPI 3 document tree.

The transformation process:
    1. Collect model names so type references can be told apart from unknowns
    2. Resolve type references (containers, primitives, model references)
    3. Synthesize one component schema per model (enum or object)
    4. Compile one operation per (path, method) pair
    5. Merge schemas and paths with the caller's info and servers

Primary Class:
    IRToOpenAPITransformer: Main transformer class

Example:
-------
    >>> from ir_to_openapi.models import load_ir_file
    >>> from ir_to_openapi.transform import IRToOpenAPITransformer
    >>>
    >>> ir = load_ir_file("ir.json")
    >>> document = IRToOpenAPITransformer().transform(ir)
    >>> print(sorted(document["components"]["schemas"]))


"""

from ir_to_openapi.transform.operation_compiler import OperationCompiler, compile_operations
from ir_to_openapi.transform.schema_synthesizer import SchemaSynthesizer, synthesize
from ir_to_openapi.transform.transformer import IRToOpenAPITransformer
from ir_to_openapi.transform.type_resolver import TypeResolver, resolve, to_schema

__all__ = [
    "IRToOpenAPITransformer",
    "OperationCompiler",
    "SchemaSynthesizer",
    "TypeResolver",
    "compile_operations",
    "resolve",
    "synthesize",
    "to_schema",
]
