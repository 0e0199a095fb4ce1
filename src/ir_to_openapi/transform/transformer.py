"""Main IR to OpenAPI transformer."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from ir_to_openapi.config import CompilerConfig
from ir_to_openapi.models.meta import ApiInfo, Server
from ir_to_openapi.models.root import IntermediateRepresentation
from ir_to_openapi.transform.operation_compiler import OperationCompiler
from ir_to_openapi.transform.schema_synthesizer import SchemaSynthesizer
from ir_to_openapi.transform.type_resolver import TypeResolver

logger = logging.getLogger(__name__)

DEFAULT_SERVER_URL = "https://api.example.com"


class IRToOpenAPITransformer:
    """Transform a decoded IR into an OpenAPI document tree.

    This is the main entry point of the compiler. The result is a plain
    mapping ready for YAML/JSON encoding; every mapping derived from the IR
    is sorted, so the same IR and metadata always produce the same document.

    Usage:
        transformer = IRToOpenAPITransformer()
        document = transformer.transform(ir, ApiInfo(title="Shop"))
    """

    def __init__(self, config: CompilerConfig | None = None) -> None:
        """Initialize the transformer."""
        self.config = config or CompilerConfig()

    def transform(
        self,
        ir: IntermediateRepresentation,
        info: ApiInfo | None = None,
        servers: Sequence[Server] | None = None,
    ) -> dict[str, Any]:
        """Transform an IR into an OpenAPI document.

        Args:
        ----
            ir: Decoded intermediate representation.
            info: API title, version and extra info keys.
            servers: Server entries; defaults to a single example server.

        Returns:
        -------
            The document tree.

        """
        info = info or ApiInfo()
        if servers is None:
            servers = [Server(url=DEFAULT_SERVER_URL)]

        resolver = TypeResolver(ir.model_names, self.config)

        schemas = SchemaSynthesizer(resolver, self.config).synthesize(ir.models)
        logger.info("Synthesized %d schemas", len(schemas))

        paths = OperationCompiler(resolver, self.config).compile(ir.endpoints)
        logger.info(
            "Compiled %d operations on %d paths",
            sum(len(item) for item in paths.values()),
            len(paths),
        )

        return {
            "openapi": self.config.openapi_version,
            "info": info.to_document(),
            "servers": [server.to_document() for server in servers],
            "paths": paths,
            "components": {"schemas": schemas},
        }
