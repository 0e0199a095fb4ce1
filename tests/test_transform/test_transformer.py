"""Tests for the main IR to OpenAPI transformer."""

import json
from typing import Any

import pytest
from ir_to_openapi.config import CompilerConfig
from ir_to_openapi.models import IntermediateRepresentation, parse_info, parse_servers
from ir_to_openapi.transform import IRToOpenAPITransformer

REF = "#/components/schemas/"


@pytest.fixture
def document(sample_ir: IntermediateRepresentation) -> dict[str, Any]:
    """Compiled sample document with default metadata."""
    return IRToOpenAPITransformer().transform(sample_ir)


class TestDocumentShape:
    """Tests for the top-level document."""

    def test_top_level_keys(self, document: dict[str, Any]) -> None:
        """The document has the standard sections in order."""
        assert list(document) == ["openapi", "info", "servers", "paths", "components"]
        assert document["openapi"] == "3.0.0"

    def test_default_metadata(self, document: dict[str, Any]) -> None:
        """Default info and server are used when none are given."""
        assert document["info"] == {"title": "API", "version": "1.0.0"}
        assert document["servers"] == [{"url": "https://api.example.com"}]

    def test_custom_metadata(self, sample_ir: IntermediateRepresentation) -> None:
        """Caller metadata is placed verbatim."""
        document = IRToOpenAPITransformer().transform(
            sample_ir,
            parse_info('title="Shop",version="2.0.0"'),
            parse_servers('url="https://a";url="https://b"'),
        )
        assert document["info"] == {"title": "Shop", "version": "2.0.0"}
        assert [s["url"] for s in document["servers"]] == ["https://a", "https://b"]

    def test_configured_version(self, sample_ir: IntermediateRepresentation) -> None:
        """The OpenAPI version comes from the configuration."""
        config = CompilerConfig(openapi_version="3.0.3")
        assert IRToOpenAPITransformer(config).transform(sample_ir)["openapi"] == "3.0.3"

    def test_empty_ir(self) -> None:
        """An empty IR compiles to empty paths and schemas."""
        document = IRToOpenAPITransformer().transform(IntermediateRepresentation())
        assert document["paths"] == {}
        assert document["components"] == {"schemas": {}}


class TestEndToEnd:
    """End-to-end scenarios on the sample IR."""

    def test_get_user_envelope(self, document: dict[str, Any]) -> None:
        """GET /users/{id} returns the wrapper with User as payload."""
        op = document["paths"]["/api/v1/users/{id}"]["get"]
        assert op["parameters"] == [
            {"name": "id", "in": "path", "required": True, "schema": {"type": "integer"}}
        ]
        schema = op["responses"]["200"]["content"]["application/json"]["schema"]
        assert schema == {
            "allOf": [
                {"$ref": f"{REF}ApiResponse"},
                {"properties": {"data": {"$ref": f"{REF}User"}}},
            ]
        }

    def test_list_users(self, document: dict[str, Any]) -> None:
        """GET /users returns an array of users."""
        op = document["paths"]["/api/v1/users"]["get"]
        schema = op["responses"]["200"]["content"]["application/json"]["schema"]
        assert schema == {"type": "array", "items": {"$ref": f"{REF}User"}}

    def test_create_user(self, document: dict[str, Any]) -> None:
        """POST /users takes a required request body."""
        op = document["paths"]["/api/v1/users"]["post"]
        assert op["requestBody"]["required"] is True
        assert op["requestBody"]["content"]["application/json"]["schema"] == {
            "$ref": f"{REF}CreateUserRequest"
        }

    def test_delete_user(self, document: dict[str, Any]) -> None:
        """DELETE returns a described success without content."""
        op = document["paths"]["/api/v1/users/{id}"]["delete"]
        assert op["responses"] == {"200": {"description": "Successful Response"}}

    def test_enumerations(self, document: dict[str, Any]) -> None:
        """Explicit and implicit enums are both string enumerations."""
        schemas = document["components"]["schemas"]
        assert schemas["Role"] == {"type": "string", "enum": ["ADMIN", "USER"]}
        assert schemas["Status"] == {"type": "string", "enum": ["ACTIVE", "INACTIVE"]}

    def test_deterministic(self, sample_ir: IntermediateRepresentation) -> None:
        """The same IR always produces byte-identical output."""
        first = IRToOpenAPITransformer().transform(sample_ir)
        second = IRToOpenAPITransformer().transform(sample_ir)
        assert json.dumps(first) == json.dumps(second)

    def test_input_order_irrelevant(self, sample_ir_data: dict[str, Any]) -> None:
        """Reordering models and endpoints does not change the document."""
        forward = IntermediateRepresentation.model_validate(sample_ir_data)
        sample_ir_data["models"].reverse()
        sample_ir_data["endpoints"].reverse()
        backward = IntermediateRepresentation.model_validate(sample_ir_data)

        transformer = IRToOpenAPITransformer()
        assert json.dumps(transformer.transform(forward)) == json.dumps(
            transformer.transform(backward)
        )

    def test_ir_not_mutated(self, sample_ir: IntermediateRepresentation) -> None:
        """Compilation leaves the IR untouched."""
        before = sample_ir.model_dump()
        IRToOpenAPITransformer().transform(sample_ir)
        assert sample_ir.model_dump() == before
