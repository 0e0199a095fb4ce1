"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest
from ir_to_openapi.config import CompilerConfig
from ir_to_openapi.models import IntermediateRepresentation


def _ref(base: str, *args: dict[str, Any]) -> dict[str, Any]:
    return {"base": base, "args": list(args)}


@pytest.fixture
def sample_ir_data() -> dict[str, Any]:
    """A small but complete IR as emitted by the upstream parser.

    Lint-clean: every type resolves, every path parameter is declared.
    """
    return {
        "models": [
            {
                "name": "User",
                "description": "A registered user",
                "fields": [
                    {"name": "id", "required": True, "typeRef": _ref("Long")},
                    {
                        "name": "email",
                        "required": True,
                        "typeRef": _ref("String"),
                        "validationRules": {"maxLength": 120, "pattern": "^.+@.+$"},
                    },
                    {"name": "role", "typeRef": _ref("Role")},
                    {"name": "createdAt", "typeRef": _ref("LocalDateTime")},
                    {"name": "tags", "typeRef": _ref("List", _ref("String"))},
                    {"name": "manager", "description": "Line manager", "typeRef": _ref("User")},
                ],
            },
            {
                "name": "Role",
                "isEnum": True,
                "fields": [{"name": "ADMIN"}, {"name": "USER"}],
            },
            {
                "name": "Status",
                "fields": [
                    {"name": "ACTIVE", "typeRef": None},
                    {"name": "INACTIVE", "typeRef": {"base": "", "args": None}},
                ],
            },
            {
                "name": "ApiResponse",
                "fields": [
                    {"name": "success", "typeRef": _ref("Boolean")},
                    {"name": "message", "typeRef": _ref("String")},
                ],
            },
            {
                "name": "CreateUserRequest",
                "fields": [
                    {"name": "email", "required": True, "typeRef": _ref("String")},
                    {"name": "name", "typeRef": _ref("String")},
                ],
            },
        ],
        "endpoints": [
            {
                "path": "/api/v1/users",
                "method": "GET",
                "summary": "List users",
                "parameters": [
                    {"name": "page", "in": "query", "required": False, "type": _ref("Integer")}
                ],
                "responseType": _ref("List", _ref("User")),
                "controllerName": "UserController",
                "dependencies": [
                    {"name": "userService", "type": "UserService", "injectionType": "constructor"},
                    {"name": "repo", "type": "UserRepository", "injectionType": "field"},
                ],
            },
            {
                "path": "/api/v1/users/{id}",
                "method": "GET",
                "summary": "Get user",
                "parameters": [
                    {"name": "id", "in": "path", "required": True, "type": _ref("Long")}
                ],
                "responseType": _ref("ApiResponse", _ref("User")),
                "controllerName": "UserController",
                "dependencies": [
                    {"name": "userService", "type": "UserService", "injectionType": "constructor"}
                ],
            },
            {
                "path": "/api/v1/users",
                "method": "POST",
                "description": "Create a user",
                "requestBodyType": _ref("CreateUserRequest"),
                "responseType": _ref("ApiResponse", _ref("User")),
                "controllerName": "UserController",
            },
            {
                "path": "/api/v1/users/{id}",
                "method": "DELETE",
                "parameters": [
                    {"name": "id", "in": "path", "required": True, "type": _ref("Long")}
                ],
                "responseType": _ref("void"),
                "controllerName": "UserController",
            },
            {
                "path": "/api/v1/orders",
                "method": "GET",
                "tags": ["Orders"],
                "responseType": _ref("List", _ref("String")),
                "controllerName": "OrderController",
                "dependencies": [
                    {"name": "orders", "type": "OrderService", "injectionType": "constructor"},
                    {"name": "utils", "type": "StringUtils", "injectionType": "field"},
                    {"name": "userService", "type": "UserService", "injectionType": "constructor"},
                ],
            },
            {
                "path": "/api/v1/admin/stats",
                "method": "GET",
                "responseType": _ref("Long"),
                "controllerName": "AdminController",
                "dependencies": [
                    {"name": "userService", "type": "UserService", "injectionType": "field"}
                ],
            },
            {
                "path": "/api/v1/health",
                "method": "GET",
                "responseType": _ref("String"),
            },
        ],
    }


@pytest.fixture
def sample_ir(sample_ir_data: dict[str, Any]) -> IntermediateRepresentation:
    """Decoded sample IR."""
    return IntermediateRepresentation.model_validate(sample_ir_data)


@pytest.fixture
def ir_file(tmp_path: Path, sample_ir_data: dict[str, Any]) -> Path:
    """Sample IR written to a JSON file."""
    path = tmp_path / "ir.json"
    path.write_text(json.dumps(sample_ir_data))
    return path


@pytest.fixture
def config() -> CompilerConfig:
    """Default compiler configuration."""
    return CompilerConfig()
