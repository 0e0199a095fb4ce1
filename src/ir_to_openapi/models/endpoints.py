"""Models for the endpoints section of the IR."""

from __future__ import annotations

from enum import Enum
from typing import Annotated

from pydantic import BaseModel, BeforeValidator, Field, field_validator

from ir_to_openapi.models.common import (
    IR_MODEL_CONFIG,
    Flag,
    NameList,
    Text,
    none_as_empty_list,
)
from ir_to_openapi.models.type_refs import TypeRef


class ParameterLocation(str, Enum):
    """Where an operation parameter is carried."""

    PATH = "path"
    QUERY = "query"
    HEADER = "header"
    COOKIE = "cookie"


class ParameterDefinition(BaseModel):
    """A single operation parameter.

    Example:
    -------
        ```json
        {"name": "id", "in": "path", "required": true, "type": {"base": "Long"}}
        ```

    """

    model_config = IR_MODEL_CONFIG

    name: Annotated[str, Field(description="Parameter name")]
    location: Annotated[ParameterLocation, Field(alias="in", description="Parameter location")]
    required: Annotated[Flag, Field(default=False)]
    description: Annotated[Text, Field(default="")]
    type_ref: Annotated[
        TypeRef,
        BeforeValidator(lambda v: {} if v is None else v),
        Field(default_factory=TypeRef, alias="type", description="Parameter type"),
    ]

    @field_validator("location", mode="before")
    @classmethod
    def _normalize_location(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().lower()
        return value


class DependencyDefinition(BaseModel):
    """A collaborator injected into the controller that owns an endpoint."""

    model_config = IR_MODEL_CONFIG

    name: Annotated[Text, Field(default="", description="Field or parameter name")]
    type: Annotated[str, Field(description="Collaborator type name")]
    injection_type: Annotated[
        Text,
        Field(default="", alias="injectionType", description="e.g. field or constructor"),
    ]


class EndpointDefinition(BaseModel):
    """A single HTTP endpoint (one path and method pair).

    Example:
    -------
        ```json
        {
          "path": "/api/v1/users/{id}",
          "method": "GET",
          "tags": ["Users"],
          "parameters": [{"name": "id", "in": "path", "required": true,
                          "type": {"base": "Long"}}],
          "responseType": {"base": "ApiResponse", "args": [{"base": "User"}]},
          "controllerName": "UserController",
          "dependencies": [{"name": "userService", "type": "UserService",
                            "injectionType": "constructor"}]
        }
        ```

    """

    model_config = IR_MODEL_CONFIG

    path: Annotated[str, Field(description="URL path template")]
    method: Annotated[str, Field(description="HTTP method")]
    summary: Annotated[Text, Field(default="")]
    description: Annotated[Text, Field(default="")]
    tags: Annotated[NameList, Field(default=())]
    parameters: Annotated[
        tuple[ParameterDefinition, ...],
        BeforeValidator(none_as_empty_list),
        Field(default=()),
    ]
    request_body_type: Annotated[
        TypeRef | None,
        Field(default=None, alias="requestBodyType", description="Request body type"),
    ]
    response_type: Annotated[
        TypeRef,
        BeforeValidator(lambda v: {} if v is None else v),
        Field(default_factory=TypeRef, alias="responseType", description="Response type"),
    ]
    deprecated: Annotated[Flag, Field(default=False)]
    controller_name: Annotated[Text, Field(default="", alias="controllerName")]
    controller_package: Annotated[Text, Field(default="", alias="controllerPackage")]
    dependencies: Annotated[
        tuple[DependencyDefinition, ...],
        BeforeValidator(none_as_empty_list),
        Field(default=()),
    ]

    @property
    def primary_tag(self) -> str:
        """First declared tag, or an empty string."""
        return self.tags[0] if self.tags else ""
