"""Root model for the API intermediate representation."""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, BeforeValidator, Field

from ir_to_openapi.models.common import IR_MODEL_CONFIG, none_as_empty_list
from ir_to_openapi.models.endpoints import EndpointDefinition
from ir_to_openapi.models.schemas import ModelDefinition


class IntermediateRepresentation(BaseModel):
    """Root model for the IR produced by the upstream source parser.

    The IR is read-only once decoded; compilation never mutates it.

    Example:
    -------
        ```json
        {
          "models": [{"name": "User", "fields": [...]}],
          "endpoints": [{"path": "/api/v1/users", "method": "GET", ...}]
        }
        ```

    """

    model_config = IR_MODEL_CONFIG

    models: Annotated[
        tuple[ModelDefinition, ...],
        BeforeValidator(none_as_empty_list),
        Field(default=(), description="Data models in source order"),
    ]
    endpoints: Annotated[
        tuple[EndpointDefinition, ...],
        BeforeValidator(none_as_empty_list),
        Field(default=(), description="Endpoints in source order"),
    ]

    @property
    def model_names(self) -> frozenset[str]:
        """Names of all models, used to decide whether a type is a reference."""
        return frozenset(m.name for m in self.models)

    @property
    def controller_names(self) -> list[str]:
        """Distinct non-empty controller names in lexicographic order."""
        return sorted({ep.controller_name for ep in self.endpoints if ep.controller_name})
