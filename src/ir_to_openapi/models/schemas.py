"""Models for the data models (DTOs, entities, enums) described by the IR."""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, Field

from ir_to_openapi.models.common import (
    IR_MODEL_CONFIG,
    Flag,
    NameList,
    Text,
    none_as_empty_dict,
    none_as_empty_list,
)
from ir_to_openapi.models.type_refs import TypeRef


class FieldDefinition(BaseModel):
    """A single field of a model.

    For enumerations the upstream parser emits one field per constant with an
    empty type reference; the constant name is the field name.

    Example:
    -------
        ```json
        {
          "name": "email",
          "required": true,
          "typeRef": {"base": "String", "args": []},
          "validationRules": {"maxLength": 120, "pattern": "^.+@.+$"}
        }
        ```

    """

    model_config = IR_MODEL_CONFIG

    name: Annotated[str, Field(description="Field name")]
    required: Annotated[Flag, Field(default=False, description="Whether the field is required")]
    description: Annotated[Text, Field(default="", description="Field documentation")]
    type_ref: Annotated[
        TypeRef,
        BeforeValidator(lambda v: {} if v is None else v),
        Field(default_factory=TypeRef, alias="typeRef", description="Field type"),
    ]
    validation_rules: Annotated[
        dict[str, Any],
        BeforeValidator(none_as_empty_dict),
        Field(
            default_factory=dict,
            alias="validationRules",
            description="Constraint name to constraint value",
        ),
    ]
    example: Annotated[Text, Field(default="", description="Example value")]
    deprecated: Annotated[Flag, Field(default=False)]
    deprecation_notes: Annotated[Text, Field(default="", alias="deprecationNotes")]

    @property
    def is_untyped(self) -> bool:
        """Return True if the field carries no type (enum constant shape)."""
        return self.type_ref.base == ""


class ModelDefinition(BaseModel):
    """A data model (class, record, interface or enum).

    Example:
    -------
        ```json
        {
          "name": "Role",
          "isEnum": true,
          "fields": [{"name": "ADMIN"}, {"name": "USER"}]
        }
        ```

    """

    model_config = IR_MODEL_CONFIG

    name: Annotated[str, Field(description="Model name, used as schema key")]
    description: Annotated[Text, Field(default="")]
    fields: Annotated[
        tuple[FieldDefinition, ...],
        BeforeValidator(none_as_empty_list),
        Field(default=(), description="Ordered fields"),
    ]
    is_enum: Annotated[Flag, Field(default=False, alias="isEnum")]
    is_interface: Annotated[Flag, Field(default=False, alias="isInterface")]
    extends: Annotated[NameList, Field(default=(), alias="extendsList")]
    implements: Annotated[NameList, Field(default=(), alias="implementsList")]
    example: Annotated[Text, Field(default="")]
    deprecated: Annotated[Flag, Field(default=False)]
    deprecation_notes: Annotated[Text, Field(default="", alias="deprecationNotes")]
    since: Annotated[Text, Field(default="")]

    @property
    def is_enumeration(self) -> bool:
        """Return True if the model renders as an enumeration.

        A model is an enumeration when flagged explicitly, or when it has
        fields and none of them carries a type. In the second case the enum
        values are the field names.
        """
        if self.is_enum:
            return True
        return len(self.fields) > 0 and all(f.is_untyped for f in self.fields)

    @property
    def required_fields(self) -> list[str]:
        """Names of required fields in declaration order."""
        return [f.name for f in self.fields if f.required]
