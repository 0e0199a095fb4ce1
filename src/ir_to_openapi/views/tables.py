"""Row-oriented views for the endpoint table and the model reference."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from ir_to_openapi.grouping.paths import DEFAULT_GROUP, EndpointGrouper
from ir_to_openapi.models.endpoints import EndpointDefinition, ParameterDefinition
from ir_to_openapi.models.schemas import ModelDefinition


@dataclass(frozen=True)
class EndpointRow:
    """One line of the endpoint table."""

    group: str
    method: str
    path: str
    param_summary: str
    description: str


@dataclass(frozen=True)
class FieldRow:
    """One line of a model's field table."""

    name: str
    type: str
    required: bool
    description: str
    deprecated: bool = False


@dataclass(frozen=True)
class ModelSection:
    """Reference section for one model.

    Enumerations carry ``enum_values`` and no field rows; objects carry
    ``fields`` and no enum values.
    """

    name: str
    description: str
    is_enum: bool
    fields: tuple[FieldRow, ...] = ()
    enum_values: tuple[str, ...] = ()
    deprecated: bool = False
    extends: tuple[str, ...] = ()
    implements: tuple[str, ...] = ()

    @property
    def kind(self) -> str:
        """Short label: ``enum`` or ``object``."""
        return "enum" if self.is_enum else "object"


def summarize_parameters(parameters: Sequence[ParameterDefinition]) -> str:
    """Render parameters as ``name (in[, required])`` joined by commas.

    Examples
    --------
        ``id (path, required), page (query)``

    """
    parts = []
    for param in parameters:
        required = ", required" if param.required else ""
        parts.append(f"{param.name} ({param.location.value}{required})")
    return ", ".join(parts)


def build_endpoint_table(
    endpoints: Sequence[EndpointDefinition],
    default_group: str = DEFAULT_GROUP,
) -> list[EndpointRow]:
    """Build endpoint rows sorted by (group, path).

    The sort is stable, so methods on one path keep source order.
    """
    grouper = EndpointGrouper(endpoints, default_group)
    rows = [
        EndpointRow(
            group=grouper.key(endpoint),
            method=endpoint.method.upper(),
            path=endpoint.path,
            param_summary=summarize_parameters(endpoint.parameters),
            description=endpoint.summary or endpoint.description,
        )
        for endpoint in endpoints
    ]
    rows.sort(key=lambda row: (row.group, row.path))
    return rows


def build_model_section(model: ModelDefinition) -> ModelSection:
    """Build the reference section for one model."""
    if model.is_enumeration:
        return ModelSection(
            name=model.name,
            description=model.description,
            is_enum=True,
            enum_values=tuple(f.name for f in model.fields),
            deprecated=model.deprecated,
        )

    return ModelSection(
        name=model.name,
        description=model.description,
        is_enum=False,
        fields=tuple(
            FieldRow(
                name=f.name,
                type=f.type_ref.display(),
                required=f.required,
                description=f.description,
                deprecated=f.deprecated,
            )
            for f in model.fields
        ),
        deprecated=model.deprecated,
        extends=tuple(sorted(set(model.extends))),
        implements=tuple(sorted(set(model.implements))),
    )


def build_model_reference(models: Sequence[ModelDefinition]) -> list[ModelSection]:
    """Build one section per model, ordered by model name.

    Duplicate names keep the last definition.
    """
    by_name = {model.name: model for model in models}
    return [build_model_section(by_name[name]) for name in sorted(by_name)]
