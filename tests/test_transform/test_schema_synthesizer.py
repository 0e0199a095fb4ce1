"""Tests for component schema synthesis."""

from ir_to_openapi.models import IntermediateRepresentation, ModelDefinition
from ir_to_openapi.transform.schema_synthesizer import SchemaSynthesizer, enum_schema, synthesize
from ir_to_openapi.transform.type_resolver import TypeResolver

REF = "#/components/schemas/"


def _model(data: dict) -> ModelDefinition:
    return ModelDefinition.model_validate(data)


class TestEnumSchemas:
    """Tests for enumeration schemas."""

    def test_explicit_enum(self) -> None:
        """An explicit enum lists its field names in order."""
        model = _model({"name": "Role", "isEnum": True, "fields": [{"name": "B"}, {"name": "A"}]})
        assert enum_schema(model) == {"type": "string", "enum": ["B", "A"]}

    def test_implicit_enum_matches_explicit(self) -> None:
        """Untyped-field models produce the same schema as flagged enums."""
        implicit = _model({"name": "S", "fields": [{"name": "ON"}, {"name": "OFF"}]})
        explicit = _model(
            {"name": "S", "isEnum": True, "fields": [{"name": "ON"}, {"name": "OFF"}]}
        )
        assert synthesize([implicit]) == synthesize([explicit])

    def test_enum_description_and_deprecation(self) -> None:
        """Enum metadata is carried over."""
        model = _model(
            {
                "name": "Old",
                "isEnum": True,
                "description": "Legacy states",
                "deprecated": True,
                "deprecationNotes": "use New",
                "fields": [{"name": "X"}],
            }
        )
        assert enum_schema(model) == {
            "type": "string",
            "enum": ["X"],
            "description": "Legacy states",
            "deprecated": True,
            "x-deprecation-notes": "use New",
        }


class TestObjectSchemas:
    """Tests for object schemas."""

    def test_sample_user(self, sample_ir: IntermediateRepresentation) -> None:
        """The sample User schema resolves every property."""
        schemas = synthesize(sample_ir.models)
        user = schemas["User"]

        assert user["type"] == "object"
        assert user["description"] == "A registered user"
        assert user["required"] == ["id", "email"]
        assert user["properties"]["id"] == {"type": "integer"}
        assert user["properties"]["email"] == {
            "type": "string",
            "maxLength": 120,
            "pattern": "^.+@.+$",
        }
        assert user["properties"]["role"] == {"$ref": f"{REF}Role"}
        assert user["properties"]["createdAt"] == {"type": "string", "format": "date-time"}
        assert user["properties"]["tags"] == {"type": "array", "items": {"type": "string"}}

    def test_reference_with_metadata_wrapped(self, sample_ir: IntermediateRepresentation) -> None:
        """A described reference property is wrapped in allOf."""
        user = synthesize(sample_ir.models)["User"]
        assert user["properties"]["manager"] == {
            "allOf": [{"$ref": f"{REF}User"}],
            "description": "Line manager",
        }

    def test_required_omitted_when_empty(self) -> None:
        """Objects without required fields have no required key."""
        model = _model({"name": "P", "fields": [{"name": "a", "typeRef": {"base": "int"}}]})
        schemas = synthesize([model])
        assert "required" not in schemas["P"]

    def test_empty_object(self) -> None:
        """A model without fields is an empty object."""
        assert synthesize([_model({"name": "Empty"})]) == {
            "Empty": {"type": "object", "properties": {}}
        }

    def test_validation_allow_list(self) -> None:
        """Only recognized validation keys are copied."""
        model = _model(
            {
                "name": "M",
                "fields": [
                    {
                        "name": "code",
                        "typeRef": {"base": "String"},
                        "validationRules": {
                            "minLength": 2,
                            "notBlank": True,
                            "pattern": "^[A-Z]+$",
                        },
                    }
                ],
            }
        )
        prop = synthesize([model])["M"]["properties"]["code"]
        assert prop == {"type": "string", "minLength": 2, "pattern": "^[A-Z]+$"}

    def test_untyped_field_in_object(self) -> None:
        """An untyped field in a typed model falls back to string."""
        model = _model(
            {"name": "M", "fields": [{"name": "a"}, {"name": "b", "typeRef": {"base": "int"}}]}
        )
        assert synthesize([model])["M"]["properties"]["a"] == {"type": "string"}

    def test_unknown_reference_never_dangles(self) -> None:
        """Fields typed with unknown names become strings."""
        model = _model({"name": "M", "fields": [{"name": "w", "typeRef": {"base": "Widget"}}]})
        assert synthesize([model])["M"]["properties"]["w"] == {"type": "string"}

    def test_model_metadata_extensions(self) -> None:
        """Inheritance and lifecycle metadata use extension keys."""
        model = _model(
            {
                "name": "Admin",
                "extendsList": ["User", "Base", "User"],
                "implementsList": ["Auditable"],
                "isInterface": True,
                "since": "1.2",
                "example": '{"id": 1}',
                "fields": [{"name": "id", "typeRef": {"base": "Long"}}],
            }
        )
        schema = synthesize([model])["Admin"]
        assert schema["x-extends"] == ["Base", "User"]
        assert schema["x-implements"] == ["Auditable"]
        assert schema["x-interface"] is True
        assert schema["x-since"] == "1.2"
        assert schema["example"] == '{"id": 1}'


class TestSynthesize:
    """Tests for the schema map."""

    def test_sorted_by_name(self, sample_ir: IntermediateRepresentation) -> None:
        """Schemas are keyed and ordered by model name."""
        schemas = synthesize(sample_ir.models)
        assert list(schemas) == ["ApiResponse", "CreateUserRequest", "Role", "Status", "User"]

    def test_duplicate_last_wins(self) -> None:
        """The last definition of a repeated name is kept."""
        first = _model({"name": "D", "description": "first"})
        second = _model({"name": "D", "description": "second"})
        assert synthesize([first, second])["D"]["description"] == "second"

    def test_references_only_known_models(self, sample_ir: IntermediateRepresentation) -> None:
        """Every $ref in the schema map names a known model."""
        synthesizer = SchemaSynthesizer(TypeResolver(sample_ir.model_names))
        schemas = synthesizer.synthesize(sample_ir.models)

        refs: list[str] = []

        def collect(node: object) -> None:
            if isinstance(node, dict):
                if "$ref" in node:
                    refs.append(node["$ref"])
                for value in node.values():
                    collect(value)
            elif isinstance(node, list):
                for value in node:
                    collect(value)

        collect(schemas)
        assert refs
        assert all(ref.removeprefix(REF) in schemas for ref in refs)
