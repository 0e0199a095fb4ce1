"""Tests for dependency aggregation."""

from ir_to_openapi.grouping.dependencies import DependencyIndex, aggregate_dependencies
from ir_to_openapi.models import EndpointDefinition, IntermediateRepresentation


class TestDependencyIndex:
    """Tests for DependencyIndex."""

    def test_relations_deduplicated(self) -> None:
        """Repeated relations collapse; injection kinds accumulate."""
        index = DependencyIndex()
        index.add("AController", "AService", "constructor")
        index.add("AController", "AService", "field")
        index.add("AController", "AService", "constructor")

        assert index.services_of("AController") == ["AService"]
        assert index.kinds_of("AController", "AService") == ["constructor", "field"]
        assert index.usage_count("AService") == 1

    def test_core_threshold(self) -> None:
        """A type is core once enough controllers use it."""
        index = DependencyIndex()
        for controller in ("A", "B"):
            index.add(controller, "Shared")
        assert not index.is_core("Shared")
        assert index.is_core("Shared", threshold=2)

        index.add("C", "Shared")
        assert index.is_core("Shared")

    def test_unknown_lookups(self) -> None:
        """Lookups of unknown names are empty."""
        index = DependencyIndex()
        assert index.users_of("X") == []
        assert index.services_of("X") == []
        assert index.kinds_of("X", "Y") == []
        assert index.usage_count("X") == 0


class TestAggregateDependencies:
    """Tests for aggregate_dependencies."""

    def test_sample(self, sample_ir: IntermediateRepresentation) -> None:
        """Controllers and services are collected and sorted."""
        index = aggregate_dependencies(sample_ir.endpoints)

        assert index.controllers == ["AdminController", "OrderController", "UserController"]
        assert index.services == [
            "OrderService",
            "StringUtils",
            "UserRepository",
            "UserService",
        ]
        assert index.users_of("UserService") == [
            "AdminController",
            "OrderController",
            "UserController",
        ]
        assert index.is_core("UserService")
        assert not index.is_core("OrderService")

    def test_endpoint_without_controller_skipped(self) -> None:
        """Endpoints with no controller contribute nothing."""
        endpoint = EndpointDefinition.model_validate(
            {"path": "/a", "method": "GET", "dependencies": [{"type": "AService"}]}
        )
        index = aggregate_dependencies([endpoint])
        assert index.controllers == []
        assert index.services == []

    def test_controller_without_dependencies_listed(self) -> None:
        """A controller with no collaborators still appears."""
        endpoint = EndpointDefinition.model_validate(
            {"path": "/a", "method": "GET", "controllerName": "Lonely"}
        )
        index = aggregate_dependencies([endpoint])
        assert index.controllers == ["Lonely"]
        assert index.services_of("Lonely") == []

    def test_same_type_through_two_fields(self) -> None:
        """Two fields of the same type yield one relation."""
        endpoint = EndpointDefinition.model_validate(
            {
                "path": "/a",
                "method": "GET",
                "controllerName": "C",
                "dependencies": [
                    {"name": "primary", "type": "Cache", "injectionType": "field"},
                    {"name": "secondary", "type": "Cache", "injectionType": "field"},
                ],
            }
        )
        index = aggregate_dependencies([endpoint])
        assert index.services_of("C") == ["Cache"]
        assert index.kinds_of("C", "Cache") == ["field"]
