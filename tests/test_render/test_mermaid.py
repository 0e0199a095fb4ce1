"""Tests for Mermaid rendering."""

import pytest
from ir_to_openapi.config import CompilerConfig
from ir_to_openapi.grouping.paths import group_endpoints
from ir_to_openapi.models import IntermediateRepresentation
from ir_to_openapi.render.mermaid import (
    NodeIds,
    label,
    render_dependency_graph,
    render_endpoint_map,
    sanitize,
)
from ir_to_openapi.views.graph import build_dependency_graph


class TestSanitize:
    """Tests for identifier sanitizing."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("GET_/api/users/{id}", "GET_api_users_id_"),
            ("UserService", "UserService"),
            ("a--b  c", "a_b_c"),
            ("x.y.Z", "x_y_Z"),
        ],
    )
    def test_sanitize(self, text: str, expected: str) -> None:
        """Non-alphanumerics become underscores, runs collapse."""
        assert sanitize(text) == expected

    def test_label_quotes(self) -> None:
        """Double quotes are escaped inside labels."""
        assert label('say "hi"') == '"say #quot;hi#quot;"'


class TestNodeIds:
    """Tests for unique identifier allocation."""

    def test_same_name_same_id(self) -> None:
        """Repeated lookups return the first identifier."""
        ids = NodeIds("svc_")
        assert ids.get("a.b") == "svc_a_b"
        assert ids.get("a.b") == "svc_a_b"

    def test_colliding_names_get_suffix(self) -> None:
        """Names that sanitize alike are numbered in first-seen order."""
        ids = NodeIds()
        assert ids.get("GET_/a-b") == "GET_a_b"
        assert ids.get("GET_/a_b") == "GET_a_b_2"
        assert ids.get("GET_/a b") == "GET_a_b_3"
        assert ids.get("GET_/a-b") == "GET_a_b"

    def test_suffix_does_not_reuse_taken_id(self) -> None:
        """A later name equal to an allocated suffix is numbered again."""
        ids = NodeIds()
        ids.get("x-1")
        assert ids.get("x.1") == "x_1_2"
        assert ids.get("x_1_2") == "x_1_2_2"


class TestEndpointMap:
    """Tests for render_endpoint_map."""

    def test_sample(self, sample_ir: IntermediateRepresentation) -> None:
        """One subgraph per group with one node per endpoint."""
        text = render_endpoint_map(group_endpoints(sample_ir.endpoints))
        lines = text.splitlines()

        assert lines[0] == "flowchart TB"
        subgraphs = [line.strip() for line in lines if line.strip().startswith("subgraph")]
        assert subgraphs == [
            'subgraph group_Admin["Admin"]',
            'subgraph group_Health["Health"]',
            'subgraph group_Orders["Orders"]',
            'subgraph group_Users["Users"]',
        ]
        node = '    GET_api_v1_users_id_["GET /api/v1/users/{id}<br/>Params: id:path (req)"]'
        assert node in lines
        assert '    GET_api_v1_health["GET /api/v1/health"]' in lines

    def test_empty(self) -> None:
        """No groups, just the header."""
        assert render_endpoint_map([]) == "flowchart TB\n"

    def test_colliding_paths_stay_separate(self) -> None:
        """Paths that sanitize alike get distinct node and group ids."""
        ir = IntermediateRepresentation.model_validate(
            {"endpoints": [{"path": "/a-b", "method": "GET"}, {"path": "/a_b", "method": "GET"}]}
        )
        lines = render_endpoint_map(group_endpoints(ir.endpoints)).splitlines()
        assert '  subgraph group_A_b["A-b"]' in lines
        assert '  subgraph group_A_b_2["A_b"]' in lines
        assert '    GET_a_b["GET /a-b"]' in lines
        assert '    GET_a_b_2["GET /a_b"]' in lines


class TestDependencyGraph:
    """Tests for render_dependency_graph."""

    @pytest.fixture
    def text(self, sample_ir: IntermediateRepresentation) -> str:
        """Rendered sample dependency graph."""
        config = CompilerConfig()
        return render_dependency_graph(build_dependency_graph(sample_ir.endpoints, config), config)

    def test_header_and_controllers(self, text: str) -> None:
        """Controllers sit in their own subgraph."""
        lines = text.splitlines()
        assert lines[0] == "flowchart LR"
        assert '  subgraph controllers["Controllers"]' in lines
        assert '    ctrl_UserController["UserController"]' in lines

    def test_buckets(self, text: str) -> None:
        """Services are grouped by bucket with titled subgraphs."""
        lines = text.splitlines()
        assert '  subgraph bucket_repository["Repositories"]' in lines
        assert '  subgraph bucket_service["Services"]' in lines
        assert '  subgraph bucket_utility["Utilities"]' in lines

    def test_usage_annotations(self, text: str) -> None:
        """Service labels carry usage counts; core services are marked."""
        assert '    svc_OrderService["OrderService<br/>used by 1 controller"]' in text
        assert (
            '    svc_UserService["UserService<br/>used by 3 controllers<br/>core service"]' in text
        )

    def test_edges(self, text: str) -> None:
        """Edges are labelled with injection kinds."""
        lines = text.splitlines()
        assert "  ctrl_UserController -->|constructor| svc_UserService" in lines
        assert "  ctrl_AdminController -->|field| svc_UserService" in lines

    def test_core_class(self, text: str) -> None:
        """Core services get the core class."""
        lines = text.splitlines()
        assert "  classDef core stroke-width:3px,font-weight:bold" in lines
        assert "  class svc_UserService core" in lines

    def test_unlabelled_edge(self) -> None:
        """Edges without injection kinds have no label."""
        ir = IntermediateRepresentation.model_validate(
            {
                "endpoints": [
                    {
                        "path": "/a",
                        "method": "GET",
                        "controllerName": "C",
                        "dependencies": [{"type": "S"}],
                    }
                ]
            }
        )
        text = render_dependency_graph(build_dependency_graph(ir.endpoints))
        assert "  ctrl_C --> svc_S" in text.splitlines()
        assert "classDef core" not in text

    def test_colliding_service_types(self) -> None:
        """Service types that sanitize alike are separate nodes."""
        ir = IntermediateRepresentation.model_validate(
            {
                "endpoints": [
                    {
                        "path": "/a",
                        "method": "GET",
                        "controllerName": "C",
                        "dependencies": [{"type": "x.Svc"}, {"type": "x_Svc"}],
                    }
                ]
            }
        )
        lines = render_dependency_graph(build_dependency_graph(ir.endpoints)).splitlines()
        assert '    svc_x_Svc["x.Svc<br/>used by 1 controller"]' in lines
        assert '    svc_x_Svc_2["x_Svc<br/>used by 1 controller"]' in lines
        assert "  ctrl_C --> svc_x_Svc" in lines
        assert "  ctrl_C --> svc_x_Svc_2" in lines
