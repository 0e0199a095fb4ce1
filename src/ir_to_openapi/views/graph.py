"""Controller/collaborator dependency graph view."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from ir_to_openapi.config import CompilerConfig
from ir_to_openapi.grouping.dependencies import aggregate_dependencies
from ir_to_openapi.models.endpoints import EndpointDefinition


@dataclass(frozen=True)
class ServiceNode:
    """A collaborator type used by one or more controllers.

    Attributes
    ----------
        type: Collaborator type name.
        category: Bucket name (repository, utility, service...).
        used_by: Controllers using it, sorted.
        is_core: True when the usage count reaches the core threshold.

    """

    type: str
    category: str
    used_by: tuple[str, ...]
    is_core: bool = False

    @property
    def usage_count(self) -> int:
        """Number of distinct controllers using the type."""
        return len(self.used_by)


@dataclass(frozen=True)
class DependencyEdge:
    """A deduplicated controller to collaborator relation."""

    controller: str
    service: str
    injection_kinds: tuple[str, ...] = ()

    @property
    def label(self) -> str:
        """Edge label, e.g. ``constructor`` or ``constructor, field``."""
        return ", ".join(self.injection_kinds)


@dataclass(frozen=True)
class DependencyGraph:
    """Nodes and edges of the dependency diagram, all sorted."""

    controllers: tuple[str, ...]
    services: tuple[ServiceNode, ...]
    edges: tuple[DependencyEdge, ...]

    def services_in(self, category: str) -> list[ServiceNode]:
        """Services of one bucket, in type order."""
        return [node for node in self.services if node.category == category]

    @property
    def categories(self) -> list[str]:
        """Bucket names present in the graph, sorted."""
        return sorted({node.category for node in self.services})

    @property
    def core_services(self) -> list[ServiceNode]:
        """Services flagged as core."""
        return [node for node in self.services if node.is_core]


def build_dependency_graph(
    endpoints: Sequence[EndpointDefinition],
    config: CompilerConfig | None = None,
) -> DependencyGraph:
    """Aggregate endpoint dependencies into a graph.

    Args:
    ----
        endpoints: Endpoints carrying controller and dependency metadata.
        config: Supplies the service buckets and the core threshold.

    Returns:
    -------
        DependencyGraph with controllers, services and edges sorted.

    """
    config = config or CompilerConfig()
    index = aggregate_dependencies(endpoints)

    services = tuple(
        ServiceNode(
            type=service,
            category=config.categorize_service(service),
            used_by=tuple(index.users_of(service)),
            is_core=index.is_core(service, config.core_service_threshold),
        )
        for service in index.services
    )
    edges = tuple(
        DependencyEdge(
            controller=controller,
            service=service,
            injection_kinds=tuple(index.kinds_of(controller, service)),
        )
        for controller in index.controllers
        for service in index.services_of(controller)
    )
    return DependencyGraph(
        controllers=tuple(index.controllers),
        services=services,
        edges=edges,
    )
