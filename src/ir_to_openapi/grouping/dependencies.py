"""Controller to collaborator dependency aggregation."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from ir_to_openapi.models.endpoints import EndpointDefinition


@dataclass
class DependencyIndex:
    """Deduplicated controller/collaborator relations.

    Relations are keyed by collaborator type, so a controller reaching the
    same type through several endpoints or field names yields one relation.

    Attributes
    ----------
        by_controller: Controller name to the set of collaborator types.
        by_service: Collaborator type to the set of controller names.
        injection_kinds: (controller, type) to the injection kinds seen.

    """

    by_controller: dict[str, set[str]] = field(default_factory=dict)
    by_service: dict[str, set[str]] = field(default_factory=dict)
    injection_kinds: dict[tuple[str, str], set[str]] = field(default_factory=dict)

    def add(self, controller: str, service_type: str, injection_kind: str = "") -> None:
        """Record that ``controller`` uses ``service_type``."""
        self.by_controller.setdefault(controller, set()).add(service_type)
        self.by_service.setdefault(service_type, set()).add(controller)
        kinds = self.injection_kinds.setdefault((controller, service_type), set())
        if injection_kind:
            kinds.add(injection_kind)

    @property
    def controllers(self) -> list[str]:
        """Controller names in lexicographic order."""
        return sorted(self.by_controller)

    @property
    def services(self) -> list[str]:
        """Collaborator types in lexicographic order."""
        return sorted(self.by_service)

    def services_of(self, controller: str) -> list[str]:
        """Collaborator types used by ``controller``, sorted."""
        return sorted(self.by_controller.get(controller, ()))

    def users_of(self, service_type: str) -> list[str]:
        """Controllers using ``service_type``, sorted."""
        return sorted(self.by_service.get(service_type, ()))

    def usage_count(self, service_type: str) -> int:
        """Number of distinct controllers using ``service_type``."""
        return len(self.by_service.get(service_type, ()))

    def kinds_of(self, controller: str, service_type: str) -> list[str]:
        """Injection kinds for one relation, sorted."""
        return sorted(self.injection_kinds.get((controller, service_type), ()))

    def is_core(self, service_type: str, threshold: int = 3) -> bool:
        """Return True if at least ``threshold`` controllers use the type."""
        return self.usage_count(service_type) >= threshold


def aggregate_dependencies(endpoints: Sequence[EndpointDefinition]) -> DependencyIndex:
    """Build the dependency index from endpoint controller metadata.

    Endpoints without a controller name and dependencies without a type are
    skipped. Controllers without dependencies are still listed.
    """
    index = DependencyIndex()
    for endpoint in endpoints:
        controller = endpoint.controller_name
        if not controller:
            continue
        index.by_controller.setdefault(controller, set())
        for dependency in endpoint.dependencies:
            if not dependency.type:
                continue
            index.add(controller, dependency.type, dependency.injection_type)
    return index
