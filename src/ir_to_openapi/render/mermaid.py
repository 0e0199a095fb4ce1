"""Mermaid flowchart rendering for endpoint maps and dependency graphs."""

from __future__ import annotations

import re
from collections.abc import Sequence

from ir_to_openapi.config import CompilerConfig
from ir_to_openapi.grouping.paths import EndpointGroup
from ir_to_openapi.views.graph import DependencyGraph, ServiceNode

_UNSAFE = re.compile(r"[^0-9A-Za-z_]")
_RUNS = re.compile(r"_+")


def sanitize(text: str) -> str:
    """Convert text into a Mermaid-safe identifier.

    Examples
    --------
        >>> sanitize("GET_/api/users/{id}")
        'GET_api_users_id_'

    """
    return _RUNS.sub("_", _UNSAFE.sub("_", text))


class NodeIds:
    """Hand out one unique Mermaid identifier per distinct name.

    Names that sanitize to the same identifier get a numeric suffix in the
    order they are first seen, so ``/a-b`` and ``/a_b`` stay separate nodes.

    Usage:
        ids = NodeIds("svc_")
        ids.get("a-b")  # 'svc_a_b'
        ids.get("a_b")  # 'svc_a_b_2'
    """

    def __init__(self, prefix: str = "") -> None:
        """Initialize with the prefix put before every identifier."""
        self.prefix = prefix
        self._by_name: dict[str, str] = {}
        self._taken: set[str] = set()

    def get(self, name: str) -> str:
        """Return the identifier for ``name``, allocating it on first use."""
        if name in self._by_name:
            return self._by_name[name]

        base = f"{self.prefix}{sanitize(name)}"
        candidate = base
        suffix = 2
        while candidate in self._taken:
            candidate = f"{base}_{suffix}"
            suffix += 1

        self._taken.add(candidate)
        self._by_name[name] = candidate
        return candidate


def label(text: str) -> str:
    """Quote a node label, escaping double quotes."""
    return '"' + text.replace('"', "#quot;") + '"'


def render_endpoint_map(groups: Sequence[EndpointGroup]) -> str:
    """Render endpoints as one subgraph per group."""
    group_ids = NodeIds("group_")
    endpoint_ids = NodeIds()
    lines = ["flowchart TB"]
    for group in groups:
        lines.append(f"  subgraph {group_ids.get(group.name)}[{label(group.name)}]")
        lines.append("    direction TB")
        for endpoint in group.endpoints:
            method = endpoint.method.upper()
            text = f"{method} {endpoint.path}"
            params = [
                f"{p.name}:{p.location.value}{' (req)' if p.required else ''}"
                for p in endpoint.parameters
            ]
            if params:
                text += "<br/>Params: " + ", ".join(params)
            node_id = endpoint_ids.get(f"{method}_{endpoint.path}")
            lines.append(f"    {node_id}[{label(text)}]")
        lines.append("  end")
        lines.append("")
    return "\n".join(lines) + "\n"


def _service_label(node: ServiceNode) -> str:
    count = node.usage_count
    noun = "controller" if count == 1 else "controllers"
    text = f"{node.type}<br/>used by {count} {noun}"
    if node.is_core:
        text += "<br/>core service"
    return label(text)


def render_dependency_graph(
    graph: DependencyGraph,
    config: CompilerConfig | None = None,
) -> str:
    """Render controllers, bucketed services and labelled edges."""
    config = config or CompilerConfig()
    controller_ids = NodeIds("ctrl_")
    service_ids = NodeIds("svc_")
    bucket_ids = NodeIds("bucket_")
    lines = ["flowchart LR"]

    lines.append('  subgraph controllers["Controllers"]')
    lines.append("    direction TB")
    for controller in graph.controllers:
        lines.append(f"    {controller_ids.get(controller)}[{label(controller)}]")
    lines.append("  end")
    lines.append("")

    for category in graph.categories:
        title = config.bucket_title(category)
        lines.append(f"  subgraph {bucket_ids.get(category)}[{label(title)}]")
        lines.append("    direction TB")
        for node in graph.services_in(category):
            lines.append(f"    {service_ids.get(node.type)}[{_service_label(node)}]")
        lines.append("  end")
        lines.append("")

    for edge in graph.edges:
        arrow = f"-->|{edge.label}|" if edge.label else "-->"
        source = controller_ids.get(edge.controller)
        lines.append(f"  {source} {arrow} {service_ids.get(edge.service)}")

    core = graph.core_services
    if core:
        lines.append("")
        lines.append("  classDef core stroke-width:3px,font-weight:bold")
        ids = ",".join(service_ids.get(node.type) for node in core)
        lines.append(f"  class {ids} core")

    return "\n".join(lines) + "\n"
