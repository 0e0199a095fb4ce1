"""Path-prefix extraction and endpoint grouping."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from ir_to_openapi.models.endpoints import EndpointDefinition

DEFAULT_GROUP = "Default"


def split_path(path: str) -> list[str]:
    """Split a path into its non-empty ``/``-delimited segments.

    Examples
    --------
        >>> split_path("/api/v1//users/")
        ['api', 'v1', 'users']

    """
    return [segment for segment in path.split("/") if segment]


def common_prefix(segment_lists: Sequence[Sequence[str]]) -> list[str]:
    """Return the longest segment sequence shared by all paths.

    Starts from the first path and shortens the prefix on each mismatch or
    length deficit against every following path.

    Examples
    --------
        >>> common_prefix([["api", "v1", "users"], ["api", "v1", "orders"]])
        ['api', 'v1']
        >>> common_prefix([])
        []

    """
    if not segment_lists:
        return []

    prefix = list(segment_lists[0])
    for parts in segment_lists[1:]:
        limit = min(len(prefix), len(parts))
        for i in range(limit):
            if prefix[i] != parts[i]:
                limit = i
                break
        del prefix[limit:]
        if not prefix:
            break
    return prefix


def capitalize_segment(segment: str) -> str:
    """Upper-case the first letter of a segment, leaving the rest untouched."""
    return segment[:1].upper() + segment[1:]


def group_key(
    endpoint: EndpointDefinition,
    prefix: Sequence[str],
    default_group: str = DEFAULT_GROUP,
) -> str:
    """Derive the group an endpoint belongs to.

    Priority:
        1. The first declared tag, if non-empty
        2. The path segment right after the common prefix, capitalized
        3. ``default_group`` when the path has nothing beyond the prefix
    """
    if endpoint.primary_tag:
        return endpoint.primary_tag

    segments = split_path(endpoint.path)
    if len(segments) > len(prefix):
        return capitalize_segment(segments[len(prefix)])

    return default_group


@dataclass(frozen=True)
class EndpointGroup:
    """Endpoints sharing a group key.

    Attributes
    ----------
        name: Group key.
        endpoints: Member endpoints in source order.

    """

    name: str
    endpoints: tuple[EndpointDefinition, ...]


class EndpointGrouper:
    """Assign every endpoint of a set to a group.

    The common prefix is computed once over the whole set, so an endpoint's
    group depends on its siblings.
    """

    def __init__(
        self,
        endpoints: Sequence[EndpointDefinition],
        default_group: str = DEFAULT_GROUP,
    ) -> None:
        """Initialize with the full endpoint set."""
        self.endpoints = tuple(endpoints)
        self.default_group = default_group
        self.prefix = common_prefix([split_path(ep.path) for ep in self.endpoints])

    def key(self, endpoint: EndpointDefinition) -> str:
        """Group key of one endpoint of the set."""
        return group_key(endpoint, self.prefix, self.default_group)

    def groups(self) -> list[EndpointGroup]:
        """Return groups ordered by name; members keep source order."""
        members: dict[str, list[EndpointDefinition]] = {}
        for endpoint in self.endpoints:
            members.setdefault(self.key(endpoint), []).append(endpoint)
        return [EndpointGroup(name, tuple(members[name])) for name in sorted(members)]


def group_endpoints(
    endpoints: Sequence[EndpointDefinition],
    default_group: str = DEFAULT_GROUP,
) -> list[EndpointGroup]:
    """Group endpoints by key, ordered by group name."""
    return EndpointGrouper(endpoints, default_group).groups()
