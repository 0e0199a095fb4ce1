"""Grouping engine shared by the table and diagram views."""

from ir_to_openapi.grouping.dependencies import DependencyIndex, aggregate_dependencies
from ir_to_openapi.grouping.paths import (
    DEFAULT_GROUP,
    EndpointGroup,
    EndpointGrouper,
    capitalize_segment,
    common_prefix,
    group_endpoints,
    group_key,
    split_path,
)

__all__ = [
    "DEFAULT_GROUP",
    "DependencyIndex",
    "EndpointGroup",
    "EndpointGrouper",
    "aggregate_dependencies",
    "capitalize_segment",
    "common_prefix",
    "group_endpoints",
    "group_key",
    "split_path",
]
