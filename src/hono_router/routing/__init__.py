"""Routing — path segments, route records, and route ordering.

File-system names are parsed into segments, rendered as Hono path
patterns, and ordered so specific routes register before general ones.
"""

from hono_router.routing.ordering import (
    compare_paths,
    compare_routes,
    compare_targets,
    path_sort_key,
    sort_imports,
    sort_paths,
    sort_routes,
)
from hono_router.routing.route import (
    DiscoveredRoute,
    HandlerShape,
    ModuleImport,
    RouteSegment,
    SegmentKind,
)
from hono_router.routing.segments import (
    build_router_path,
    build_segments,
    parse_segment,
    sanitize_identifier,
    segment_fragment,
)

__all__ = [
    "DiscoveredRoute",
    "HandlerShape",
    "ModuleImport",
    "RouteSegment",
    "SegmentKind",
    "build_router_path",
    "build_segments",
    "compare_paths",
    "compare_routes",
    "compare_targets",
    "parse_segment",
    "path_sort_key",
    "sanitize_identifier",
    "segment_fragment",
    "sort_imports",
    "sort_paths",
    "sort_routes",
]
