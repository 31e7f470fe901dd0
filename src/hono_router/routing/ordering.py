"""Route ordering — most specific patterns first.

Paths are compared segment by segment.  At the first position where two
paths differ:

1. A static segment precedes a parametric one.
2. A bounded parameter (``:id``) precedes an unbounded one
   (``:path{.+}``, ``:rest{.*}``).
3. Otherwise the segments compare lexicographically.

A missing trailing segment compares as the empty string, which is static,
so ``/users`` sorts before ``/users/:id``.  Equal paths keep their
discovery order (``sorted`` is stable).

Import targets use bracket syntax instead of router syntax.  They are
ordered by the same rules, with each segment classified the way the
segment transformer classifies file names, so ``[a][b]`` stays static.
"""

import re
from collections.abc import Callable, Iterable
from functools import cmp_to_key

from hono_router.routing.route import DiscoveredRoute, ModuleImport, SegmentKind
from hono_router.routing.segments import parse_segment

# Segment ranks
_STATIC = 0
_BOUNDED = 1
_UNBOUNDED = 2

_UNBOUNDED_MARKERS = ("{.+}", "{.*}")

_KIND_RANKS = {
    SegmentKind.STATIC: _STATIC,
    SegmentKind.DYNAMIC: _BOUNDED,
    SegmentKind.CATCH_ALL_ONE_OR_MORE: _UNBOUNDED,
    SegmentKind.CATCH_ALL_ZERO_OR_MORE: _UNBOUNDED,
}

# Deno targets keep the source extension: [id].ts
_EXTENSION_RE = re.compile(r"(?<=\])\.\w+$")


def segment_rank(segment: str) -> int:
    """Rank a router path segment (``users``, ``:id``, ``:path{.+}``)."""
    if not segment.startswith(":"):
        return _STATIC
    if segment.endswith(_UNBOUNDED_MARKERS):
        return _UNBOUNDED
    return _BOUNDED


def target_segment_rank(segment: str) -> int:
    """Rank an import target segment (``users``, ``[id]``, ``[[path]].ts``)."""
    kind = parse_segment(_EXTENSION_RE.sub("", segment)).kind
    return _KIND_RANKS[kind]


def compare_paths(a: str, b: str) -> int:
    """Three-way comparison of two router paths: negative if *a* sorts first."""
    return _compare(_ranked(a, segment_rank), _ranked(b, segment_rank))


def compare_targets(a: str, b: str) -> int:
    """Three-way comparison of two import targets: negative if *a* sorts first."""
    return _compare(_ranked(a, target_segment_rank), _ranked(b, target_segment_rank))


def compare_routes(a: DiscoveredRoute, b: DiscoveredRoute) -> int:
    """Compare routes by their parsed segments rather than the rendered path."""
    return _compare(_route_ranked(a), _route_ranked(b))


# (rank, text) per position; the leading "" stands for the root
_Ranked = list[tuple[int, str]]


def _ranked(path: str, rank: Callable[[str], int]) -> _Ranked:
    return [(rank(part), part) for part in path.split("/")]


def _route_ranked(route: DiscoveredRoute) -> _Ranked:
    ranked = [(_STATIC, "")]
    ranked.extend((_KIND_RANKS[seg.kind], seg.fragment) for seg in route.segments)
    return ranked


def _compare(a: _Ranked, b: _Ranked) -> int:
    for i in range(max(len(a), len(b))):
        a_rank, a_part = a[i] if i < len(a) else (_STATIC, "")
        b_rank, b_part = b[i] if i < len(b) else (_STATIC, "")
        if a_rank != b_rank:
            return -1 if a_rank < b_rank else 1
        if a_part != b_part:
            return -1 if a_part < b_part else 1
    return 0


path_sort_key = cmp_to_key(compare_paths)
route_sort_key = cmp_to_key(compare_routes)
target_sort_key = cmp_to_key(compare_targets)


def sort_paths(paths: Iterable[str]) -> list[str]:
    return sorted(paths, key=path_sort_key)


def sort_routes(routes: Iterable[DiscoveredRoute]) -> list[DiscoveredRoute]:
    """Sort routes by path; routes sharing a path keep discovery order."""
    return sorted(routes, key=route_sort_key)


def sort_imports(imports: Iterable[ModuleImport]) -> list[ModuleImport]:
    """Sort imports by target; same precedence rules as routes."""
    return sorted(imports, key=lambda i: target_sort_key(i.target))
