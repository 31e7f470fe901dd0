"""Segment transformation for file-system routes.

Turns one directory or file-stem name into a :class:`RouteSegment` and
builds the router path and import alias for a whole relative path.

Bracket conventions, checked in order (first match wins)::

    [[...rest]]  -> :rest{.*}   zero or more components
    [...rest]    -> :rest{.*}   zero or more components
    [[path]]     -> :path{.+}   one or more components
    [id]         -> :id         exactly one component
    users        -> users       static
"""

import re
from collections.abc import Sequence

from hono_router.routing.route import RouteSegment, SegmentKind

DEFAULT_INDEX_NAME = "index"

# Order matters: the spread forms must be tried before the plain ones
_SEGMENT_RULES: tuple[tuple[re.Pattern[str], SegmentKind], ...] = (
    (re.compile(r"^\[\[\.\.\.([^\[\]/]+)\]\]$"), SegmentKind.CATCH_ALL_ZERO_OR_MORE),
    (re.compile(r"^\[\.\.\.([^\[\]/]+)\]$"), SegmentKind.CATCH_ALL_ZERO_OR_MORE),
    (re.compile(r"^\[\[([^\[\]/]+)\]\]$"), SegmentKind.CATCH_ALL_ONE_OR_MORE),
    (re.compile(r"^\[([^\[\]/]+)\]$"), SegmentKind.DYNAMIC),
)

# Characters that cannot appear in a TypeScript identifier
_SEPARATOR_RE = re.compile(r"[/\\@-]")

# [id], [[path]], [...slug], [[...rest]] -> bare name
_BRACKET_RE = re.compile(r"\[{1,2}(?:\.\.\.)?([^\[\]]+?)\]{1,2}")


def parse_segment(raw: str) -> RouteSegment:
    """Classify a single path component by its bracket syntax.

    Examples::

        parse_segment("users")     -> RouteSegment("users")
        parse_segment("[id]")      -> RouteSegment("[id]", SegmentKind.DYNAMIC, "id")
        parse_segment("[[...p]]")  -> RouteSegment("[[...p]]", SegmentKind.CATCH_ALL_ZERO_OR_MORE, "p")
    """
    for pattern, kind in _SEGMENT_RULES:
        match = pattern.match(raw)
        if match:
            return RouteSegment(raw=raw, kind=kind, name=match.group(1))
    return RouteSegment(raw=raw)


def segment_fragment(raw: str) -> str:
    """Router fragment for one path component."""
    return parse_segment(raw).fragment


def build_segments(
    parts: Sequence[str],
    *,
    index_name: str = DEFAULT_INDEX_NAME,
) -> tuple[RouteSegment, ...]:
    """Parse the components of a relative route path (extension stripped).

    A final component equal to *index_name* maps to its parent's path and
    contributes no segment.
    """
    parts = [p for p in parts if p]
    if parts and parts[-1] == index_name:
        parts = parts[:-1]
    return tuple(parse_segment(p) for p in parts)


def build_router_path(
    parts: Sequence[str],
    *,
    index_name: str = DEFAULT_INDEX_NAME,
) -> str:
    """Router path for a relative route path, e.g. ``["users", "[id]"]`` -> ``/users/:id``."""
    segments = build_segments(parts, index_name=index_name)
    return "/" + "/".join(seg.fragment for seg in segments)


def sanitize_identifier(relative_path: str) -> str:
    """Import alias for a relative route path (extension stripped).

    ``@special/-dash-file`` -> ``special__dash_file``,
    ``rest/[[...path]]`` -> ``rest_path``.

    Distinct paths may sanitize to the same alias; collisions are not
    detected.
    """
    ident = _SEPARATOR_RE.sub("_", relative_path)
    ident = _BRACKET_RE.sub(r"\1", ident)
    return ident.lstrip("_")
