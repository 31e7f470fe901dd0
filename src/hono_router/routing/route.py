"""RouteSegment, DiscoveredRoute and ModuleImport frozen dataclasses."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


def ts_string(value: str) -> str:
    """Single-quoted TypeScript string literal for *value*."""
    escaped = value.replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"


class SegmentKind(Enum):
    """How a path segment matches request path components."""

    STATIC = "static"
    DYNAMIC = "dynamic"
    CATCH_ALL_ONE_OR_MORE = "catch-all-one-or-more"
    CATCH_ALL_ZERO_OR_MORE = "catch-all-zero-or-more"


class HandlerShape(Enum):
    """How an exported handler is registered with the router.

    ``DIRECT`` exports are a single handler.  ``FACTORY`` exports come
    from a handler factory and hold a sequence of handlers, so they are
    spread into the registration call.
    """

    DIRECT = "direct"
    FACTORY = "factory"


@dataclass(frozen=True, slots=True)
class RouteSegment:
    """A parsed file-system path component.

    Static:       ``users``       (kind=STATIC, name=None)
    Dynamic:      ``[id]``        (kind=DYNAMIC, name="id")
    One or more:  ``[[path]]``    (kind=CATCH_ALL_ONE_OR_MORE, name="path")
    Zero or more: ``[...slug]``   (kind=CATCH_ALL_ZERO_OR_MORE, name="slug")
    """

    raw: str
    kind: SegmentKind = SegmentKind.STATIC
    name: str | None = None

    @property
    def is_param(self) -> bool:
        return self.kind is not SegmentKind.STATIC

    @property
    def fragment(self) -> str:
        """Router path fragment for this segment (``:id``, ``:path{.+}``, ...)."""
        match self.kind:
            case SegmentKind.DYNAMIC:
                return f":{self.name}"
            case SegmentKind.CATCH_ALL_ONE_OR_MORE:
                return f":{self.name}{{.+}}"
            case SegmentKind.CATCH_ALL_ZERO_OR_MORE:
                return f":{self.name}{{.*}}"
            case _:
                return self.raw


@dataclass(frozen=True, slots=True)
class DiscoveredRoute:
    """One exported HTTP handler bound to a derived router path.

    Created during tree traversal, consumed once by the emitter.
    """

    method: str
    segments: tuple[RouteSegment, ...]
    module_alias: str
    export_name: str
    shape: HandlerShape = HandlerShape.DIRECT
    source: Path | None = None

    @property
    def path(self) -> str:
        """Router path pattern, always starting with ``/``."""
        return "/" + "/".join(seg.fragment for seg in self.segments)

    @property
    def handler(self) -> str:
        return f"{self.module_alias}.{self.export_name}"

    @property
    def is_factory(self) -> bool:
        return self.shape is HandlerShape.FACTORY


@dataclass(frozen=True, slots=True)
class ModuleImport:
    """One generated ``import * as alias from 'target'`` statement."""

    alias: str
    target: str
    source: Path | None = None

    @property
    def statement(self) -> str:
        return f"import * as {self.alias} from {ts_string(self.target)};"
