"""Data models for file-system route discovery.

Immutable frozen dataclasses built once per generation pass and
discarded after the output module is written.
"""

from collections.abc import Sequence
from dataclasses import dataclass

from hono_router.routing.ordering import sort_imports, sort_routes
from hono_router.routing.route import DiscoveredRoute, HandlerShape, ModuleImport


@dataclass(frozen=True, slots=True)
class DetectedExport:
    """An HTTP-method handler exported by a route file.

    Attributes:
        method: Lowercase router method (``"get"``, ``"post"``, ...).
        export_name: Exported identifier (``"onRequestGet"``, ...).
        shape: Whether the export is a single handler or a factory
            producing a sequence of handlers.
    """

    method: str
    export_name: str
    shape: HandlerShape = HandlerShape.DIRECT


@dataclass(frozen=True, slots=True)
class RouteModule:
    """A route file: its import statement and the routes it exports."""

    module_import: ModuleImport
    routes: tuple[DiscoveredRoute, ...]


@dataclass(frozen=True, slots=True)
class DiscoveryResult:
    """Everything discovered under one routes directory.

    ``imports`` holds one entry per route file, ``routes`` one entry per
    exported handler, both in discovery order until :meth:`sorted` is
    called.
    """

    imports: tuple[ModuleImport, ...] = ()
    routes: tuple[DiscoveredRoute, ...] = ()

    @classmethod
    def from_modules(cls, modules: Sequence[RouteModule]) -> "DiscoveryResult":
        return cls(
            imports=tuple(m.module_import for m in modules),
            routes=tuple(route for m in modules for route in m.routes),
        )

    def sorted(self) -> "DiscoveryResult":
        """Return a copy with imports and routes each in priority order."""
        return DiscoveryResult(
            imports=tuple(sort_imports(self.imports)),
            routes=tuple(sort_routes(self.routes)),
        )
