"""File-system route discovery.

The routes directory structure defines URL paths; each route file's
``onRequest<Method>`` exports define the handlers.

Conventions::

    routes/
      index.ts             # /
      about-this.tsx       # /about-this
      UserCard.tsx         # ignored (component)
      users/
        index.ts           # /users
        [id].ts            # /users/:id
      docs/
        [...slug].ts       # /docs/:slug{.*}
      files/
        [[path]].ts        # /files/:path{.+}
"""

from hono_router.discovery.detect import (
    HTTP_METHODS,
    ExportDetector,
    PatternExportDetector,
    detect_exports,
)
from hono_router.discovery.types import DetectedExport, DiscoveryResult, RouteModule
from hono_router.discovery.walker import discover_routes, iter_route_modules

__all__ = [
    "HTTP_METHODS",
    "DetectedExport",
    "DiscoveryResult",
    "ExportDetector",
    "PatternExportDetector",
    "RouteModule",
    "detect_exports",
    "discover_routes",
    "iter_route_modules",
]
