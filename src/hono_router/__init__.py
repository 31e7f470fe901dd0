"""hono-router — Hono route tables from file-system routes.

Scans a routes directory, detects ``onRequest<Method>`` handler exports,
and writes a TypeScript module that registers every route on a Hono app,
most specific paths first.

Basic usage::

    from hono_router import GeneratorConfig, generate_routes

    generate_routes(GeneratorConfig("src/routes", "src/router.ts"))

Or from the command line::

    hono-router generate src/routes src/router.ts --watch
"""

from hono_router.config import GeneratorConfig
from hono_router.discovery import DiscoveryResult, discover_routes
from hono_router.errors import ConfigurationError, HonoRouterError, RoutesDirectoryNotFound
from hono_router.generate import generate_routes

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "DiscoveryResult",
    "GeneratorConfig",
    "HonoRouterError",
    "RoutesDirectoryNotFound",
    "__version__",
    "discover_routes",
    "generate_routes",
]
