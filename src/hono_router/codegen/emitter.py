"""Router module emission.

Renders sorted imports and route registrations into the TypeScript
module consumed by the application::

    import { loadRoutes } from './router';

    const app = new Hono();
    loadRoutes(app);
"""

from collections.abc import Sequence
from pathlib import Path

from kida import Environment

from hono_router.codegen._templates import ROUTER_MODULE_TS
from hono_router.routing.route import DiscoveredRoute, ModuleImport, ts_string


def create_environment() -> Environment:
    """Kida environment for code templates (no HTML escaping)."""
    return Environment(autoescape=False)


def format_registration(route: DiscoveredRoute) -> str:
    """``app.get('/users/:id', users_id.onRequestGet);``

    Factory exports hold a sequence of handlers and are spread into the
    call.
    """
    handler = f"...{route.handler}" if route.is_factory else route.handler
    return f"app.{route.method}({ts_string(route.path)}, {handler});"


def render_module(
    imports: Sequence[ModuleImport],
    routes: Sequence[DiscoveredRoute],
    *,
    env: Environment | None = None,
) -> str:
    """Render the router module source.

    *imports* and *routes* are emitted in the order given; sort them
    first (see :meth:`DiscoveryResult.sorted`).
    """
    env = env or create_environment()
    template = env.from_string(ROUTER_MODULE_TS)
    return template.render(
        {
            "imports": "\n".join(i.statement for i in imports),
            "registrations": "\n\t".join(format_registration(r) for r in routes),
        }
    )


def write_module(output_file: str | Path, source: str) -> Path:
    """Write *source* to *output_file*, replacing any previous contents."""
    path = Path(output_file)
    path.write_text(source, encoding="utf-8")
    return path
