"""``hono-router routes`` — list discovered routes.

Walks a routes directory and prints the routes in registration order
with method, path, and handler info.  Nothing is written.
"""

import argparse
import sys

from hono_router.discovery.walker import discover_routes
from hono_router.errors import HonoRouterError


def run_routes(args: argparse.Namespace) -> None:
    """List the routes discovered under ``args.routes_dir``."""
    try:
        result = discover_routes(args.routes_dir, deno=args.deno).sorted()
    except (OSError, HonoRouterError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    if not result.routes:
        print("No routes discovered.")
        return

    # Build rows: (method, path, handler)
    rows: list[tuple[str, str, str]] = []
    for route in result.routes:
        handler = route.handler
        if route.is_factory:
            handler = f"{handler} (factory)"
        rows.append((route.method.upper(), route.path, handler))

    # Column widths
    max_method = max(max(len(r[0]) for r in rows), 6)  # "METHOD" header
    max_path = max(max(len(r[1]) for r in rows), 4)  # "PATH" header

    fmt = f"{{:<{max_method}}}  {{:<{max_path}}}  {{}}"
    print(fmt.format("METHOD", "PATH", "HANDLER"))
    sep_len = max_method + max_path + 4 + max(len(r[2]) for r in rows)
    print("-" * min(sep_len, 80))
    for method, path, handler in rows:
        print(fmt.format(method, path, handler))
