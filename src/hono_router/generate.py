"""One generation pass: discover, sort, render, write.

Every pass rebuilds the route table from scratch; nothing is carried
over between passes.
"""

from __future__ import annotations

import logging
import threading
import time
from typing import IO

from hono_router.codegen.emitter import render_module, write_module
from hono_router.config import GeneratorConfig
from hono_router.discovery.detect import ExportDetector, PatternExportDetector
from hono_router.discovery.types import DiscoveryResult, RouteModule
from hono_router.discovery.walker import iter_route_modules
from hono_router.errors import HonoRouterError
from hono_router.terminal import Palette, format_generated, format_route

logger = logging.getLogger("hono_router.generate")


def generate_routes(
    config: GeneratorConfig,
    *,
    palette: Palette | None = None,
    out: IO[str] | None = None,
    detector: ExportDetector | None = None,
) -> DiscoveryResult:
    """Run one full generation pass and write ``config.output_file``.

    Each route is announced on *out* (stdout by default) as it is
    discovered.  File-system errors propagate to the caller.

    Returns:
        The sorted :class:`DiscoveryResult` that was written.
    """
    palette = palette or Palette.for_stream(out, enabled=config.color)
    detector = detector or PatternExportDetector(config.factory_helper)
    started = time.perf_counter()

    modules: list[RouteModule] = []
    for module in iter_route_modules(
        config.routes_path,
        config.output_path,
        deno=config.deno,
        extensions=config.extensions,
        index_name=config.index_name,
        detector=detector,
    ):
        modules.append(module)
        for route in module.routes:
            print(format_route(route, palette), file=out)

    result = DiscoveryResult.from_modules(modules).sorted()
    write_module(config.output_path, render_module(result.imports, result.routes))

    print(format_generated(config.output_file, len(result.routes), palette), file=out)
    logger.debug(
        "Generated %d routes from %d modules in %.1fms",
        len(result.routes),
        len(result.imports),
        (time.perf_counter() - started) * 1000,
    )
    return result


class Regenerator:
    """Serialised generation passes for watch mode.

    A failed pass is logged and reported as ``None``; the next change
    event triggers a fresh full attempt.
    """

    __slots__ = ("_config", "_detector", "_lock", "_out", "_palette")

    def __init__(
        self,
        config: GeneratorConfig,
        *,
        palette: Palette | None = None,
        out: IO[str] | None = None,
        detector: ExportDetector | None = None,
    ) -> None:
        self._config = config
        self._palette = palette
        self._out = out
        self._detector = detector
        self._lock = threading.Lock()

    def __call__(self) -> DiscoveryResult | None:
        with self._lock:
            try:
                return generate_routes(
                    self._config,
                    palette=self._palette,
                    out=self._out,
                    detector=self._detector,
                )
            except (OSError, HonoRouterError):
                logger.exception("Route generation failed for %s", self._config.routes_dir)
                return None
