"""``hono-router generate`` — write the router module, optionally on every change.

Runs one generation pass unconditionally.  With ``--watch`` it then
polls the routes directory and re-runs a full pass for every reported
change until interrupted.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable
from typing import IO

from hono_router.config import GeneratorConfig
from hono_router.errors import ConfigurationError, HonoRouterError
from hono_router.generate import Regenerator, generate_routes
from hono_router.terminal import Palette, format_error
from hono_router.watch import Change, PollingWatcher


def run_generate(args: argparse.Namespace) -> None:
    """Generate ``args.output_file`` from ``args.routes_dir``.

    Exits with code 1 if the initial pass fails.
    """
    try:
        config = GeneratorConfig.from_args(args)
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    palette = Palette.for_stream(sys.stdout, enabled=config.color)

    # Snapshot before the first pass so edits made during it are seen
    watcher = None
    if config.watch and config.routes_path.is_dir():
        watcher = PollingWatcher(
            config.routes_path,
            interval=config.poll_interval,
            exclude=(config.output_path,),
        )

    try:
        generate_routes(config, palette=palette)
    except (OSError, HonoRouterError) as exc:
        print(format_error(str(exc), Palette.for_stream(sys.stderr, enabled=config.color)), file=sys.stderr)
        raise SystemExit(1) from exc

    if watcher is not None:
        watch_and_regenerate(config, watcher, palette=palette)


def watch_and_regenerate(
    config: GeneratorConfig,
    changes: Iterable[Change],
    *,
    palette: Palette,
    out: IO[str] | None = None,
) -> None:
    """Re-run a full generation pass for every change in *changes*.

    Returns when *changes* is exhausted or on Ctrl-C.
    """
    regenerate = Regenerator(config, palette=palette, out=out)
    c = palette
    print(f"{c.cyan}Watching for changes in {config.routes_dir}...{c.reset}", file=out)
    try:
        for change in changes:
            print(
                f"{c.green}Detected {change.kind.value} in {change.path}, "
                f"regenerating {config.output_path.name}...{c.reset}",
                file=out,
            )
            regenerate()
    except KeyboardInterrupt:
        print(f"{c.dim}Stopped watching.{c.reset}", file=out)
