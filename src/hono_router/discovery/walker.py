"""File-system route discovery for a routes directory.

Walks the routes tree depth-first, in name order, and discovers:
- ``.ts`` / ``.tsx`` files exporting ``onRequest<Method>`` handlers
- one import per route file, one route per exported handler

Directory and file names in ``[brackets]`` become path parameters.
``index.ts`` maps to the directory URL; other files append their stem
to the path.  Files whose name starts with an uppercase letter are
components, never routes.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from pathlib import Path

from hono_router.discovery.detect import ExportDetector, PatternExportDetector
from hono_router.discovery.types import DiscoveryResult, RouteModule
from hono_router.errors import RoutesDirectoryNotFound
from hono_router.routing.route import DiscoveredRoute, ModuleImport
from hono_router.routing.segments import (
    DEFAULT_INDEX_NAME,
    build_segments,
    sanitize_identifier,
)

logger = logging.getLogger("hono_router.discovery")

DEFAULT_EXTENSIONS = (".ts", ".tsx")


def discover_routes(
    routes_dir: str | Path,
    output_file: str | Path | None = None,
    *,
    deno: bool = False,
    extensions: tuple[str, ...] = DEFAULT_EXTENSIONS,
    index_name: str = DEFAULT_INDEX_NAME,
    detector: ExportDetector | None = None,
) -> DiscoveryResult:
    """Walk a routes directory and discover all routes.

    Args:
        routes_dir: Root of the route tree.
        output_file: Where the generated module will be written.  Import
            targets are made relative to its directory (the routes
            directory itself when omitted).
        deno: Keep file extensions and ``index`` stems in import targets.
        extensions: Source file suffixes considered route candidates.
        index_name: File stem that maps to its directory's own path.
        detector: Export detector; defaults to :class:`PatternExportDetector`.

    Returns:
        A :class:`DiscoveryResult` in discovery order.

    Raises:
        RoutesDirectoryNotFound: If *routes_dir* is not a directory.
    """
    modules = tuple(
        iter_route_modules(
            routes_dir,
            output_file,
            deno=deno,
            extensions=extensions,
            index_name=index_name,
            detector=detector,
        )
    )
    return DiscoveryResult.from_modules(modules)


def iter_route_modules(
    routes_dir: str | Path,
    output_file: str | Path | None = None,
    *,
    deno: bool = False,
    extensions: tuple[str, ...] = DEFAULT_EXTENSIONS,
    index_name: str = DEFAULT_INDEX_NAME,
    detector: ExportDetector | None = None,
) -> Iterator[RouteModule]:
    """Yield each route file as it is found.  See :func:`discover_routes`."""
    root = Path(routes_dir)
    if not root.is_dir():
        raise RoutesDirectoryNotFound(root)

    yield from _walk_directory(
        root,
        root,
        parts=(),
        output_dir=Path(output_file).parent if output_file is not None else root,
        deno=deno,
        extensions=extensions,
        index_name=index_name,
        detector=detector or PatternExportDetector(),
    )


def _walk_directory(
    directory: Path,
    root: Path,
    *,
    parts: tuple[str, ...],
    output_dir: Path,
    deno: bool,
    extensions: tuple[str, ...],
    index_name: str,
    detector: ExportDetector,
) -> Iterator[RouteModule]:
    """Recursively walk a directory, yielding route modules in pre-order.

    Args:
        directory: Current directory being walked.
        root: Root routes directory (for computing import targets).
        parts: Path components from *root* to *directory*.
    """
    for entry in sorted(directory.iterdir()):
        if entry.is_dir():
            yield from _walk_directory(
                entry,
                root,
                parts=(*parts, entry.name),
                output_dir=output_dir,
                deno=deno,
                extensions=extensions,
                index_name=index_name,
                detector=detector,
            )
            continue

        if not entry.is_file() or entry.suffix not in extensions:
            continue
        if _is_capitalized(entry.name):
            logger.debug("Skipping component file %s", entry)
            continue

        module = _process_route_file(
            entry,
            root,
            parts=parts,
            output_dir=output_dir,
            deno=deno,
            index_name=index_name,
            detector=detector,
        )
        if module is not None:
            yield module


def _is_capitalized(name: str) -> bool:
    """True if *name* starts with an uppercase (cased) letter."""
    return bool(name) and name[0].isupper()


def _process_route_file(
    file: Path,
    root: Path,
    *,
    parts: tuple[str, ...],
    output_dir: Path,
    deno: bool,
    index_name: str,
    detector: ExportDetector,
) -> RouteModule | None:
    """Read a route file and build its import and routes.

    Returns None if the file exports no recognised handler.
    """
    source = file.read_text(encoding="utf-8")
    exports = detector.detect(source)
    if not exports:
        logger.debug("Skipping %s: no handler exports", file)
        return None

    stem_parts = (*parts, file.stem)
    alias = sanitize_identifier("/".join(stem_parts))
    segments = build_segments(stem_parts, index_name=index_name)

    if deno:
        target_parts = (*parts, file.name)
    elif stem_parts[-1] == index_name:
        target_parts = stem_parts[:-1]
    else:
        target_parts = stem_parts

    module_import = ModuleImport(
        alias=alias,
        target=_relative_import(root.joinpath(*target_parts), output_dir),
        source=file,
    )
    routes = tuple(
        DiscoveredRoute(
            method=export.method,
            segments=segments,
            module_alias=alias,
            export_name=export.export_name,
            shape=export.shape,
            source=file,
        )
        for export in exports
    )
    return RouteModule(module_import=module_import, routes=routes)


def _relative_import(module_path: Path, output_dir: Path) -> str:
    """Import specifier for *module_path* as seen from *output_dir*."""
    relative = os.path.relpath(module_path, output_dir).replace("\\", "/")
    if relative == ".":
        return "./"
    if relative.startswith("../"):
        return relative
    return f"./{relative}"
