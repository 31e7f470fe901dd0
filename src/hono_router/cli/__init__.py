"""hono-router CLI — route table generation for Hono file-system routes.

Entry point registered as ``hono-router`` in ``pyproject.toml``::

    [project.scripts]
    hono-router = "hono_router.cli:main"
"""

import argparse
import logging
import sys


def _positive_float(value: str) -> float:
    number = float(value)
    if number <= 0:
        msg = f"must be positive, got {value}"
        raise argparse.ArgumentTypeError(msg)
    return number


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``hono-router`` command."""
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug details (skipped files, pass timings)",
    )
    common.add_argument(
        "--deno",
        action="store_true",
        help="Keep file extensions and index stems in import paths (Deno)",
    )

    parser = argparse.ArgumentParser(
        prog="hono-router",
        description="hono-router — generate a Hono route table from a routes directory.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- hono-router generate ---------------------------------------------
    generate_parser = subparsers.add_parser(
        "generate",
        parents=[common],
        help="Generate the router module",
    )
    generate_parser.add_argument("routes_dir", help="Root of the routes directory tree")
    generate_parser.add_argument("output_file", help="Path of the generated router module")
    generate_parser.add_argument(
        "-w",
        "--watch",
        action="store_true",
        help="Regenerate whenever a file under routes_dir changes",
    )
    generate_parser.add_argument(
        "--poll-interval",
        type=_positive_float,
        default=0.5,
        help="Seconds between change polls in watch mode (default: 0.5)",
    )
    generate_parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable ANSI colors in diagnostic output",
    )

    # -- hono-router routes -----------------------------------------------
    routes_parser = subparsers.add_parser(
        "routes",
        parents=[common],
        help="List discovered routes without writing anything",
    )
    routes_parser.add_argument("routes_dir", help="Root of the routes directory tree")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_usage(sys.stderr)
        print("hono-router: error: a command is required", file=sys.stderr)
        sys.exit(2)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "generate":
        from hono_router.cli._generate import run_generate

        run_generate(args)
    elif args.command == "routes":
        from hono_router.cli._routes import run_routes

        run_routes(args)
