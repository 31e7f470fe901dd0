"""Terminal formatting for generator diagnostics.

Produces the colored lines printed while routes are discovered and
written.  Respects TTY detection — no ANSI codes when piped or
redirected.

Example output (with color)::

    GET     /                  index.onRequestGet
    GET     /about-this        about_this.onRequestGet  factory
    POST    /users/:user_id    users_user_id.onRequestPost
    Routes generated in src/router.ts
"""

from __future__ import annotations

import sys
from typing import IO, TYPE_CHECKING

if TYPE_CHECKING:
    from hono_router.routing.route import DiscoveredRoute


def use_color(stream: object | None = None) -> bool:
    """True if the output stream supports ANSI color."""
    s = stream or sys.stdout
    try:
        return s.isatty()  # type: ignore[union-attr]
    except (AttributeError, ValueError):
        return False


_ANSI_CODES: dict[str, str] = {
    "reset": "\033[0m",
    "bold": "\033[1m",
    "dim": "\033[2m",
    "red": "\033[31m",  # errors
    "green": "\033[32m",  # change events
    "yellow": "\033[33m",  # factory tag
    "blue": "\033[34m",  # methods
    "magenta": "\033[35m",  # summary
    "cyan": "\033[36m",  # watch banner
}


class Palette:
    """ANSI escape sequences — empty strings when color is disabled."""

    __slots__ = tuple(_ANSI_CODES)

    reset: str
    bold: str
    dim: str
    red: str
    green: str
    yellow: str
    blue: str
    magenta: str
    cyan: str

    def __init__(self, *, enabled: bool) -> None:
        for name, code in _ANSI_CODES.items():
            setattr(self, name, code if enabled else "")

    @classmethod
    def for_stream(cls, stream: IO[str] | None = None, *, enabled: bool | None = None) -> Palette:
        """Palette for *stream*; ``enabled=None`` auto-detects a TTY."""
        if enabled is None:
            enabled = use_color(stream)
        return cls(enabled=enabled)


def format_route(route: DiscoveredRoute, c: Palette) -> str:
    """One diagnostic line for a discovered route."""
    line = f"  {c.blue}{c.bold}{route.method.upper():<7}{c.reset} {route.path}  {c.dim}{route.handler}{c.reset}"
    if route.is_factory:
        line += f"  {c.yellow}factory{c.reset}"
    return line


def format_generated(output_file: object, count: int, c: Palette) -> str:
    noun = "route" if count == 1 else "routes"
    return f"{c.magenta}Routes generated in {output_file}{c.reset} {c.dim}({count} {noun}){c.reset}"


def format_error(message: str, c: Palette) -> str:
    return f"{c.red}{c.bold}Error:{c.reset} {message}"
