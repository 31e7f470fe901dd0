"""Code generation — renders discovered routes as a Hono router module."""

from hono_router.codegen.emitter import (
    create_environment,
    format_registration,
    render_module,
    write_module,
)

__all__ = [
    "create_environment",
    "format_registration",
    "render_module",
    "write_module",
]
