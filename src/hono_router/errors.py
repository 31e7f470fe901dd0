"""hono-router exception hierarchy.

Shared across discovery, code generation and the CLI so every module
raises and catches the same types.
"""


class HonoRouterError(Exception):
    """Base for all hono-router errors."""


class ConfigurationError(HonoRouterError):
    """Raised when generator configuration is invalid.

    Typically raised from ``GeneratorConfig.__post_init__`` before any
    file is read.
    """


class RoutesDirectoryNotFound(HonoRouterError, FileNotFoundError):  # noqa: N818
    """The routes directory to scan does not exist or is not a directory."""

    def __init__(self, path: object) -> None:
        super().__init__(f"Routes directory not found: {path}")
        self.path = path
