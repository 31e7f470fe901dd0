"""Generator configuration.

GeneratorConfig is a frozen dataclass — immutable after creation, built
once per CLI invocation and passed to every generation pass.
"""

import argparse
from dataclasses import dataclass
from pathlib import Path

from hono_router.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class GeneratorConfig:
    """Generator configuration. Immutable after creation.

    Only the two paths are required::

        config = GeneratorConfig(routes_dir="src/routes", output_file="src/router.ts")
    """

    # Input / output
    routes_dir: str | Path
    output_file: str | Path

    # Modes
    watch: bool = False
    deno: bool = False  # Keep extensions and index stems in import targets

    # File-system routing conventions
    extensions: tuple[str, ...] = (".ts", ".tsx")
    index_name: str = "index"
    factory_helper: str = "createHandlers"

    # Watch mode
    poll_interval: float = 0.5

    # Diagnostics (None = auto-detect TTY)
    color: bool | None = None

    def __post_init__(self) -> None:
        if self.poll_interval <= 0:
            msg = f"poll_interval must be positive, got {self.poll_interval!r}"
            raise ConfigurationError(msg)
        if not self.extensions:
            msg = "At least one source extension is required."
            raise ConfigurationError(msg)
        for ext in self.extensions:
            if not ext.startswith("."):
                msg = f"Extensions must start with '.', got {ext!r}"
                raise ConfigurationError(msg)
        if not self.index_name:
            msg = "index_name must not be empty."
            raise ConfigurationError(msg)

    @property
    def routes_path(self) -> Path:
        return Path(self.routes_dir)

    @property
    def output_path(self) -> Path:
        return Path(self.output_file)

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "GeneratorConfig":
        """Build a config from parsed ``hono-router generate`` arguments."""
        return cls(
            routes_dir=args.routes_dir,
            output_file=args.output_file,
            watch=getattr(args, "watch", False),
            deno=getattr(args, "deno", False),
            poll_interval=getattr(args, "poll_interval", 0.5),
            color=False if getattr(args, "no_color", False) else None,
        )
