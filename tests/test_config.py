"""Tests for hono_router.config — GeneratorConfig validation."""

import argparse
from pathlib import Path

import pytest

from hono_router.config import GeneratorConfig
from hono_router.errors import ConfigurationError


class TestGeneratorConfig:
    def test_defaults(self) -> None:
        config = GeneratorConfig("routes", "router.ts")
        assert config.watch is False
        assert config.deno is False
        assert config.extensions == (".ts", ".tsx")
        assert config.index_name == "index"
        assert config.factory_helper == "createHandlers"
        assert config.routes_path == Path("routes")
        assert config.output_path == Path("router.ts")

    def test_frozen(self) -> None:
        config = GeneratorConfig("routes", "router.ts")
        with pytest.raises(AttributeError):
            config.watch = True  # type: ignore[misc]

    def test_rejects_non_positive_poll_interval(self) -> None:
        with pytest.raises(ConfigurationError, match="poll_interval"):
            GeneratorConfig("routes", "router.ts", poll_interval=0)

    def test_rejects_extension_without_dot(self) -> None:
        with pytest.raises(ConfigurationError, match="start with"):
            GeneratorConfig("routes", "router.ts", extensions=("ts",))

    def test_rejects_empty_extensions(self) -> None:
        with pytest.raises(ConfigurationError):
            GeneratorConfig("routes", "router.ts", extensions=())

    def test_rejects_empty_index_name(self) -> None:
        with pytest.raises(ConfigurationError):
            GeneratorConfig("routes", "router.ts", index_name="")

    def test_from_args(self) -> None:
        args = argparse.Namespace(
            routes_dir="src/routes",
            output_file="src/router.ts",
            watch=True,
            deno=True,
            poll_interval=2.0,
            no_color=True,
        )
        config = GeneratorConfig.from_args(args)
        assert config.routes_dir == "src/routes"
        assert config.output_file == "src/router.ts"
        assert config.watch is True
        assert config.deno is True
        assert config.poll_interval == 2.0
        assert config.color is False
