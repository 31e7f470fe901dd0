"""Shared fixtures: a temporary routes tree and an output path."""

from collections.abc import Callable
from pathlib import Path

import pytest

GET_HANDLER = "export const onRequestGet = (c) => c.json({ ok: true });\n"


@pytest.fixture
def routes_dir(tmp_path: Path) -> Path:
    path = tmp_path / "routes"
    path.mkdir()
    return path


@pytest.fixture
def output_file(tmp_path: Path) -> Path:
    return tmp_path / "router.ts"


@pytest.fixture
def write_route(routes_dir: Path) -> Callable[..., Path]:
    """Write a file under the routes tree, creating parent directories."""

    def _write(relative: str, content: str = GET_HANDLER) -> Path:
        path = routes_dir / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write
