"""The committed example router matches a fresh generation of its routes tree."""

import io
import shutil
from pathlib import Path

from hono_router.config import GeneratorConfig
from hono_router.generate import generate_routes
from hono_router.terminal import Palette

EXAMPLE_DIR = Path(__file__).resolve().parent.parent / "examples" / "basic"


def _lines(text: str) -> list[str]:
    return [line.rstrip() for line in text.splitlines() if line.strip()]


class TestBasicExample:
    def test_router_is_up_to_date(self, tmp_path: Path) -> None:
        project = tmp_path / "basic"
        shutil.copytree(EXAMPLE_DIR, project)
        output = project / "router.ts"
        output.unlink()

        generate_routes(
            GeneratorConfig(project / "routes", output),
            palette=Palette(enabled=False),
            out=io.StringIO(),
        )

        expected = (EXAMPLE_DIR / "router.ts").read_text(encoding="utf-8")
        assert _lines(output.read_text(encoding="utf-8")) == _lines(expected)

    def test_component_is_not_a_route(self) -> None:
        assert (EXAMPLE_DIR / "routes" / "users" / "UserCard.tsx").is_file()
        assert "UserCard" not in (EXAMPLE_DIR / "router.ts").read_text(encoding="utf-8")
