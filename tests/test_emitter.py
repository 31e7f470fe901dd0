"""Tests for hono_router.codegen.emitter — router module rendering."""

from pathlib import Path

from hono_router.codegen.emitter import format_registration, render_module, write_module
from hono_router.routing.route import DiscoveredRoute, HandlerShape, ModuleImport
from hono_router.routing.segments import build_segments


def _route(
    path: str,
    alias: str,
    *,
    method: str = "get",
    export_name: str = "onRequestGet",
    shape: HandlerShape = HandlerShape.DIRECT,
) -> DiscoveredRoute:
    return DiscoveredRoute(
        method=method,
        segments=build_segments([p for p in path.split("/") if p]),
        module_alias=alias,
        export_name=export_name,
        shape=shape,
    )


class TestFormatRegistration:
    def test_direct(self) -> None:
        route = _route("/users/[user_id]", "users_user_id")
        assert format_registration(route) == "app.get('/users/:user_id', users_user_id.onRequestGet);"

    def test_factory_is_spread(self) -> None:
        route = _route("/about-this", "about_this", shape=HandlerShape.FACTORY)
        assert format_registration(route) == "app.get('/about-this', ...about_this.onRequestGet);"

    def test_method(self) -> None:
        route = _route("/api", "api", method="delete", export_name="onRequestDelete")
        assert format_registration(route) == "app.delete('/api', api.onRequestDelete);"

    def test_quote_in_path_is_escaped(self) -> None:
        route = _route("/it's", "its")
        assert format_registration(route).startswith("app.get('/it\\'s', ")


class TestRenderModule:
    def test_full_module(self) -> None:
        imports = [
            ModuleImport("index", "./routes"),
            ModuleImport("about_this", "./routes/about-this"),
            ModuleImport("users_user_id", "./routes/users/[user_id]"),
        ]
        routes = [
            _route("/", "index"),
            _route("/about-this", "about_this", shape=HandlerShape.FACTORY),
            _route("/users/[user_id]", "users_user_id"),
            _route("/users/[user_id]", "users_user_id", method="post", export_name="onRequestPost"),
        ]
        source = render_module(imports, routes)

        assert "import { Hono, Env } from 'hono';" in source
        assert (
            "import * as index from './routes';\n"
            "import * as about_this from './routes/about-this';\n"
            "import * as users_user_id from './routes/users/[user_id]';"
        ) in source
        assert "export const loadRoutes = <T extends Env>(app: Hono<T>) => {" in source
        assert (
            "\tapp.get('/', index.onRequestGet);\n"
            "\tapp.get('/about-this', ...about_this.onRequestGet);\n"
            "\tapp.get('/users/:user_id', users_user_id.onRequestGet);\n"
            "\tapp.post('/users/:user_id', users_user_id.onRequestPost);\n"
            "};"
        ) in source

    def test_catch_all_braces_survive_rendering(self) -> None:
        source = render_module([], [_route("/files/[[path]]", "files_path")])
        assert "app.get('/files/:path{.+}', files_path.onRequestGet);" in source

    def test_no_html_escaping(self) -> None:
        source = render_module([ModuleImport("a", "./routes/a")], [])
        assert "&#39;" not in source
        assert "&lt;" not in source

    def test_empty(self) -> None:
        source = render_module([], [])
        assert "export const loadRoutes" in source
        assert "app." not in source


class TestWriteModule:
    def test_overwrites(self, tmp_path: Path) -> None:
        out = tmp_path / "router.ts"
        out.write_text("old contents that are much longer than the new ones", encoding="utf-8")
        write_module(out, "new")
        assert out.read_text(encoding="utf-8") == "new"


class TestImportStatement:
    def test_plain(self) -> None:
        assert ModuleImport("users", "./routes/users").statement == "import * as users from './routes/users';"

    def test_quote_in_target_is_escaped(self) -> None:
        statement = ModuleImport("its", "./routes/it's").statement
        assert statement == "import * as its from './routes/it\\'s';"
