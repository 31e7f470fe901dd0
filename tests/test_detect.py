"""Tests for hono_router.discovery.detect — textual handler export detection."""

from hono_router.discovery.detect import HTTP_METHODS, PatternExportDetector, detect_exports
from hono_router.discovery.types import DetectedExport
from hono_router.routing.route import HandlerShape


class TestDetectExports:
    def test_no_exports(self) -> None:
        assert detect_exports("const helper = () => console.log('helper');") == ()

    def test_single_direct(self) -> None:
        exports = detect_exports("export const onRequestGet = (c) => c.json({});")
        assert exports == (DetectedExport("get", "onRequestGet", HandlerShape.DIRECT),)

    def test_all_methods_in_declaration_order(self) -> None:
        source = "\n".join(
            f"export const {name} = (c) => c.text('{name}');"
            for name in ("onRequestPatch", "onRequestDelete", "onRequestPost", "onRequestPut", "onRequestGet")
        )
        exports = detect_exports(source)
        assert [e.method for e in exports] == ["get", "put", "post", "delete", "patch"]
        assert [e.export_name for e in exports] == [name for _, name in HTTP_METHODS]

    def test_file_order_does_not_matter(self) -> None:
        source = (
            "export const onRequestPost = async (c: Context) => {};\n"
            "export const onRequestGet = async (c: Context) => {};\n"
        )
        assert [e.method for e in detect_exports(source)] == ["get", "post"]

    def test_factory_via_qualified_helper(self) -> None:
        source = (
            "import { createFactory } from 'hono/factory'\n"
            "export const factory = createFactory();\n"
            "export const onRequestGet = factory.createHandlers(\n"
            "  async (c) => c.render(<div>About</div>)\n"
            ");\n"
        )
        (export,) = detect_exports(source)
        assert export.shape is HandlerShape.FACTORY

    def test_factory_via_bare_helper(self) -> None:
        source = (
            "const createHandlers = () => [(c) => c.json({ ok: true })];\n"
            "export const onRequestGet = createHandlers();\n"
        )
        (export,) = detect_exports(source)
        assert export.shape is HandlerShape.FACTORY

    def test_factory_with_type_annotation(self) -> None:
        source = "export const onRequestPost: Handler[] = factory.createHandlers(h);"
        assert detect_exports(source)[0].shape is HandlerShape.FACTORY

    def test_mixed_shapes(self) -> None:
        source = (
            "export const onRequestGet = factory.createHandlers(a);\n"
            "export const onRequestPost = (c) => c.json({});\n"
        )
        shapes = {e.method: e.shape for e in detect_exports(source)}
        assert shapes == {"get": HandlerShape.FACTORY, "post": HandlerShape.DIRECT}

    def test_helper_elsewhere_is_not_factory(self) -> None:
        source = (
            "export const onRequestGet = (c) => c.json({});\n"
            "const other = factory.createHandlers(x);\n"
        )
        assert detect_exports(source)[0].shape is HandlerShape.DIRECT

    def test_comment_is_a_false_positive(self) -> None:
        # Textual detection: commented-out exports still count
        exports = detect_exports("// export const onRequestDelete = ...")
        assert [e.method for e in exports] == ["delete"]

    def test_non_exported_handler_ignored(self) -> None:
        assert detect_exports("const onRequestGet = (c) => c.json({});") == ()

    def test_custom_factory_helper(self) -> None:
        source = "export const onRequestGet = makeChain(a, b);"
        assert detect_exports(source)[0].shape is HandlerShape.DIRECT
        assert detect_exports(source, factory_helper="makeChain")[0].shape is HandlerShape.FACTORY


class TestPatternExportDetector:
    def test_reusable(self) -> None:
        detector = PatternExportDetector()
        assert detector.detect("export const onRequestPut = h;")[0].method == "put"
        assert detector.detect("nothing here") == ()
