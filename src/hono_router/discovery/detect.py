"""Handler export detection.

Decides which HTTP-method handlers a route file exports by matching
patterns against its raw text.  Nothing is parsed or evaluated, so an
export written inside a comment or string literal is still reported.

Conventions::

    export const onRequestGet = (c) => c.text("hi")            # direct
    export const onRequestPost = factory.createHandlers(...)    # factory
"""

import re
from typing import Protocol

from hono_router.discovery.types import DetectedExport
from hono_router.routing.route import HandlerShape

# (router method, exported identifier) in registration order
HTTP_METHODS: tuple[tuple[str, str], ...] = (
    ("get", "onRequestGet"),
    ("put", "onRequestPut"),
    ("post", "onRequestPost"),
    ("delete", "onRequestDelete"),
    ("patch", "onRequestPatch"),
)

DEFAULT_FACTORY_HELPER = "createHandlers"


class ExportDetector(Protocol):
    """Anything that can classify the handler exports of a source text."""

    def detect(self, source: str) -> tuple[DetectedExport, ...]: ...


class PatternExportDetector:
    """Default detector: text containment plus one regex per method.

    Usage::

        detector = PatternExportDetector()
        detector.detect("export const onRequestGet = () => {}")
        # (DetectedExport("get", "onRequestGet", HandlerShape.DIRECT),)
    """

    __slots__ = ("_factory_patterns", "_methods")

    def __init__(
        self,
        factory_helper: str = DEFAULT_FACTORY_HELPER,
        methods: tuple[tuple[str, str], ...] = HTTP_METHODS,
    ) -> None:
        self._methods = methods
        helper = re.escape(factory_helper)
        self._factory_patterns = {
            export_name: re.compile(
                rf"export\s+const\s+{re.escape(export_name)}\b[^=\n]*="
                rf"\s*(?:[\w$]+\s*\.\s*)*{helper}\s*\("
            )
            for _, export_name in methods
        }

    def detect(self, source: str) -> tuple[DetectedExport, ...]:
        found: list[DetectedExport] = []
        for method, export_name in self._methods:
            if self._factory_patterns[export_name].search(source):
                shape = HandlerShape.FACTORY
            elif f"export const {export_name}" in source:
                shape = HandlerShape.DIRECT
            else:
                continue
            found.append(DetectedExport(method=method, export_name=export_name, shape=shape))
        return tuple(found)


def detect_exports(
    source: str,
    *,
    factory_helper: str = DEFAULT_FACTORY_HELPER,
) -> tuple[DetectedExport, ...]:
    """Detect handler exports with the default pattern detector."""
    return PatternExportDetector(factory_helper).detect(source)
