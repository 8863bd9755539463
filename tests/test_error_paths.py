"""Error-path tests.

Conversion is all-or-nothing: unsupported nodes and over-deep trees abort
the render and no output is returned.
"""

import logging
from dataclasses import dataclass
from typing import ClassVar

import pytest

from tejido import render
from tejido.config import RenderConfig
from tejido.errors import (
    RenderDepthError,
    RenderError,
    TejidoError,
    UnsupportedNodeTypeError,
)
from tejido.nodes import (
    BlockQuote,
    Document,
    HorizontalRule,
    Node,
    Paragraph,
    Root,
    Text,
)
from tejido.renderers.html import HtmlRenderer


@dataclass(frozen=True, slots=True)
class Admonition(Node):
    children: tuple[Node, ...] = ()


@dataclass(frozen=True, slots=True)
class Widget(Node):
    tag: ClassVar[str] = "widget"


def _nested_quotes(depth: int) -> Root:
    """Root -> ``depth`` nested block quotes -> horizontal rule."""
    node: Node = HorizontalRule()
    for _ in range(depth):
        node = BlockQuote(children=(node,))
    return Root(children=(node,))


# =========================================================================
# Error hierarchy and formatting
# =========================================================================


class TestErrorFormatting:
    def test_unsupported_message(self) -> None:
        err = UnsupportedNodeTypeError("table")
        assert err.node_type == "table"
        assert "table" in str(err)
        assert "not implemented" in str(err)

    def test_depth_message(self) -> None:
        err = RenderDepthError(10, source_file="deep.md")
        assert err.max_depth == 10
        assert "deep.md" in str(err)
        assert "max_depth=10" in str(err)

    def test_depth_message_without_file(self) -> None:
        assert str(RenderDepthError(3)) == "tree nesting exceeds max_depth=3"

    def test_hierarchy(self) -> None:
        assert issubclass(UnsupportedNodeTypeError, RenderError)
        assert issubclass(RenderDepthError, RenderError)
        assert issubclass(RenderError, TejidoError)


# =========================================================================
# Unsupported node types
# =========================================================================


class TestUnsupportedNodeType:
    def test_unknown_node_subclass(self) -> None:
        root = Root(children=(Paragraph(children=(Text("a"),)), Admonition()))
        with pytest.raises(UnsupportedNodeTypeError) as exc_info:
            HtmlRenderer().render(root)
        assert exc_info.value.node_type == "Admonition"

    def test_tag_is_reported(self) -> None:
        with pytest.raises(UnsupportedNodeTypeError, match="widget"):
            render(Root(children=(Widget(),)))

    def test_deeply_nested_unknown(self) -> None:
        root = Root(
            children=(BlockQuote(children=(Paragraph(children=(Widget(),)),)),)  # type: ignore[arg-type]
        )
        with pytest.raises(UnsupportedNodeTypeError):
            render(root)

    def test_unknown_child_reported_before_unknown_parent(self) -> None:
        with pytest.raises(UnsupportedNodeTypeError) as exc_info:
            render(Root(children=(Admonition(children=(Widget(),)),)))  # type: ignore[arg-type]
        assert exc_info.value.node_type == "widget"

    def test_known_children_of_unknown_node_render_first(self) -> None:
        root = Root(children=(Admonition(children=(Paragraph(children=(Widget(),)),)),))  # type: ignore[arg-type]
        with pytest.raises(UnsupportedNodeTypeError) as exc_info:
            render(root)
        assert exc_info.value.node_type == "widget"

    def test_foreign_object(self) -> None:
        with pytest.raises(UnsupportedNodeTypeError) as exc_info:
            render(Root(children=("plain string",)))  # type: ignore[arg-type]
        assert exc_info.value.node_type == "str"

    def test_unknown_root(self) -> None:
        with pytest.raises(UnsupportedNodeTypeError):
            render(Widget())

    def test_failure_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="tejido")
        doc = Document(root=Root(children=(Widget(),)), source_file="page.md")
        with pytest.raises(UnsupportedNodeTypeError):
            HtmlRenderer().render(doc)
        assert any(
            "page.md" in r.getMessage() and "widget" in r.getMessage() for r in caplog.records
        )

    def test_renderer_usable_after_failure(self) -> None:
        renderer = HtmlRenderer()
        with pytest.raises(UnsupportedNodeTypeError):
            renderer.render(Root(children=(Widget(),)))
        assert renderer.render(Root(children=(HorizontalRule(),))) == "<hr />"


# =========================================================================
# Depth ceiling
# =========================================================================


class TestDepthCeiling:
    def test_at_limit_renders(self) -> None:
        # 3 quotes + the rule below them = depth 4
        html = HtmlRenderer(RenderConfig(max_depth=4)).render(_nested_quotes(3))
        assert html.count("<blockquote>") == 3

    def test_over_limit_raises(self) -> None:
        with pytest.raises(RenderDepthError) as exc_info:
            HtmlRenderer(RenderConfig(max_depth=3)).render(_nested_quotes(3))
        assert exc_info.value.max_depth == 3

    def test_default_limit(self) -> None:
        with pytest.raises(RenderDepthError):
            render(_nested_quotes(250))

    def test_unbounded(self) -> None:
        html = render(_nested_quotes(150), config=RenderConfig(max_depth=None))
        assert html.count("</blockquote>") == 150

    def test_source_file_in_error(self) -> None:
        doc = Document(root=_nested_quotes(5), source_file="deep.md")
        with pytest.raises(RenderDepthError, match="deep.md"):
            HtmlRenderer(RenderConfig(max_depth=2)).render(doc)
