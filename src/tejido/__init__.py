"""
Tejido — HTML rendering for parsed document trees

Turns a typed, already-parsed document tree into indented HTML. Parsing is
done upstream; Tejido only walks the tree and serializes it.

Quick Start:
    >>> from tejido import Paragraph, Root, Text, render
    >>> root = Root(children=(Paragraph(children=(Text("Hi"),)),))
    >>> render(root)
    '<p>Hi</p>'

    >>> # Reuse one renderer across documents and threads
    >>> from tejido import HtmlRenderer
    >>> renderer = HtmlRenderer()
    >>> html = renderer.render(root)

Installation:
    pip install tejido
"""

from tejido.attributes import format_attributes
from tejido.config import (
    RenderConfig,
    get_render_config,
    render_config_context,
    reset_render_config,
    set_render_config,
)
from tejido.errors import (
    RenderDepthError,
    RenderError,
    TejidoError,
    UnsupportedNodeTypeError,
)
from tejido.escape import escape_html
from tejido.nodes import (
    Blank,
    Block,
    BlockQuote,
    CodeBlock,
    CodeSpan,
    Document,
    Emphasis,
    EndOfBlock,
    Header,
    HorizontalRule,
    HtmlBlock,
    HtmlInline,
    Image,
    Inline,
    LineBreak,
    Link,
    List,
    ListItem,
    Node,
    Paragraph,
    Root,
    Strong,
    Text,
)
from tejido.renderers.html import HtmlRenderer
from tejido.renderers.protocol import TreeRenderer
from tejido.serialization import from_dict, from_json, to_dict, to_json

__version__ = "0.1.0"


def render(tree: Document | Node, *, config: RenderConfig | None = None) -> str:
    """Render a document tree to HTML.

    Args:
        tree: Document or root node
        config: Render configuration (uses the context config if None)

    Returns:
        HTML string

    Raises:
        UnsupportedNodeTypeError: The tree contains a node with no rendering rule

    Example:
        >>> render(Root(children=(Header(level=2, children=(Text("T"),)),)))
        '<h2>T</h2>'
    """
    return HtmlRenderer.convert(tree, config=config)


__all__ = [
    # Main API
    "render",
    "HtmlRenderer",
    "TreeRenderer",
    "escape_html",
    "format_attributes",
    # Configuration
    "RenderConfig",
    "get_render_config",
    "set_render_config",
    "reset_render_config",
    "render_config_context",
    # Errors
    "TejidoError",
    "RenderError",
    "UnsupportedNodeTypeError",
    "RenderDepthError",
    # Serialization
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
    # Nodes
    "Node",
    "Block",
    "Inline",
    "Document",
    "Root",
    "Blank",
    "Text",
    "Paragraph",
    "CodeBlock",
    "BlockQuote",
    "Header",
    "HorizontalRule",
    "List",
    "ListItem",
    "Emphasis",
    "Strong",
    "Link",
    "Image",
    "CodeSpan",
    "HtmlInline",
    "HtmlBlock",
    "LineBreak",
    "EndOfBlock",
    "__version__",
]
