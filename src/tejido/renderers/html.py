"""HTML renderer for Tejido trees.

Depth-first conversion: a node's children are rendered first, at two more
spaces of indentation, and their concatenated output ("inner") is then
wrapped according to the node's own variant.

Indentation is cosmetic. Block-level tags are prefixed with ``indent``
spaces; inline variants ignore it. The root is rendered at -2 so that its
direct children land at column 0.

Thread Safety:
All per-render state lives in a RenderContext created by render(). One
HtmlRenderer instance can be shared across threads.
"""

from dataclasses import dataclass

from tejido.attributes import format_attributes
from tejido.config import RenderConfig, get_render_config
from tejido.errors import RenderDepthError, UnsupportedNodeTypeError
from tejido.escape import escape_html
from tejido.nodes import (
    Blank,
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
    LineBreak,
    Link,
    List,
    ListItem,
    Node,
    Paragraph,
    Root,
    Strong,
    Text,
    node_tag,
)
from tejido.stringbuilder import StringBuilder
from tejido.utils.logger import get_logger

logger = get_logger(__name__)

ROOT_INDENT = -2
INDENT_STEP = 2


@dataclass(frozen=True, slots=True)
class RenderContext:
    """Per-render state, created fresh for each render() call."""

    config: RenderConfig
    source_file: str | None = None


class HtmlRenderer:
    """Render a Tejido tree to HTML.

    Usage:
        >>> root = Root(children=(Paragraph(children=(Text("Hi"),)),))
        >>> HtmlRenderer().render(root)
        '<p>Hi</p>'

    A node whose class has no rendering rule raises UnsupportedNodeTypeError
    and aborts the whole conversion.
    """

    __slots__ = ("_config",)

    def __init__(self, config: RenderConfig | None = None) -> None:
        """Initialize renderer.

        Args:
            config: Render configuration. None reads the context config
                (see tejido.config) at each render() call.
        """
        self._config = config

    @classmethod
    def convert(cls, tree: Document | Node, *, config: RenderConfig | None = None) -> str:
        """Convert ``tree`` with a throwaway renderer."""
        return cls(config).render(tree)

    def render(self, tree: Document | Node) -> str:
        """Render a document (or a bare node) to an HTML string.

        Args:
            tree: Document, or any node; usually a Root

        Returns:
            HTML string

        Raises:
            UnsupportedNodeTypeError: A node in the tree has no rendering rule
            RenderDepthError: The tree is nested deeper than config.max_depth
        """
        if isinstance(tree, Document):
            node, source_file = tree.root, tree.source_file
        else:
            node, source_file = tree, None

        ctx = RenderContext(config=self._resolve_config(), source_file=source_file)
        logger.debug("Rendering %s from %s", node_tag(node), source_file or "<tree>")

        try:
            return self._render(node, ROOT_INDENT, ctx)
        except UnsupportedNodeTypeError as e:
            logger.debug(
                "Conversion of %s aborted at unsupported node %r",
                source_file or "<tree>",
                e.node_type,
            )
            raise

    def render_node(self, node: Node, indent: int) -> str:
        """Render ``node`` with its block tags indented by ``indent`` spaces."""
        return self._render(node, indent, RenderContext(config=self._resolve_config()))

    def _resolve_config(self) -> RenderConfig:
        return self._config if self._config is not None else get_render_config()

    # =========================================================================
    # Dispatch
    # =========================================================================

    def _render(self, node: Node, indent: int, ctx: RenderContext) -> str:
        """Render ``node`` and its subtree.

        Children are rendered before the node itself, so an unsupported node
        nested inside another one is reported first.
        """
        max_depth = ctx.config.max_depth
        if max_depth is not None and (indent - ROOT_INDENT) // INDENT_STEP > max_depth:
            raise RenderDepthError(max_depth, ctx.source_file)

        inner = self._render_children(getattr(node, "children", ()), indent, ctx)
        pad = " " * indent
        match node:
            case Blank():
                return "\n"
            case Text():
                return self._render_text(node, ctx)
            case Root():
                return inner.removesuffix("\n")
            case Paragraph():
                return f"{pad}<p{format_attributes(node.attrs)}>{inner}</p>\n"
            case CodeBlock():
                return self._render_code_block(node, pad)
            case BlockQuote():
                attrs = format_attributes(node.attrs)
                return f"{pad}<blockquote{attrs}>\n{inner}{pad}</blockquote>\n"
            case Header():
                attrs = format_attributes(node.attrs)
                return f"{pad}<h{node.level}{attrs}>{inner}</h{node.level}>\n"
            case HorizontalRule():
                return f"{pad}<hr />\n"
            case List():
                tag = node.tag
                return f"{pad}<{tag}{format_attributes(node.attrs)}>\n{inner}{pad}</{tag}>\n"
            case ListItem():
                return self._render_list_item(node, inner, pad)
            case Emphasis() | Strong():
                tag = node.tag
                return f"<{tag}{format_attributes(node.attrs)}>{inner}</{tag}>"
            case Link():
                return f"<a{format_attributes(node.attrs)}>{inner}</a>"
            case Image():
                return f"<img{format_attributes(node.attrs)} />"
            case CodeSpan():
                code = escape_html(node.value)
                return f"<code{format_attributes(node.attrs)}>{code}</code>"
            case HtmlInline():
                return node.value
            case HtmlBlock():
                return node.value + "\n"
            case LineBreak():
                return "<br />"
            case EndOfBlock():
                return ""
            case _:
                raise UnsupportedNodeTypeError(node_tag(node))

    def _render_children(
        self, children: tuple[Node, ...], indent: int, ctx: RenderContext
    ) -> str:
        """Render children one level deeper and concatenate them."""
        sb = StringBuilder()
        for child in children:
            sb.append(self._render(child, indent + INDENT_STEP, ctx))
        return sb.build()

    # =========================================================================
    # Variant rules
    # =========================================================================

    def _render_text(self, text: Text, ctx: RenderContext) -> str:
        value = text.value
        transformer = ctx.config.text_transformer
        if transformer is not None:
            value = transformer(value)
        return escape_html(value, escape_all=False)

    def _render_code_block(self, code: CodeBlock, pad: str) -> str:
        """Render a code block; a final newline is added only if missing."""
        body = escape_html(code.value)
        if not code.value.endswith("\n"):
            body += "\n"
        return f"{pad}<pre{format_attributes(code.attrs)}><code>{body}</code></pre>\n"

    def _render_list_item(self, item: ListItem, inner: str, pad: str) -> str:
        """Render a list item.

        - first_as_para: content starts on its own line, closing tag indented
        - several children: closing tag indented
        - single child: everything on one line, <li>x</li>
        """
        sb = StringBuilder()
        sb.append(f"{pad}<li{format_attributes(item.attrs)}>")
        if item.first_as_para:
            sb.append("\n").append(inner).append(pad)
        elif len(item.children) > 1:
            sb.append(inner).append(pad)
        else:
            sb.append(inner)
        sb.append("</li>\n")
        return sb.build()
