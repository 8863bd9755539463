"""Typed document tree for Tejido.

Every node is a frozen dataclass with slots. The set of variants is closed:
the renderer has one rule per class below and rejects anything else.

Type-specific metadata lives in explicit fields rather than a generic
options bag:
- ``attrs``: HTML attribute map for variants that support attributes
- ``level``: heading level for Header
- ``ordered``: ul vs ol for List
- ``first_as_para``: list item whose first child renders as its own block

Node Hierarchy:
Node (base)
├── Root
├── Block
│   ├── Paragraph
│   ├── Header
│   ├── CodeBlock
│   ├── BlockQuote
│   ├── List
│   ├── ListItem
│   ├── HorizontalRule
│   ├── HtmlBlock
│   ├── Blank
│   └── EndOfBlock
└── Inline
    ├── Text
    ├── Emphasis
    ├── Strong
    ├── Link
    ├── Image
    ├── CodeSpan
    ├── HtmlInline
    └── LineBreak

Thread Safety:
Node fields are frozen. An ``attrs`` mapping is stored as given and is not
copied; the renderer only reads it, so trees are safe to share across threads
as long as callers do not mutate attribute maps they passed in.

"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import ClassVar, Literal

type Attrs = Mapping[str, str | None]


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all tree nodes.

    Concrete variants expose their type tag as ``tag``.

    """


# =============================================================================
# Inline Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Text(Node):
    """Plain text. Entity references in ``value`` are kept on output."""

    tag: ClassVar[str] = "text"

    value: str


@dataclass(frozen=True, slots=True)
class Emphasis(Node):
    """Emphasized text.

    HTML: <em>text</em>

    """

    tag: ClassVar[str] = "em"

    children: tuple[Inline, ...] = ()
    attrs: Attrs | None = None


@dataclass(frozen=True, slots=True)
class Strong(Node):
    """Strong text.

    HTML: <strong>text</strong>

    """

    tag: ClassVar[str] = "strong"

    children: tuple[Inline, ...] = ()
    attrs: Attrs | None = None


@dataclass(frozen=True, slots=True)
class Link(Node):
    """Hyperlink. Target and title are ordinary attributes.

    HTML: <a href="url" title="title">text</a>

    """

    tag: ClassVar[str] = "a"

    children: tuple[Inline, ...] = ()
    attrs: Attrs | None = None


@dataclass(frozen=True, slots=True)
class Image(Node):
    """Image. Source and alt text are ordinary attributes.

    HTML: <img alt="alt" src="url" />

    """

    tag: ClassVar[str] = "img"

    attrs: Attrs | None = None


@dataclass(frozen=True, slots=True)
class CodeSpan(Node):
    """Inline code.

    HTML: <code>code</code>

    """

    tag: ClassVar[str] = "codespan"

    value: str
    attrs: Attrs | None = None


@dataclass(frozen=True, slots=True)
class HtmlInline(Node):
    """Inline raw HTML, passed through unchanged."""

    tag: ClassVar[str] = "html_inline"

    value: str


@dataclass(frozen=True, slots=True)
class LineBreak(Node):
    """Hard line break.

    HTML: <br />

    """

    tag: ClassVar[str] = "br"


type Inline = (
    Text
    | Emphasis
    | Strong
    | Link
    | Image
    | CodeSpan
    | HtmlInline
    | LineBreak
)


# =============================================================================
# Block Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Paragraph(Node):
    """Paragraph block.

    HTML: <p>text</p>

    """

    tag: ClassVar[str] = "p"

    children: tuple[Inline, ...] = ()
    attrs: Attrs | None = None


@dataclass(frozen=True, slots=True)
class Header(Node):
    """Heading of level 1-6.

    HTML: <h1>Heading</h1>

    """

    tag: ClassVar[str] = "header"

    level: Literal[1, 2, 3, 4, 5, 6]
    children: tuple[Inline, ...] = ()
    attrs: Attrs | None = None


@dataclass(frozen=True, slots=True)
class CodeBlock(Node):
    """Code block. ``value`` is the raw code, escaped on output.

    HTML: <pre><code>code</code></pre>

    """

    tag: ClassVar[str] = "codeblock"

    value: str
    attrs: Attrs | None = None


@dataclass(frozen=True, slots=True)
class BlockQuote(Node):
    """Block quote.

    HTML: <blockquote>...</blockquote>

    """

    tag: ClassVar[str] = "blockquote"

    children: tuple[Block, ...] = ()
    attrs: Attrs | None = None


@dataclass(frozen=True, slots=True)
class ListItem(Node):
    """List item.

    ``first_as_para`` marks an item whose first child is a block of its own,
    so the item content starts on a new line.

    """

    tag: ClassVar[str] = "li"

    children: tuple[Block | Inline, ...] = ()
    first_as_para: bool = False
    attrs: Attrs | None = None


@dataclass(frozen=True, slots=True)
class List(Node):
    """Ordered or unordered list.

    HTML: <ul>/<ol> with <li> children

    """

    children: tuple[ListItem | Blank | EndOfBlock, ...] = ()
    ordered: bool = False
    attrs: Attrs | None = None

    @property
    def tag(self) -> str:  # type: ignore[override]
        return "ol" if self.ordered else "ul"


@dataclass(frozen=True, slots=True)
class HorizontalRule(Node):
    """Horizontal rule.

    HTML: <hr />

    """

    tag: ClassVar[str] = "hr"


@dataclass(frozen=True, slots=True)
class HtmlBlock(Node):
    """Raw HTML block, passed through with a trailing newline."""

    tag: ClassVar[str] = "html_block"

    value: str


@dataclass(frozen=True, slots=True)
class Blank(Node):
    """One or more blank source lines, rendered as a single newline."""

    tag: ClassVar[str] = "blank"


@dataclass(frozen=True, slots=True)
class EndOfBlock(Node):
    """Parser marker closing a block. Renders to nothing."""

    tag: ClassVar[str] = "eob"


type Block = (
    Paragraph
    | Header
    | CodeBlock
    | BlockQuote
    | List
    | ListItem
    | HorizontalRule
    | HtmlBlock
    | Blank
    | EndOfBlock
)


# =============================================================================
# Root and Document
# =============================================================================


@dataclass(frozen=True, slots=True)
class Root(Node):
    """Root of the tree. Contains all top-level blocks."""

    tag: ClassVar[str] = "root"

    children: tuple[Block, ...] = ()


@dataclass(frozen=True, slots=True)
class Document:
    """A converted document: the root node plus document-level context.

    ``source_file`` is informational only and shows up in log messages.

    """

    root: Root
    source_file: str | None = None


def node_tag(node: object) -> str:
    """Type tag of ``node``, falling back to the class name for foreign objects."""
    tag = getattr(node, "tag", None)
    if isinstance(tag, str):
        return tag
    return type(node).__name__
