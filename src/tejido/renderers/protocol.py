"""TreeRenderer protocol: stable interface for tree renderers.

Any object with ``render(tree) -> str`` conforms. ``HtmlRenderer`` is the
reference implementation.

Example:
    from tejido.renderers.protocol import TreeRenderer

    def render_page(renderer: TreeRenderer, doc: Document) -> str:
        return renderer.render(doc)

"""

from typing import Protocol

from tejido.nodes import Document, Node


class TreeRenderer(Protocol):
    """Protocol for tree renderers."""

    def render(self, tree: Document | Node) -> str:
        """Render a document or node to a string."""
        ...
