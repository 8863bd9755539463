"""Tejido renderers.

Available Renderers:
- HtmlRenderer: renders a tree to indented HTML

Thread Safety:
Per-render state is local to each render() call.
Safe for concurrent use from multiple threads.

"""

from tejido.renderers.html import HtmlRenderer
from tejido.renderers.protocol import TreeRenderer

__all__ = ["HtmlRenderer", "TreeRenderer"]
