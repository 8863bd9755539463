"""Exception classes for Tejido.

Conversion is all-or-nothing: any of these aborts the whole render and no
partial output is returned.
"""

from __future__ import annotations


class TejidoError(Exception):
    """Base exception for all Tejido errors.

    Subclass this for specific error categories.
    """

    pass


class RenderError(TejidoError):
    """Error during HTML rendering.

    Raised when the renderer cannot produce output for the given tree.
    """

    pass


class UnsupportedNodeTypeError(RenderError):
    """Raised when the tree contains a node with no rendering rule."""

    def __init__(self, node_type: str) -> None:
        """Initialize with the offending type tag.

        Args:
            node_type: Type tag (or class name) of the unsupported node
        """
        self.node_type = node_type
        super().__init__(f"Conversion of element {node_type!r} not implemented")


class RenderDepthError(RenderError):
    """Raised when the tree is nested deeper than the configured ceiling."""

    def __init__(self, max_depth: int, source_file: str | None = None) -> None:
        """Initialize depth error.

        Args:
            max_depth: The ceiling that was exceeded
            source_file: Source file of the document, if known
        """
        self.max_depth = max_depth
        self.source_file = source_file

        location = f"{source_file}: " if source_file else ""
        super().__init__(f"{location}tree nesting exceeds max_depth={max_depth}")
