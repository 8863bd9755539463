"""Attribute rendering for HTML start tags."""

from __future__ import annotations

from collections.abc import Mapping

from tejido.escape import escape_html


def format_attributes(attrs: Mapping[str, str | None] | None) -> str:
    """Render an attribute map as ``' key="value"'`` fragments.

    Attributes are sorted by name so output does not depend on the map's
    insertion order. ``None`` values are omitted. Values are escaped with
    entity references preserved.

    Args:
        attrs: Attribute map, or None when the node has none

    Returns:
        Concatenated fragments, each with a leading space, or ""

    Example:
        >>> format_attributes({"id": None, "class": "x", "alt": "a&b"})
        ' alt="a&amp;b" class="x"'
    """
    if not attrs:
        return ""
    return "".join(
        f' {key}="{escape_html(value, escape_all=False)}"'
        for key, value in sorted(attrs.items(), key=lambda item: item[0])
        if value is not None
    )
