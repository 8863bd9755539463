"""HTML escaping for text and attribute values.

Two modes:
- escape_all: every ``<``, ``>``, ``"`` and ``&`` is replaced
- entity-preserving: ``&`` that starts an entity reference (``&amp;``,
  ``&#39;``, ``&#x3A;``) is kept, everything else is escaped

Example:
    >>> escape_html("a < b")
    'a &lt; b'
    >>> escape_html("&copy; <b>", escape_all=False)
    '&copy; &lt;b&gt;'
"""

from __future__ import annotations

import html
import re

ESCAPE_MAP: dict[str, str] = {
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "&": "&amp;",
}

# Entity names are ASCII word characters only
ENTITY_RE = re.compile(r"&(?:\w+|#x?\w+);", re.ASCII)

# Entity alternative comes first so it wins over a lone "&" at the same offset
_ESCAPE_NOT_ENTITIES_RE = re.compile(ENTITY_RE.pattern + r"|[<>\"&]", re.ASCII)


def _replace(match: re.Match[str]) -> str:
    text = match.group(0)
    return ESCAPE_MAP.get(text, text)


def escape_html(text: str, escape_all: bool = True) -> str:
    """Escape HTML special characters in ``text``.

    Escapes <, >, & and " but NOT single quotes, same as CommonMark output.

    Args:
        text: Raw text
        escape_all: If False, entity references are passed through unchanged

    Returns:
        Markup-safe text
    """
    if not text:
        return ""
    if escape_all:
        return html.escape(text, quote=False).replace('"', "&quot;")
    return _ESCAPE_NOT_ENTITIES_RE.sub(_replace, text)
