"""Fragment accumulator for rendered output.

Collects fragments in a list and joins once, instead of growing a string
with repeated ``+``.

Thread Safety:
Instances are created per call and never shared.

"""

from __future__ import annotations


class StringBuilder:
    """Append-only list of string fragments.

    Usage:
        >>> sb = StringBuilder()
        >>> sb.append("<p>").append("Hi").append("</p>\\n").build()
        '<p>Hi</p>\\n'

    """

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        self._parts: list[str] = []

    def append(self, s: str) -> StringBuilder:
        """Append ``s``; empty strings are skipped. Returns self for chaining."""
        if s:
            self._parts.append(s)
        return self

    def build(self) -> str:
        """Join all fragments."""
        return "".join(self._parts)
