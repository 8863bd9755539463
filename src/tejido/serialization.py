"""Tree serialization: JSON round-trip for Tejido nodes.

Converts typed nodes to/from JSON-compatible dicts. Useful for:
- Receiving trees from a parser running in another process
- Caching converted trees on disk
- Debugging and inspection

All output is deterministic (sorted keys).

Example:
    from tejido.serialization import to_json, from_json

    json_str = to_json(doc)
    assert from_json(json_str) == doc

Thread Safety:
    All functions are pure. Safe to call from any thread.

"""

import json
from collections.abc import Mapping
from dataclasses import fields
from typing import Any

from tejido.errors import UnsupportedNodeTypeError
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
)

# Registry of serialized type names to classes for deserialization
_NODE_TYPES: dict[str, type] = {
    "Document": Document,
    "Root": Root,
    "Blank": Blank,
    "Text": Text,
    "Paragraph": Paragraph,
    "CodeBlock": CodeBlock,
    "BlockQuote": BlockQuote,
    "Header": Header,
    "HorizontalRule": HorizontalRule,
    "List": List,
    "ListItem": ListItem,
    "Emphasis": Emphasis,
    "Strong": Strong,
    "Link": Link,
    "Image": Image,
    "CodeSpan": CodeSpan,
    "HtmlInline": HtmlInline,
    "HtmlBlock": HtmlBlock,
    "LineBreak": LineBreak,
    "EndOfBlock": EndOfBlock,
}


def to_dict(node: Node | Document) -> dict[str, Any]:
    """Convert a node (or Document) to a JSON-compatible dict.

    Includes a ``_type`` discriminator field for deserialization.

    Args:
        node: Any Tejido node, or a Document.

    Returns:
        Dict with ``_type`` and all dataclass fields.

    """
    result: dict[str, Any] = {"_type": type(node).__name__}

    for f in fields(node):
        result[f.name] = _serialize_value(getattr(node, f.name))

    return result


def _serialize_value(value: Any) -> Any:
    """Serialize a single field value."""
    if isinstance(value, (Node, Document)):
        return to_dict(value)
    if isinstance(value, tuple):
        return [_serialize_value(item) for item in value]
    if isinstance(value, Mapping):
        return dict(value)
    # Primitives: str, int, bool, None
    return value


def from_dict(data: dict[str, Any]) -> Node | Document:
    """Reconstruct a typed node from a dict.

    Args:
        data: Dict with ``_type`` and node fields (as produced by to_dict).

    Returns:
        Typed node (frozen dataclass), or a Document.

    Raises:
        ValueError: If ``_type`` is missing.
        UnsupportedNodeTypeError: If ``_type`` names no known node type.

    """
    type_name = data.get("_type")
    if type_name is None:
        msg = "Missing '_type' field in serialized node"
        raise ValueError(msg)

    node_cls = _NODE_TYPES.get(type_name)
    if node_cls is None:
        raise UnsupportedNodeTypeError(str(type_name))

    kwargs: dict[str, Any] = {}
    for f in fields(node_cls):
        if f.name in data:
            kwargs[f.name] = _deserialize_field(f.name, data[f.name])

    return node_cls(**kwargs)


def _deserialize_field(name: str, value: Any) -> Any:
    """Deserialize a single field value.

    Only node-valued fields are decoded as nodes; attribute maps stay plain
    dicts whatever their keys are.
    """
    if name == "root":
        return from_dict(value)
    if name == "children":
        return tuple(from_dict(item) for item in value)
    return value


def to_json(doc: Document, *, indent: int | None = None) -> str:
    """Serialize a Document to a JSON string with sorted keys.

    Args:
        doc: Document to serialize.
        indent: JSON indentation level (None for compact).

    """
    return json.dumps(to_dict(doc), sort_keys=True, indent=indent)


def from_json(data: str) -> Document:
    """Deserialize a Document from a JSON string.

    Raises:
        ValueError: If the JSON doesn't represent a Document.
        UnsupportedNodeTypeError: If the tree contains an unknown node type.

    """
    node = from_dict(json.loads(data))
    if not isinstance(node, Document):
        msg = f"Expected Document, got {type(node).__name__}"
        raise ValueError(msg)
    return node
