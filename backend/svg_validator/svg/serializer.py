"""Write element markup back out for display next to a finding."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from xml.sax.saxutils import escape, quoteattr

# Prefixes for namespaces that show up on SVG attributes. Anything else is
# written with its local name only.
_KNOWN_PREFIXES = {
    "http://www.w3.org/1999/xlink": "xlink",
    "http://www.w3.org/XML/1998/namespace": "xml",
}


def local_name(name: str) -> str:
    """Strip an ElementTree ``{namespace}`` qualifier."""
    return name.rsplit("}", 1)[-1]


def qualified_name(name: str) -> str:
    """Render an ElementTree name the way it would be written in source."""
    if not name.startswith("{"):
        return name
    namespace, _, local = name[1:].partition("}")
    prefix = _KNOWN_PREFIXES.get(namespace)
    return f"{prefix}:{local}" if prefix else local


def serialize_attributes(attributes: dict[str, str]) -> str:
    return "".join(f" {qualified_name(k)}={quoteattr(v)}" for k, v in attributes.items())


def serialize_element(node: ET.Element) -> str:
    """Outer markup of ``node`` and its children, without its tail text."""
    tag = qualified_name(node.tag)
    attrs = serialize_attributes(dict(node.attrib))

    children = [child for child in node if isinstance(child.tag, str)]
    if not children and not node.text:
        return f"<{tag}{attrs}/>"

    parts = [f"<{tag}{attrs}>"]
    if node.text:
        parts.append(escape(node.text))
    for child in children:
        parts.append(serialize_element(child))
        if child.tail:
            parts.append(escape(child.tail))
    parts.append(f"</{tag}>")
    return "".join(parts)
