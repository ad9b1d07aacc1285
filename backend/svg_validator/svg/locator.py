"""Best-effort source line lookup for parsed elements.

An element is located by searching the original text line by line for its
complete opening tag. Tags spread over several lines, or whose attribute
values were rewritten before parsing, are not found and report line 0.
"""

from __future__ import annotations

import re

from svg_validator.svg.parser import GraphicElement
from svg_validator.svg.serializer import local_name

_UNKNOWN_LINE = 0

# Named entities usable inside a quoted attribute value.
_NAMED_ENTITIES = {
    "&": "amp",
    "<": "lt",
    ">": "gt",
    '"': "quot",
    "'": "apos",
}
# Never written literally inside an attribute value.
_ESCAPE_ONLY = "&<"

_NAME_PREFIX = r"(?:[\w.-]+:)?"

# ElementTree consumes namespace declarations, so they are absent from the
# parsed attributes but may sit anywhere between them in the source.
_NS_DECLARATIONS = r"""(?:\s+xmlns(?::[\w.-]+)?\s*=\s*(?:"[^"]*"|'[^']*'))*"""


def _char_pattern(ch: str) -> str:
    alternatives = []
    if ch.isspace():
        # Attribute-value normalization turns tabs and newlines into spaces
        alternatives.append(r"\s")
    elif ch not in _ESCAPE_ONLY:
        alternatives.append(re.escape(ch))
    if ch in _NAMED_ENTITIES:
        alternatives.append(f"&{_NAMED_ENTITIES[ch]};")
    alternatives.append(f"&#0*{ord(ch)};")
    alternatives.append(f"&#x0*(?i:{ord(ch):x});")
    return "(?:" + "|".join(alternatives) + ")"


def _value_pattern(value: str) -> str:
    return "".join(_char_pattern(ch) for ch in value)


def opening_tag_pattern(element: GraphicElement) -> re.Pattern[str]:
    """Regex for the element's opening tag, tolerant of spacing and quote style."""
    parts = [f"<{_NAME_PREFIX}{re.escape(element.tag)}", _NS_DECLARATIONS]
    for name, value in element.attributes.items():
        quoted = _value_pattern(value)
        parts.append(
            rf"\s+{_NAME_PREFIX}{re.escape(local_name(name))}\s*=\s*"
            rf"(?:\"{quoted}\"|'{quoted}')"
        )
        parts.append(_NS_DECLARATIONS)
    parts.append(r"\s*/?>")
    return re.compile("".join(parts))


def locate_line(lines: list[str], element: GraphicElement) -> int:
    """1-based index of the first line holding the element's opening tag, else 0."""
    pattern = opening_tag_pattern(element)
    for number, line in enumerate(lines, start=1):
        if pattern.search(line):
            return number
    return _UNKNOWN_LINE


def split_lines(svg_text: str) -> list[str]:
    return svg_text.split("\n")
