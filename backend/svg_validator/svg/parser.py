"""SVG parser — facade over defusedxml's ElementTree.

Converts raw SVG string → list of GraphicElement for the attribute checks.
Parsing is the only step that can fail; failures surface as SvgSyntaxError.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field

import defusedxml.ElementTree as DefusedET
from defusedxml import DefusedXmlException

from svg_validator.svg.rules import GRAPHIC_TAGS, MALFORMED_ENTITY
from svg_validator.svg.serializer import local_name, serialize_element

logger = logging.getLogger(__name__)


class SvgSyntaxError(ValueError):
    """The document is not well-formed XML, or uses forbidden XML constructs."""


@dataclass
class GraphicElement:
    """A single graphic element extracted from the SVG."""

    tag: str
    # Attributes as parsed, in source order (ElementTree {ns}name keys)
    attributes: dict[str, str] = field(default_factory=dict)
    # Outer markup, for display
    snippet: str = ""


def repair_entities(svg_text: str) -> str:
    """Replace the ``&quote`` typo with a literal double quote.

    Only this one misspelling is touched; real entities are left for the parser.
    """
    return svg_text.replace(MALFORMED_ENTITY, '"')


def parse_document(svg_text: str) -> ET.Element:
    """Parse repaired SVG text into an element tree root.

    Raises SvgSyntaxError with the parser's message when the text is rejected.
    """
    try:
        # Internal entities allowed (Illustrator declares ns_svg), external refused
        return DefusedET.fromstring(
            repair_entities(svg_text),
            forbid_entities=False,
            forbid_external=True,
        )
    except DefusedET.ParseError as e:
        raise SvgSyntaxError(str(e)) from e
    except DefusedXmlException as e:
        # External entity references
        raise SvgSyntaxError(str(e)) from e


def collect_graphic_elements(root: ET.Element) -> list[GraphicElement]:
    """Graphic elements grouped by tag kind, document order within each kind."""
    elements: list[GraphicElement] = []

    for tag in GRAPHIC_TAGS:
        for node in root.iter():
            # Comments and processing instructions carry a callable tag
            if not isinstance(node.tag, str) or local_name(node.tag) != tag:
                continue
            elements.append(
                GraphicElement(
                    tag=tag,
                    attributes=dict(node.attrib),
                    snippet=serialize_element(node),
                )
            )

    logger.debug("Collected %d graphic elements", len(elements))
    return elements


def parse_svg(svg_text: str) -> list[GraphicElement]:
    """Parse raw SVG text and return its graphic elements."""
    return collect_graphic_elements(parse_document(svg_text))
