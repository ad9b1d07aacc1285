"""validate_svg — one full validation pass over an SVG document.

The pass is a pure function of the text: repair, parse, collect graphic
elements, run every registered check against every required attribute.
A parse failure yields a single N/A finding and nothing else.
"""

from __future__ import annotations

import logging

# Importing the checks module registers them
from svg_validator.engine import checks  # noqa: F401
from svg_validator.engine.registry import get_registry
from svg_validator.models.findings import Finding, FindingKind
from svg_validator.svg.locator import locate_line, split_lines
from svg_validator.svg.parser import GraphicElement, SvgSyntaxError, parse_svg
from svg_validator.svg.rules import NO_TAG, REQUIRED_ATTRIBUTES

logger = logging.getLogger(__name__)

VALID_MESSAGE = "Your SVG is valid and contains no errors."


def validate_svg(svg_text: str, track_lines: bool = True) -> list[Finding]:
    """Validate raw SVG text and return findings in report order."""
    try:
        elements = parse_svg(svg_text)
    except SvgSyntaxError as e:
        logger.debug("SVG rejected by parser: %s", e)
        return [
            Finding(
                tag=NO_TAG,
                snippet="",
                message=f"Invalid SVG syntax: {e}",
                line=0,
                kind=FindingKind.PARSE_ERROR,
            )
        ]

    lines = split_lines(svg_text) if track_lines else []
    findings: list[Finding] = []
    for element in elements:
        findings.extend(_check_element(element, lines))

    logger.info("Validated SVG: %d graphic elements, %d findings", len(elements), len(findings))
    return findings


def _check_element(element: GraphicElement, lines: list[str]) -> list[Finding]:
    specs = get_registry().all()
    findings: list[Finding] = []
    line: int | None = None

    for attr in REQUIRED_ATTRIBUTES:
        value = element.attributes.get(attr)
        for spec in specs:
            if not spec.fn(value):
                continue
            if line is None:
                line = locate_line(lines, element) if lines else 0
            findings.append(
                Finding(
                    tag=element.tag,
                    snippet=element.snippet,
                    message=spec.render(element.tag, attr),
                    line=line,
                    kind=spec.kind,
                    attribute=attr,
                )
            )
            if spec.terminal:
                break

    return findings


def is_clean(findings: list[Finding]) -> bool:
    return not findings


def summarize(findings: list[Finding]) -> str:
    """One-line status message for a finding list."""
    if is_clean(findings):
        return VALID_MESSAGE
    return f"{len(findings)} validation error(s) found."
