"""The three per-attribute checks, in the order they are reported."""

from __future__ import annotations

from svg_validator.engine.registry import attribute_check
from svg_validator.models.findings import FindingKind
from svg_validator.svg.rules import MALFORMED_ENTITY, TRIM_CHARACTERS


@attribute_check(
    id="C01",
    kind=FindingKind.MISSING_ATTRIBUTE,
    message="<{tag}> missing attribute: {attr}",
    terminal=True,
)
def missing_attribute(value: str | None) -> bool:
    # Absent and empty are treated the same
    return not value


@attribute_check(
    id="C02",
    kind=FindingKind.SURROUNDING_WHITESPACE,
    message='<{tag}> attribute "{attr}" has leading or trailing spaces.',
)
def surrounding_whitespace(value: str | None) -> bool:
    return value != value.strip(TRIM_CHARACTERS)


@attribute_check(
    id="C03",
    kind=FindingKind.INVALID_ENTITY,
    message='<{tag}> attribute "{attr}" contains invalid characters like "' + MALFORMED_ENTITY + '".',
)
def invalid_entity(value: str | None) -> bool:
    return MALFORMED_ENTITY in value
