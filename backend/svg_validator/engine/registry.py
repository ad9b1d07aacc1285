"""Attribute check registry — every check is a predicate registered via decorator.

Usage:
    @attribute_check(id="C02", kind=FindingKind.SURROUNDING_WHITESPACE,
                     message='<{tag}> attribute "{attr}" has leading or trailing spaces.')
    def surrounding_whitespace(value: str) -> bool:
        return value != value.strip()

Checks run in ID order against each required attribute. A terminal check that
fires stops the remaining checks for that attribute.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from svg_validator.models.findings import FindingKind

logger = logging.getLogger(__name__)


@dataclass
class CheckSpec:
    id: str
    kind: FindingKind
    # Returns True when the attribute value violates the check
    fn: Callable[[str | None], bool]
    # Format string with {tag} and {attr}
    message: str
    terminal: bool = False

    def render(self, tag: str, attr: str) -> str:
        return self.message.format(tag=tag, attr=attr)


class CheckRegistry:
    """Singleton registry of all attribute checks."""

    def __init__(self) -> None:
        self._checks: dict[str, CheckSpec] = {}

    def register(self, spec: CheckSpec) -> None:
        if spec.id in self._checks:
            raise ValueError(f"Duplicate check ID: {spec.id}")
        self._checks[spec.id] = spec
        logger.debug("Registered check %s (%s)", spec.id, spec.kind.value)

    def get(self, check_id: str) -> CheckSpec:
        return self._checks[check_id]

    def all(self) -> list[CheckSpec]:
        return sorted(self._checks.values(), key=lambda s: s.id)

    @property
    def count(self) -> int:
        return len(self._checks)


_registry = CheckRegistry()


def get_registry() -> CheckRegistry:
    return _registry


def attribute_check(
    id: str,
    kind: FindingKind,
    message: str,
    terminal: bool = False,
) -> Callable:
    """Decorator to register an attribute check."""

    def decorator(fn: Callable[[str | None], bool]) -> Callable[[str | None], bool]:
        spec = CheckSpec(id=id, kind=kind, fn=fn, message=message, terminal=terminal)
        _registry.register(spec)
        return fn

    return decorator
