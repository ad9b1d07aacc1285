"""Attribute validation engine."""

from svg_validator.engine.registry import attribute_check, get_registry
from svg_validator.engine.validator import is_clean, summarize, validate_svg

__all__ = [
    "attribute_check",
    "get_registry",
    "is_clean",
    "summarize",
    "validate_svg",
]
