"""SVG data-attribute validator service."""

__version__ = "0.1.0"
