"""Fixed validation rules: which elements are checked and for what."""

from __future__ import annotations

# Graphic element kinds, in the order findings are reported.
GRAPHIC_TAGS: tuple[str, ...] = (
    "path",
    "polygon",
    "rect",
    "circle",
    "ellipse",
    "line",
    "polyline",
)

# Required on every graphic element, checked in this order.
REQUIRED_ATTRIBUTES: tuple[str, ...] = (
    "data-categoryid",
    "data-targetviewbox",
    "data-zoneid",
)

# Common misspelling of &quot;. Repaired before parsing, flagged wherever it
# survives into an attribute value.
MALFORMED_ENTITY = "&quote"

# Characters ignored at either end of an attribute value: whitespace and line
# terminators as a browser trims them, byte order mark included.
TRIM_CHARACTERS = (
    "\t\n\v\f\r \u00a0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)

# Tag reported for findings not tied to an element.
NO_TAG = "N/A"

# Download artifact for the export endpoint.
EXPORT_FILENAME = "validated.svg"
EXPORT_MEDIA_TYPE = "image/svg+xml"
