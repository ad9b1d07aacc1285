"""Validation finding model."""

from __future__ import annotations

import enum

from pydantic import BaseModel, Field


class FindingKind(str, enum.Enum):
    PARSE_ERROR = "parse_error"
    MISSING_ATTRIBUTE = "missing_attribute"
    SURROUNDING_WHITESPACE = "surrounding_whitespace"
    INVALID_ENTITY = "invalid_entity"


class Finding(BaseModel):
    """A single reported validation issue."""

    tag: str = Field(..., description="Element kind, or N/A when the document did not parse")
    snippet: str = Field("", description="Markup of the offending element")
    message: str
    line: int = Field(0, description="1-based source line, 0 when unknown")
    kind: FindingKind
    attribute: str | None = None
