"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ValidateRequest(BaseModel):
    svg: str = Field(..., description="Raw SVG code")
    track_lines: bool = Field(
        default=True,
        description="Resolve source line numbers for offending elements",
    )


class ExportRequest(BaseModel):
    svg: str = Field(..., description="Current (possibly edited) SVG code")
