"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from svg_validator import __version__
from svg_validator.models.findings import Finding


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = __version__
    checks_registered: int = 0


class ValidateResponse(BaseModel):
    valid: bool
    findings: list[Finding] = Field(default_factory=list)
    error_count: int = 0
    message: str = ""
    processing_time_ms: float = 0.0


class UploadValidateResponse(ValidateResponse):
    filename: str
    size: int = 0
    svg: str = Field("", description="Decoded file content, for loading into an editor")
