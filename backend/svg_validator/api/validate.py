"""POST /api/validate — run the attribute checks on editor text or an uploaded file."""

from __future__ import annotations

import logging
import time

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile

from svg_validator.config import Settings
from svg_validator.dependencies import get_settings
from svg_validator.engine import is_clean, summarize, validate_svg
from svg_validator.models.requests import ValidateRequest
from svg_validator.models.responses import UploadValidateResponse, ValidateResponse

logger = logging.getLogger(__name__)

router = APIRouter()

_CHUNK_SIZE = 64 * 1024


def _run(svg: str, track_lines: bool = True) -> ValidateResponse:
    start = time.perf_counter()
    findings = validate_svg(svg, track_lines=track_lines)
    elapsed = (time.perf_counter() - start) * 1000

    return ValidateResponse(
        valid=is_clean(findings),
        findings=findings,
        error_count=len(findings),
        message=summarize(findings),
        processing_time_ms=round(elapsed, 1),
    )


@router.post("/validate", response_model=ValidateResponse)
async def validate(req: ValidateRequest) -> ValidateResponse:
    return _run(req.svg, track_lines=req.track_lines)


@router.post("/validate/upload", response_model=UploadValidateResponse)
async def validate_upload(
    file: UploadFile = File(...),
    settings: Settings = Depends(get_settings),
) -> UploadValidateResponse:
    """Validate an uploaded .svg file and return its text alongside the findings."""
    filename = file.filename or ""
    if not filename.lower().endswith(".svg"):
        logger.warning("Rejected upload with non-SVG filename %r", filename)
        raise HTTPException(status_code=400, detail="Only .svg files are accepted")

    # Read in chunks so an oversized body is refused before it is buffered
    size = 0
    chunks: list[bytes] = []
    while chunk := await file.read(_CHUNK_SIZE):
        size += len(chunk)
        if size > settings.max_upload_bytes:
            logger.warning("Rejected upload %r: over %d bytes", filename, settings.max_upload_bytes)
            raise HTTPException(
                status_code=413,
                detail=f"File too large. Maximum size: {settings.max_upload_bytes} bytes",
            )
        chunks.append(chunk)

    try:
        svg = b"".join(chunks).decode("utf-8-sig")
    except UnicodeDecodeError as e:
        logger.warning("Rejected upload %r: %s", filename, e)
        raise HTTPException(status_code=400, detail="File is not valid UTF-8 text") from e

    result = _run(svg)
    logger.info("Validated upload %r (%d bytes): %d findings", filename, size, result.error_count)

    return UploadValidateResponse(
        **result.model_dump(),
        filename=filename,
        size=size,
        svg=svg,
    )
