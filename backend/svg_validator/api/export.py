"""POST /api/export — hand the current SVG back as a file download."""

from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import Response

from svg_validator.models.requests import ExportRequest
from svg_validator.svg.rules import EXPORT_FILENAME, EXPORT_MEDIA_TYPE

router = APIRouter()


@router.post("/export")
async def export_svg(req: ExportRequest) -> Response:
    # Saved as-is; findings do not block the download
    return Response(
        content=req.svg.encode("utf-8"),
        media_type=EXPORT_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{EXPORT_FILENAME}"'},
    )
