"""POST /api/parse — decode a basic SVG into its document structure."""

from __future__ import annotations

import logging
import time

from fastapi import APIRouter, Depends, HTTPException

from svgdraw.config import Settings
from svgdraw.dependencies import get_settings
from svgdraw.errors import SvgParseError
from svgdraw.models.requests import ParseRequest
from svgdraw.models.responses import ParseResponse
from svgdraw.models.svg_document import SvgBasicDocumentModel
from svgdraw.svg.document import SvgBasicDocument
from svgdraw.svg.parser import parse_svg_basic

logger = logging.getLogger(__name__)

router = APIRouter()


def load_document(svg: str, settings: Settings, strict: bool | None = None) -> SvgBasicDocument:
    """Parse request SVG text, mapping failures onto HTTP errors."""
    data = svg.encode("utf-8")
    if len(data) > settings.svgdraw_max_upload_bytes:
        raise HTTPException(status_code=413, detail="SVG exceeds maximum upload size")
    try:
        return parse_svg_basic(data, strict=strict)
    except SvgParseError as e:
        logger.info("Rejected SVG: %s", e)
        raise HTTPException(status_code=422, detail=str(e)) from e


@router.post("/parse", response_model=ParseResponse)
async def parse(req: ParseRequest, settings: Settings = Depends(get_settings)) -> ParseResponse:
    start = time.perf_counter()
    doc = load_document(req.svg, settings, req.strict)
    elapsed = (time.perf_counter() - start) * 1000
    return ParseResponse(
        document=SvgBasicDocumentModel.from_document(doc),
        processing_time_ms=round(elapsed, 1),
    )
