"""POST /api/render — replay a basic SVG as drawing primitives or a PDF page."""

from __future__ import annotations

import time

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from svgdraw.api.parse import load_document
from svgdraw.config import Settings
from svgdraw.dependencies import get_settings
from svgdraw.models.requests import RenderRequest
from svgdraw.models.responses import DrawOpModel, RenderResponse
from svgdraw.render.fpdf_surface import FpdfSurface
from svgdraw.render.recording import RecordingSurface
from svgdraw.render.writer import render_svg_basic

router = APIRouter()


@router.post("/render", response_model=RenderResponse)
async def render(req: RenderRequest, settings: Settings = Depends(get_settings)) -> RenderResponse:
    start = time.perf_counter()
    doc = load_document(req.svg, settings)

    surface = RecordingSurface(x=req.origin_x, y=req.origin_y)
    render_svg_basic(doc, req.scale, surface)

    elapsed = (time.perf_counter() - start) * 1000
    return RenderResponse(
        ops=[DrawOpModel(name=op.name, args=list(op.args)) for op in surface.ops],
        error=surface.error,
        path_errors=len(doc.path_errors),
        processing_time_ms=round(elapsed, 1),
    )


@router.post("/render/pdf")
async def render_pdf(req: RenderRequest, settings: Settings = Depends(get_settings)) -> Response:
    doc = load_document(req.svg, settings)

    surface = FpdfSurface()
    surface.set_xy(req.origin_x, req.origin_y)
    render_svg_basic(doc, req.scale, surface)

    headers = {}
    if surface.error:
        headers["X-Render-Error"] = surface.error
    return Response(content=surface.output(), media_type="application/pdf", headers=headers)
