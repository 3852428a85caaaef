"""Rendering of decoded documents onto drawing surfaces."""

from svgdraw.render.config import RenderConfig
from svgdraw.render.recording import DrawOp, RecordingSurface
from svgdraw.render.surface import DrawingSurface, LatchingSurface
from svgdraw.render.writer import render_paths, render_svg_basic, render_texts

__all__ = [
    "DrawOp",
    "DrawingSurface",
    "LatchingSurface",
    "RecordingSurface",
    "RenderConfig",
    "render_paths",
    "render_svg_basic",
    "render_texts",
]
