"""svgdraw — basic SVG paths, text and styles replayed onto a page-drawing surface."""

from svgdraw.errors import ExtentError, PathParseError, SvgParseError
from svgdraw.render.writer import render_svg_basic
from svgdraw.svg.document import PathSegment, SvgBasicDocument, TextNode
from svgdraw.svg.parser import parse_svg_basic, parse_svg_basic_file

__version__ = "0.1.0"

__all__ = [
    "ExtentError",
    "PathParseError",
    "PathSegment",
    "SvgBasicDocument",
    "SvgParseError",
    "TextNode",
    "parse_svg_basic",
    "parse_svg_basic_file",
    "render_svg_basic",
]
