"""Basic SVG parser — document bytes → SvgBasicDocument.

Understands a flat subset: <path>, <text> and <g> (one level) children of the
root, stylesheets in <style> (top level or under <defs>), and the drawing
extent from <clipPath><rect>, the root width/height, or the viewBox.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from pathlib import Path

from svgdraw.config import settings
from svgdraw.errors import ExtentError, PathParseError, SvgParseError
from svgdraw.svg.document import PathError, PathSegment, SvgBasicDocument, TextNode
from svgdraw.svg.path_parser import parse_path
from svgdraw.svg.style import StyleAttributes, merge
from svgdraw.svg.stylesheet import StyleResolver, parse_stylesheet
from svgdraw.svg.transform import decompose_transform

logger = logging.getLogger(__name__)


def _local(tag: str) -> str:
    return tag.rsplit("}", 1)[-1] if isinstance(tag, str) else ""


def _length(value: str | None, name: str) -> float:
    if value is None or not value.strip():
        return 0.0
    try:
        return float(value.strip().replace("px", "").replace("pt", ""))
    except ValueError:
        raise SvgParseError(f"invalid {name} value {value!r}") from None


def _root_length(root: ET.Element, name: str) -> float:
    """Root width/height; units other than px/pt count as missing."""
    try:
        return _length(root.get(name), name)
    except SvgParseError:
        logger.debug("Ignoring root %s %r, falling back to viewBox", name, root.get(name))
        return 0.0


def _extent(root: ET.Element) -> tuple[float, float, float, float]:
    """(x, y, width, height) of the drawing area."""
    for child in root:
        if _local(child.tag) != "clipPath":
            continue
        for rect in child:
            if _local(rect.tag) == "rect":
                return (
                    _length(rect.get("x"), "x"),
                    _length(rect.get("y"), "y"),
                    _length(rect.get("width"), "width"),
                    _length(rect.get("height"), "height"),
                )

    width = _root_length(root, "width")
    height = _root_length(root, "height")
    x = y = 0.0
    viewbox = root.get("viewBox")
    if viewbox:
        parts = viewbox.replace(",", " ").split()
        if len(parts) == 4:
            try:
                vx, vy, vw, vh = (float(p) for p in parts)
            except ValueError:
                raise SvgParseError(f"invalid viewBox {viewbox!r}") from None
            x, y = vx, vy
            if not width or not height:
                width, height = vw, vh
    return (x, y, width, height)


def _text_lines(elem: ET.Element) -> list[str]:
    """Non-empty text lines in document order: own text, <tspan> text, tails."""
    chunks = [elem.text]
    for sub in elem:
        if _local(sub.tag) == "tspan":
            chunks.append("".join(sub.itertext()))
        chunks.append(sub.tail)
    return [c.strip() for c in chunks if c and c.strip()]


def _collect(root: ET.Element) -> tuple[list[ET.Element], list[ET.Element], list[str]]:
    paths: list[ET.Element] = []
    texts: list[ET.Element] = []
    styles: list[str] = []

    def visit(elem: ET.Element) -> None:
        tag = _local(elem.tag)
        if tag == "path":
            paths.append(elem)
        elif tag == "text":
            texts.append(elem)
        elif tag == "style":
            styles.append("".join(elem.itertext()))

    for child in root:
        tag = _local(child.tag)
        if tag in ("g", "defs"):
            for sub in child:
                visit(sub)
        else:
            visit(child)
    return paths, texts, styles


def _text_node(elem: ET.Element, resolver: StyleResolver) -> TextNode:
    transform = elem.get("transform", "")
    class_name = elem.get("class", "")
    placement = decompose_transform(transform)
    element_style = StyleAttributes.from_declarations(elem.get("style", ""))
    return TextNode(
        transform=transform,
        lines=_text_lines(elem),
        class_name=class_name,
        element_style=element_style,
        style=merge(resolver.get(class_name), element_style),
        x=placement.x,
        y=placement.y,
        font_scale=placement.scale,
        rotation=placement.rotation,
    )


def parse_svg_basic(buf: bytes | str, *, strict: bool | None = None) -> SvgBasicDocument:
    """Parse a basic SVG document.

    Malformed paths are skipped and reported in ``path_errors`` unless
    ``strict`` is set, in which case the first one raises PathParseError.
    Raises SvgParseError for undecodable documents and ExtentError for an
    empty drawing area.
    """
    if strict is None:
        strict = settings.svgdraw_strict_paths
    if isinstance(buf, str):
        buf = buf.encode("utf-8")

    try:
        root = ET.fromstring(buf)
    except ET.ParseError as e:
        raise SvgParseError(f"malformed SVG document: {e}") from e
    if _local(root.tag) != "svg":
        raise SvgParseError(f"expected <svg> root element, got <{_local(root.tag)}>")

    x, y, width, height = _extent(root)
    if width <= 0 or height <= 0:
        raise ExtentError(width, height)

    path_elems, text_elems, style_blocks = _collect(root)

    segments: list[list[PathSegment]] = []
    path_errors: list[PathError] = []
    for index, elem in enumerate(path_elems):
        d = elem.get("d", "")
        class_name = elem.get("class", "")
        try:
            segments.append(parse_path(d, class_name))
        except PathParseError as e:
            if strict:
                raise
            logger.warning("Skipping path %d (class %r): %s", index, class_name, e)
            path_errors.append(PathError(index=index, d=d, class_name=class_name, message=str(e)))

    styles = parse_stylesheet(style_blocks)
    resolver = StyleResolver(styles)
    texts = [_text_node(elem, resolver) for elem in text_elems]

    logger.info(
        "Parsed basic SVG: %d paths (%d skipped), %d texts, %d selectors, extent %.0f×%.0f",
        len(segments),
        len(path_errors),
        len(texts),
        len(styles),
        width,
        height,
    )
    return SvgBasicDocument(
        width=width,
        height=height,
        x=x,
        y=y,
        segments=segments,
        styles=styles,
        texts=texts,
        path_errors=path_errors,
    )


def parse_svg_basic_file(path: str | Path, *, strict: bool | None = None) -> SvgBasicDocument:
    return parse_svg_basic(Path(path).read_bytes(), strict=strict)
