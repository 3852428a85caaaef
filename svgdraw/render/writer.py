"""Rendering pass — replays an SvgBasicDocument onto a DrawingSurface.

The surface's cursor position at entry is the origin for paths; document
coordinates are multiplied by ``scale``. Text anchors are placed at
``anchor * scale`` in surface coordinates and do not follow the cursor.
Style changes are pushed to the surface only when a property differs from the
value last applied. Problems found while drawing are latched on the surface,
never raised, and no call is issued once the surface reports an error.
"""

from __future__ import annotations

import logging

from svgdraw.render.config import RenderConfig
from svgdraw.render.dash import dash_segments
from svgdraw.render.surface import DrawingSurface, Point
from svgdraw.svg.document import PathSegment, SvgBasicDocument, TextNode
from svgdraw.svg.style import StyleAttributes
from svgdraw.svg.stylesheet import StyleResolver

logger = logging.getLogger(__name__)

WHITE = (255, 255, 255)


class StyleState:
    """Last style values applied to a surface, keyed by property name."""

    def __init__(self, surface: DrawingSurface, config: RenderConfig) -> None:
        self.surface = surface
        self.config = config
        self._applied: dict[str, str] = {}

    def _changed(self, key: str, value: str) -> bool:
        if self._applied.get(key) == value:
            return False
        self._applied[key] = value
        return True

    def apply(self, style: StyleAttributes) -> None:
        """Push the properties ``style`` declares that differ from the last applied.

        Undeclared properties keep their previous surface value: a class
        without ``stroke-width`` draws at whatever width the previous class set.
        """
        surface = self.surface
        stroke = style.get("stroke")
        if stroke is not None and style.is_stroke and self._changed("stroke", stroke):
            surface.set_draw_color(*style.stroke)
        width = style.get("stroke-width")
        if width is not None and self._changed("stroke-width", width):
            surface.set_line_width(self.config.line_width * style.stroke_width)
        fill = style.get("fill")
        if fill is not None and style.is_fill and self._changed("fill", fill):
            surface.set_fill_color(*style.fill)
            surface.set_text_color(*style.fill)
        opacity = style.get("opacity")
        if opacity is not None and self._changed("opacity", opacity):
            surface.set_alpha(style.opacity)

    def apply_font(self, style: StyleAttributes) -> None:
        weight = "bold" if style.bold else "normal"
        if self._changed("font-weight", weight):
            self.surface.set_font_style(style.bold)


def _draw_line(
    surface: DrawingSurface,
    start: Point,
    end: Point,
    style: StyleAttributes,
    config: RenderConfig,
) -> None:
    if len(style.dash_array) != 2:
        surface.line(start[0], start[1], end[0], end[1])
        return
    stroke, gap = (v / config.dash_divisor for v in style.dash_array)
    for x1, y1, x2, y2 in dash_segments(start[0], start[1], end[0], end[1], stroke, gap):
        if not surface.ok():
            return
        surface.line(x1, y1, x2, y2)


class _PathWriter:
    def __init__(
        self,
        surface: DrawingSurface,
        resolver: StyleResolver,
        state: StyleState,
        origin: Point,
        scale: float,
    ) -> None:
        self.surface = surface
        self.resolver = resolver
        self.state = state
        self.origin = origin
        self.scale = scale
        self.current: Point = origin

    def point(self, seg: PathSegment, pos: int) -> Point:
        return (
            self.origin[0] + self.scale * seg.args[pos],
            self.origin[1] + self.scale * seg.args[pos + 1],
        )

    def write(self, path: list[PathSegment]) -> None:
        surface = self.surface
        polygon: list[Point] | None = [] if path and path[0].is_polygon else None
        for seg in path:
            if not surface.ok():
                return
            style = self.resolver.get(seg.class_name)
            self.state.apply(style)
            if seg.cmd == "M":
                self.current = self.point(seg, 0)
                surface.set_xy(*self.current)
            elif seg.cmd == "L":
                end = self.point(seg, 0)
                _draw_line(surface, self.current, end, style, self.state.config)
                self.current = end
            elif seg.cmd == "C":
                cx0, cy0 = self.point(seg, 0)
                cx1, cy1 = self.point(seg, 2)
                end = self.point(seg, 4)
                surface.curve_cubic(self.current[0], self.current[1], cx0, cy0, cx1, cy1, end[0], end[1])
                self.current = end
            else:
                surface.set_error("Unexpected path command '%s'", seg.cmd)
                return
            if polygon is not None:
                polygon.append(self.current)

        # White fill counts as "no fill": the page is assumed to be white.
        if polygon and surface.ok() and tuple(surface.get_fill_color()) != WHITE:
            surface.polygon(polygon, "F")


def render_paths(
    doc: SvgBasicDocument,
    scale: float,
    surface: DrawingSurface,
    *,
    origin: Point | None = None,
    resolver: StyleResolver | None = None,
    state: StyleState | None = None,
    config: RenderConfig | None = None,
) -> None:
    config = config or RenderConfig()
    writer = _PathWriter(
        surface,
        resolver or StyleResolver(doc.styles),
        state or StyleState(surface, config),
        origin if origin is not None else surface.get_xy(),
        scale,
    )
    if doc.segments and surface.ok():
        surface.set_line_width(config.line_width)
    for path in doc.segments:
        if not surface.ok():
            break
        writer.write(path)


def _write_text(node: TextNode, scale: float, surface: DrawingSurface, state: StyleState) -> None:
    config = state.config
    style = node.style
    state.apply(style)
    state.apply_font(style)
    surface.set_font_size(config.font_size * node.font_scale)
    _, unit_size = surface.get_font_size()
    line_height = unit_size * config.line_height_factor
    centered = style.check("text-anchor", "middle")

    surface.transform_begin()
    surface.transform_translate(node.x * scale, node.y * scale)
    if node.rotation != 0:
        surface.transform_rotate(node.rotation, 0, 0)
    for i, line in enumerate(node.lines):
        if not surface.ok():
            return
        dx = 0.0
        if centered or style.baseline_shift:
            width = surface.get_string_width(line)
            if centered:
                dx -= width / 2
            dx += width * style.baseline_shift / 100
        surface.text(dx, i * line_height, line)
    surface.transform_end()


def render_texts(
    doc: SvgBasicDocument,
    scale: float,
    surface: DrawingSurface,
    *,
    state: StyleState | None = None,
    config: RenderConfig | None = None,
) -> None:
    state = state or StyleState(surface, config or RenderConfig())
    for node in doc.texts:
        if not surface.ok():
            break
        if not node.lines:
            continue
        _write_text(node, scale, surface, state)


def render_svg_basic(
    doc: SvgBasicDocument,
    scale: float,
    surface: DrawingSurface,
    config: RenderConfig | None = None,
) -> None:
    """Draw every path, then every text node, of ``doc`` onto ``surface``.

    ``scale`` converts document units to surface units. Returns nothing;
    failures are reported through ``surface.error``.
    """
    config = config or RenderConfig()
    state = StyleState(surface, config)
    render_paths(doc, scale, surface, state=state, config=config)
    render_texts(doc, scale, surface, state=state, config=config)
    logger.debug(
        "Rendered %d paths, %d texts at scale %.3f (surface ok: %s)",
        len(doc.segments),
        len(doc.texts),
        scale,
        surface.ok(),
    )
