"""RecordingSurface — an in-memory drawing surface that records every call.

Useful as the output of the HTTP API (the ordered primitive list) and for
inspecting what the renderer did. Keeps the same state a page writer would:
cursor, colors, line width, font size and weight, alpha.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from svgdraw.render.surface import RGB, LatchingSurface, Point, latched


@dataclass(frozen=True)
class DrawOp:
    name: str
    args: tuple[Any, ...] = ()


@dataclass
class RecordingSurface(LatchingSurface):
    x: float = 0.0
    y: float = 0.0
    draw_color: RGB = (0, 0, 0)
    fill_color: RGB = (0, 0, 0)
    text_color: RGB = (0, 0, 0)
    line_width: float = 0.2
    font_size_pt: float = 12.0
    # Points per user unit
    k: float = 1.0
    # Advance of one character as a fraction of the font size
    char_width: float = 0.5
    bold: bool = False
    alpha: float = 1.0
    ops: list[DrawOp] = field(default_factory=list)
    _depth: int = field(default=0, init=False, repr=False)

    def __post_init__(self) -> None:
        LatchingSurface.__init__(self)

    def _record(self, name: str, *args: Any) -> None:
        self.ops.append(DrawOp(name, args))

    def names(self) -> list[str]:
        return [op.name for op in self.ops]

    def find(self, name: str) -> list[DrawOp]:
        return [op for op in self.ops if op.name == name]

    # -- queries ----------------------------------------------------------

    def get_xy(self) -> Point:
        return (self.x, self.y)

    def get_fill_color(self) -> RGB:
        return self.fill_color

    def get_line_width(self) -> float:
        return self.line_width

    def get_font_size(self) -> tuple[float, float]:
        return (self.font_size_pt, self.font_size_pt / self.k)

    def get_string_width(self, text: str) -> float:
        return len(text) * self.char_width * self.font_size_pt / self.k

    # -- state ------------------------------------------------------------

    @latched
    def set_xy(self, x: float, y: float) -> None:
        self.x, self.y = x, y
        self._record("set_xy", x, y)

    @latched
    def set_draw_color(self, r: int, g: int, b: int) -> None:
        self.draw_color = (r, g, b)
        self._record("set_draw_color", r, g, b)

    @latched
    def set_fill_color(self, r: int, g: int, b: int) -> None:
        self.fill_color = (r, g, b)
        self._record("set_fill_color", r, g, b)

    @latched
    def set_text_color(self, r: int, g: int, b: int) -> None:
        self.text_color = (r, g, b)
        self._record("set_text_color", r, g, b)

    @latched
    def set_line_width(self, width: float) -> None:
        self.line_width = width
        self._record("set_line_width", width)

    @latched
    def set_font_size(self, size_pt: float) -> None:
        self.font_size_pt = size_pt
        self._record("set_font_size", size_pt)

    @latched
    def set_font_style(self, bold: bool) -> None:
        self.bold = bold
        self._record("set_font_style", bold)

    @latched
    def set_alpha(self, alpha: float) -> None:
        self.alpha = alpha
        self._record("set_alpha", alpha)

    # -- drawing ----------------------------------------------------------

    @latched
    def line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        self._record("line", x1, y1, x2, y2)

    @latched
    def curve_cubic(
        self, x0: float, y0: float, cx0: float, cy0: float, cx1: float, cy1: float, x1: float, y1: float
    ) -> None:
        self._record("curve_cubic", x0, y0, cx0, cy0, cx1, cy1, x1, y1)

    @latched
    def polygon(self, points: Sequence[Point], style: str = "F") -> None:
        self._record("polygon", tuple(points), style)

    @latched
    def text(self, x: float, y: float, text: str) -> None:
        self._record("text", x, y, text)

    # -- transforms -------------------------------------------------------

    @latched
    def transform_begin(self) -> None:
        self._depth += 1
        self._record("transform_begin")

    @latched
    def transform_translate(self, tx: float, ty: float) -> None:
        self._record("transform_translate", tx, ty)

    @latched
    def transform_rotate(self, angle: float, x: float, y: float) -> None:
        self._record("transform_rotate", angle, x, y)

    @latched
    def transform_end(self) -> None:
        if self._depth == 0:
            self.set_error("transform_end without matching transform_begin")
            return
        self._depth -= 1
        self._record("transform_end")
