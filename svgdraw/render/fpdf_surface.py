"""FpdfSurface — DrawingSurface backed by an fpdf2 page.

Translations are tracked here and added to every coordinate; rotations use
``FPDF.rotation`` scopes. A translate issued inside a rotated scope is applied
in page coordinates, which is all the renderer needs (it always translates
before rotating).
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from contextlib import ExitStack

from fpdf import FPDF
from fpdf.errors import FPDFException

from svgdraw.render.surface import RGB, LatchingSurface, Point, latched

logger = logging.getLogger(__name__)


class FpdfSurface(LatchingSurface):
    latched_exceptions = (FPDFException,)

    def __init__(self, pdf: FPDF | None = None, *, font_family: str = "helvetica") -> None:
        super().__init__()
        if pdf is None:
            pdf = FPDF(unit="mm", format="A4")
            pdf.add_page()
        self.pdf = pdf
        self.pdf.set_font(font_family)
        self._fill: RGB = (0, 0, 0)
        self._alpha = 1.0
        self._offset: Point = (0.0, 0.0)
        self._scopes: list[tuple[ExitStack, Point]] = []

    def _page(self, x: float, y: float) -> Point:
        return (x + self._offset[0], y + self._offset[1])

    def _opacity(self) -> ExitStack:
        stack = ExitStack()
        if self._alpha < 1.0:
            stack.enter_context(self.pdf.local_context(fill_opacity=self._alpha, stroke_opacity=self._alpha))
        return stack

    def output(self) -> bytes:
        return bytes(self.pdf.output())

    # -- queries ----------------------------------------------------------

    def get_xy(self) -> Point:
        return (self.pdf.get_x(), self.pdf.get_y())

    def get_fill_color(self) -> RGB:
        return self._fill

    def get_line_width(self) -> float:
        return self.pdf.line_width

    def get_font_size(self) -> tuple[float, float]:
        return (self.pdf.font_size_pt, self.pdf.font_size)

    def get_string_width(self, text: str) -> float:
        return self.pdf.get_string_width(text)

    # -- state ------------------------------------------------------------

    @latched
    def set_xy(self, x: float, y: float) -> None:
        self.pdf.set_xy(x, y)

    @latched
    def set_draw_color(self, r: int, g: int, b: int) -> None:
        self.pdf.set_draw_color(r, g, b)

    @latched
    def set_fill_color(self, r: int, g: int, b: int) -> None:
        self.pdf.set_fill_color(r, g, b)
        self._fill = (r, g, b)

    @latched
    def set_text_color(self, r: int, g: int, b: int) -> None:
        self.pdf.set_text_color(r, g, b)

    @latched
    def set_line_width(self, width: float) -> None:
        self.pdf.set_line_width(width)

    @latched
    def set_font_size(self, size_pt: float) -> None:
        self.pdf.set_font_size(size_pt)

    @latched
    def set_font_style(self, bold: bool) -> None:
        self.pdf.set_font(style="B" if bold else "")

    @latched
    def set_alpha(self, alpha: float) -> None:
        self._alpha = alpha

    # -- drawing ----------------------------------------------------------

    @latched
    def line(self, x1: float, y1: float, x2: float, y2: float) -> None:
        with self._opacity():
            self.pdf.line(*self._page(x1, y1), *self._page(x2, y2))

    @latched
    def curve_cubic(
        self, x0: float, y0: float, cx0: float, cy0: float, cx1: float, cy1: float, x1: float, y1: float
    ) -> None:
        points = [self._page(x0, y0), self._page(cx0, cy0), self._page(cx1, cy1), self._page(x1, y1)]
        with self._opacity():
            self.pdf.bezier(points, style="D")

    @latched
    def polygon(self, points: Sequence[Point], style: str = "F") -> None:
        with self._opacity():
            self.pdf.polygon([self._page(x, y) for x, y in points], style=style)

    @latched
    def text(self, x: float, y: float, text: str) -> None:
        with self._opacity():
            self.pdf.text(*self._page(x, y), text)

    # -- transforms -------------------------------------------------------

    @latched
    def transform_begin(self) -> None:
        self._scopes.append((ExitStack(), self._offset))

    @latched
    def transform_translate(self, tx: float, ty: float) -> None:
        self._offset = self._page(tx, ty)

    @latched
    def transform_rotate(self, angle: float, x: float, y: float) -> None:
        if not self._scopes:
            self.set_error("transform_rotate outside a transform scope")
            return
        stack, _ = self._scopes[-1]
        stack.enter_context(self.pdf.rotation(angle, *self._page(x, y)))

    @latched
    def transform_end(self) -> None:
        if not self._scopes:
            self.set_error("transform_end without matching transform_begin")
            return
        stack, self._offset = self._scopes.pop()
        stack.close()
        logger.debug("Closed transform scope (depth %d)", len(self._scopes))
