"""Drawing surface protocol and the shared first-error latch.

The renderer only talks to a surface through ``DrawingSurface``. Surfaces
latch the first error reported to them; once latched, every drawing or
state-changing call is a no-op and ``ok()`` stays False.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable, Sequence
from typing import Any, Protocol, TypeVar, runtime_checkable

logger = logging.getLogger(__name__)

Point = tuple[float, float]
RGB = tuple[int, int, int]

F = TypeVar("F", bound=Callable[..., Any])


@runtime_checkable
class DrawingSurface(Protocol):
    def ok(self) -> bool: ...

    def set_error(self, fmt: str, *args: Any) -> None: ...

    @property
    def error(self) -> str | None: ...

    def get_xy(self) -> Point: ...

    def set_xy(self, x: float, y: float) -> None: ...

    def line(self, x1: float, y1: float, x2: float, y2: float) -> None: ...

    def curve_cubic(
        self, x0: float, y0: float, cx0: float, cy0: float, cx1: float, cy1: float, x1: float, y1: float
    ) -> None: ...

    def polygon(self, points: Sequence[Point], style: str = "F") -> None: ...

    def set_draw_color(self, r: int, g: int, b: int) -> None: ...

    def set_fill_color(self, r: int, g: int, b: int) -> None: ...

    def get_fill_color(self) -> RGB: ...

    def set_text_color(self, r: int, g: int, b: int) -> None: ...

    def set_line_width(self, width: float) -> None: ...

    def get_line_width(self) -> float: ...

    def set_font_size(self, size_pt: float) -> None: ...

    def get_font_size(self) -> tuple[float, float]:
        """(size in points, size in user units)"""
        ...

    def set_font_style(self, bold: bool) -> None: ...

    def set_alpha(self, alpha: float) -> None: ...

    def get_string_width(self, text: str) -> float: ...

    def text(self, x: float, y: float, text: str) -> None: ...

    def transform_begin(self) -> None: ...

    def transform_translate(self, tx: float, ty: float) -> None: ...

    def transform_rotate(self, angle: float, x: float, y: float) -> None: ...

    def transform_end(self) -> None: ...


def latched(method: F) -> F:
    """Skip the call once an error is latched; latch the surface's own failures."""

    @functools.wraps(method)
    def wrapper(self: "LatchingSurface", *args: Any, **kwargs: Any) -> Any:
        if self._error is not None:
            return None
        try:
            return method(self, *args, **kwargs)
        except self.latched_exceptions as e:
            self.set_error("%s: %s", method.__name__, e)
            return None

    return wrapper  # type: ignore[return-value]


class LatchingSurface:
    """Base for surfaces: stores the first error, ignores later ones."""

    # Exceptions from the backing device that are latched instead of raised
    latched_exceptions: tuple[type[Exception], ...] = ()

    def __init__(self) -> None:
        self._error: str | None = None

    def ok(self) -> bool:
        return self._error is None

    @property
    def error(self) -> str | None:
        return self._error

    def set_error(self, fmt: str, *args: Any) -> None:
        if self._error is not None:
            return
        self._error = fmt % args if args else fmt
        logger.warning("Surface error latched: %s", self._error)
