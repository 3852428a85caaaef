"""SvgBasicDocument — the decoded form of a basic SVG, consumed by the renderer."""

from __future__ import annotations

from dataclasses import dataclass, field

from svgdraw.svg.style import StyleAttributes
from svgdraw.svg.stylesheet import StyleSheet

ARG_SLOTS = 6


@dataclass(frozen=True)
class PathSegment:
    """One drawing command with absolute coordinates once parsing is done.

    ``args`` always has 6 slots: (x, y) for M/L, (cx0, cy0, cx1, cy1, x, y) for C.
    """

    cmd: str
    args: tuple[float, float, float, float, float, float] = (0.0,) * ARG_SLOTS
    class_name: str = ""
    is_polygon: bool = False

    @property
    def end(self) -> tuple[float, float]:
        if self.cmd in ("C", "c"):
            return (self.args[4], self.args[5])
        return (self.args[0], self.args[1])


@dataclass(frozen=True)
class TextNode:
    transform: str
    lines: list[str]
    class_name: str
    # Element-level declarations (style="...")
    element_style: StyleAttributes
    # element_style merged over the class style
    style: StyleAttributes
    x: float = 0.0
    y: float = 0.0
    font_scale: float = 1.0
    rotation: float = 0.0

    @property
    def xy(self) -> tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class PathError:
    """A <path> skipped because its data could not be parsed."""

    index: int
    d: str
    class_name: str
    message: str


@dataclass(frozen=True)
class SvgBasicDocument:
    width: float
    height: float
    x: float = 0.0
    y: float = 0.0
    segments: list[list[PathSegment]] = field(default_factory=list)
    styles: StyleSheet = field(default_factory=StyleSheet)
    texts: list[TextNode] = field(default_factory=list)
    path_errors: list[PathError] = field(default_factory=list)

    @property
    def segment_count(self) -> int:
        return sum(len(path) for path in self.segments)
