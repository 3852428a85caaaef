"""Style attribute sets — raw CSS-like declarations plus their typed values.

A StyleAttributes keeps the declarations exactly as written (``raw``) and
derives typed fields from them on every ``set``. Malformed values never raise:
the typed field keeps its previous value and a StyleWarning is recorded.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

RGB = tuple[int, int, int]

_DIGITS_RE = re.compile(r"\d+")
_SIGNED_INT_RE = re.compile(r"-?\d+")

DEFAULT_STROKE_WIDTH = 1.0


@dataclass(frozen=True)
class StyleWarning:
    property: str
    value: str
    reason: str


def parse_hex_color(value: str) -> RGB:
    """Decode ``#rrggbb`` (or ``#rgb``) into a byte triple. Raises ValueError."""
    digits = value.strip().replace("#", "")
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    raw = bytes.fromhex(digits)
    if len(raw) < 3:
        raise ValueError(f"expected 3 color components, got {len(raw)}")
    return (raw[0], raw[1], raw[2])


@dataclass
class StyleAttributes:
    """Declarations for one selector or element, with typed views kept in sync."""

    raw: dict[str, str] = field(default_factory=dict)
    stroke: RGB = (0, 0, 0)
    fill: RGB = (0, 0, 0)
    is_stroke: bool = False
    is_fill: bool = False
    stroke_width: float = DEFAULT_STROKE_WIDTH
    dash_array: list[float] = field(default_factory=list)
    baseline_shift: float = 0.0
    bold: bool = False
    opacity: float = 1.0
    warnings: list[StyleWarning] = field(default_factory=list)

    @classmethod
    def from_declarations(cls, text: str) -> "StyleAttributes":
        style = cls()
        style.append(text)
        return style

    def get(self, key: str) -> str | None:
        return self.raw.get(key)

    def check(self, key: str, value: str) -> bool:
        """True if the declaration ``key`` exists and equals ``value``."""
        return self.raw.get(key) == value

    def append(self, text: str) -> None:
        """Apply a ``prop: val; prop: val`` declaration list."""
        for decl in text.split(";"):
            if not decl.strip():
                continue
            key, sep, value = decl.partition(":")
            if not sep:
                self._warn(key.strip(), "", "declaration without ':'")
                continue
            self.set(key.strip(), value.strip())

    def set(self, key: str, value: str) -> None:
        self.raw[key] = value
        try:
            self._derive(key, value)
        except ValueError as e:
            self._warn(key, value, str(e))

    def extend(self, other: "StyleAttributes") -> None:
        """Merge ``other``'s declarations into this style; incoming values win."""
        for key, value in other.raw.items():
            self.set(key, value)

    def copy(self) -> "StyleAttributes":
        clone = StyleAttributes()
        clone.extend(self)
        return clone

    def _derive(self, key: str, value: str) -> None:
        if key == "stroke":
            if value == "none":
                self.is_stroke = False
            else:
                self.stroke = parse_hex_color(value)
                self.is_stroke = True
        elif key == "fill":
            if value == "none":
                self.is_fill = False
            else:
                self.fill = parse_hex_color(value)
                self.is_fill = True
        elif key == "stroke-width":
            self.stroke_width = float(value.replace("px", ""))
        elif key == "stroke-dasharray":
            self.dash_array = [float(tok) for tok in _DIGITS_RE.findall(value)]
        elif key == "baseline-shift":
            m = _SIGNED_INT_RE.search(value)
            if m is None:
                raise ValueError("no integer found")
            self.baseline_shift = float(m.group(0))
        elif key == "font-weight":
            self.bold = value == "bold"
        elif key == "opacity":
            self.opacity = min(1.0, max(0.0, float(value)))

    def _warn(self, key: str, value: str, reason: str) -> None:
        logger.debug("Ignoring style value %s=%r: %s", key, value, reason)
        self.warnings.append(StyleWarning(property=key, value=value, reason=reason))


def merge(base: StyleAttributes, override: StyleAttributes) -> StyleAttributes:
    """Return a new style: ``base`` with ``override``'s declarations on top."""
    merged = base.copy()
    merged.extend(override)
    return merged
