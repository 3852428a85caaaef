"""Text transform decomposition — affine matrix → translation, uniform scale, rotation."""

from __future__ import annotations

import re
from dataclasses import dataclass

import numpy as np

# Off-diagonal magnitude below which a matrix counts as axis-aligned.
DIAGONAL_TOLERANCE = 0.02

_NUMBER_RE = re.compile(r"[-+]?(?:\d+\.\d*|\.\d+|\d+)(?:[eE][-+]?\d+)?")


@dataclass(frozen=True)
class TextPlacement:
    x: float = 0.0
    y: float = 0.0
    scale: float = 1.0
    # Counter-clockwise, degrees
    rotation: float = 0.0


def matrix_values(transform: str) -> list[float] | None:
    """The six matrix values found anywhere in ``transform``, or None."""
    values = [float(tok) for tok in _NUMBER_RE.findall(transform or "")]
    if len(values) != 6:
        return None
    return values


def decompose_transform(transform: str, tolerance: float = DIAGONAL_TOLERANCE) -> TextPlacement:
    """Split ``matrix(a b c d e f)`` into placement parameters.

    Near-diagonal matrices use ``d`` as the scale directly. Anything else is
    treated as rotation times uniform scale. Skew is not supported.
    """
    values = matrix_values(transform)
    if values is None:
        return TextPlacement()
    a, b, c, d, e, f = values
    if (b == 0 and c == 0) or abs(b) < tolerance:
        return TextPlacement(x=e, y=f, scale=d)

    m = np.array([[a, c], [b, d]])
    scale = float(np.hypot(m[1, 0], m[1, 1]))
    # SVG is y-down: a positive SVG angle turns clockwise on the page.
    rotation = -float(np.degrees(np.arctan2(m[1, 0], m[0, 0])))
    return TextPlacement(x=e, y=f, scale=scale, rotation=rotation)
