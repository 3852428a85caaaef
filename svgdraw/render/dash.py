"""Dashed line decomposition.

A line is cut into periods of ``stroke + gap``; only the stroke part of each
period is drawn. The leftover after the last full period is drawn up to the
stroke length. Algorithm after
https://deepanjandas.wordpress.com/2010/06/17/draw-dashed-line-in-flash/
"""

from __future__ import annotations

import math

import numpy as np

Segment = tuple[float, float, float, float]

# Leftovers shorter than this are floating-point noise, not a dash.
_MIN_REMAINDER = 1e-9


def line_length(x1: float, y1: float, x2: float, y2: float) -> float:
    return math.hypot(x2 - x1, y2 - y1)


def dash_segments(x1: float, y1: float, x2: float, y2: float, stroke: float, gap: float) -> list[Segment]:
    """Drawn sub-segments of the line (x1, y1) → (x2, y2) for a stroke/gap pattern.

    A non-positive period yields the solid line.
    """
    period = stroke + gap
    if period <= 0 or stroke <= 0:
        return [(x1, y1, x2, y2)]

    start = np.array([x1, y1], dtype=np.float64)
    delta = np.array([x2 - x1, y2 - y1], dtype=np.float64)
    length = float(np.linalg.norm(delta))
    if length == 0:
        return []
    direction = delta / length

    segments: list[Segment] = []
    count = int(math.floor(abs(length / period)))
    for i in range(count):
        a = start + direction * (i * period)
        b = a + direction * stroke
        segments.append((float(a[0]), float(a[1]), float(b[0]), float(b[1])))

    remainder = length - count * period
    if remainder > _MIN_REMAINDER:
        a = start + direction * (count * period)
        b = a + direction * min(stroke, remainder)
        segments.append((float(a[0]), float(a[1]), float(b[0]), float(b[1])))
    return segments
