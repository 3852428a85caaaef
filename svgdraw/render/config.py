"""Render configuration — base sizes the document's styles are multiplied into."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class RenderConfig:
    # Line width for stroke-width 1, in surface units
    line_width: float = 0.1
    # Font size for a text scale of 1, in points
    font_size: float = 4.0
    # Line advance for multi-line text, as a multiple of the font size
    line_height_factor: float = 1.0
    # stroke-dasharray values are divided by this before drawing
    dash_divisor: float = 6.0
