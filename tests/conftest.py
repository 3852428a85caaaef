"""Shared test fixtures."""

from __future__ import annotations

import pytest

from svgdraw.render.recording import RecordingSurface


# Signature-pad style drawing: clipPath extent, relative commands, implicit repeats
SIGNATURE_SVG = '''<?xml version="1.0" encoding="UTF-8" standalone="no"?>
<svg xmlns="http://www.w3.org/2000/svg" version="1.1" width="185" height="68">
  <clipPath id="clip"><rect x="0" y="0" width="185" height="68"/></clipPath>
  <path d="M 2 37 c 0 -0.5 0 -1 0 -1.5 l 2 -3 3 -4"/>
  <path d="M60,20 L70,25 80,30"/>
</svg>'''

# Floor plan style drawing: stylesheet, grouped paths, filled polygons, labels
PLAN_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="200" height="100" viewBox="0 0 200 100">
  <defs>
    <style type="text/css">
      .wall { stroke: #ff0000; stroke-width: 2px; fill: none }
      *.room { stroke: #00ff00; fill: #336699 }
      text.label { fill: #112233; font-weight: bold }
      .dashed { stroke: #0000ff; stroke-dasharray: 12, 6 }
      .blank { fill: #ffffff }
    </style>
  </defs>
  <path class="wall" d="M0,0 L200,0"/>
  <g>
    <path class="room" d="M10,10 L50,10 L50,50 L10,50 z"/>
    <path class="dashed" d="M0,90 L24,90"/>
  </g>
  <path class="blank" d="M100,10 L150,10 L150,50 z"/>
  <text class="label" transform="matrix(1 0 0 1 20 30)">Kitchen</text>
  <text class="label" transform="matrix(0 -1 1 0 80 60)" style="fill: #445566">
    <tspan>Living</tspan>
    <tspan>Room</tspan>
  </text>
</svg>'''

# One good path, one broken path
BROKEN_PATH_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="50" height="50">
  <path d="M0,0 L10,10"/>
  <path d="M0,0 L10"/>
  <path d="M5,5 C1,1 2,2 3,3"/>
</svg>'''

ZERO_EXTENT_SVG = '''<svg xmlns="http://www.w3.org/2000/svg">
  <clipPath><rect x="0" y="0" width="0" height="0"/></clipPath>
  <path d="M0,0 L10,10"/>
</svg>'''


@pytest.fixture
def signature_svg() -> str:
    return SIGNATURE_SVG


@pytest.fixture
def plan_svg() -> str:
    return PLAN_SVG


@pytest.fixture
def surface() -> RecordingSurface:
    return RecordingSurface()
