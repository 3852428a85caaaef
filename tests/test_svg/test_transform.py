"""Tests for text transform decomposition."""

from __future__ import annotations

import math

import pytest

from svgdraw.svg.transform import TextPlacement, decompose_transform, matrix_values


def test_diagonal_fast_path():
    p = decompose_transform("matrix(1,0,0,2,10,20)")
    assert (p.x, p.y) == (10, 20)
    assert p.scale == 2
    assert p.rotation == 0


def test_space_separated_decimals():
    p = decompose_transform("matrix(0.5 0 0 0.75 12.5 -3.25)")
    assert (p.x, p.y, p.scale) == (12.5, -3.25, 0.75)


def test_small_b_uses_fast_path():
    p = decompose_transform("matrix(1 0.01 -0.01 1.5 0 0)")
    assert p.scale == 1.5
    assert p.rotation == 0


def test_rotation_uses_full_decomposition():
    angle = math.radians(30)
    a, b, c, d = 2 * math.cos(angle), 2 * math.sin(angle), -2 * math.sin(angle), 2 * math.cos(angle)
    p = decompose_transform(f"matrix({a:.6f} {b:.6f} {c:.6f} {d:.6f} 5.0 6.0)")
    assert (p.x, p.y) == (5.0, 6.0)
    assert p.scale == pytest.approx(2.0, abs=1e-5)
    assert p.rotation == pytest.approx(-30.0, abs=1e-4)


def test_quarter_turn():
    p = decompose_transform("matrix(0 -1 1 0 80 60)")
    assert p.scale == pytest.approx(1.0)
    assert p.rotation == pytest.approx(90.0)


@pytest.mark.parametrize("transform", ["", "translate(10 20)", "matrix(1 0 0 1 5)", "rotate(45)"])
def test_without_six_values_no_transform(transform):
    assert decompose_transform(transform) == TextPlacement()
    assert TextPlacement().scale == 1.0


def test_matrix_values_scans_any_position():
    assert matrix_values("matrix(1e0, -0.5, .5, 2, +3, 4)") == [1.0, -0.5, 0.5, 2.0, 3.0, 4.0]
