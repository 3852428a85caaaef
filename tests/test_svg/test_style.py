"""Tests for style attribute sets."""

from __future__ import annotations

from svgdraw.svg.style import StyleAttributes, merge, parse_hex_color


def test_stroke_and_fill_colors():
    style = StyleAttributes.from_declarations("stroke: #ff8000; fill: #102030")
    assert style.stroke == (255, 128, 0)
    assert style.is_stroke
    assert style.fill == (16, 32, 48)
    assert style.is_fill
    assert style.raw == {"stroke": "#ff8000", "fill": "#102030"}


def test_fill_none_disables_previous_fill():
    style = StyleAttributes()
    style.set("fill", "#000000")
    assert style.is_fill
    style.set("fill", "none")
    assert not style.is_fill
    assert style.get("fill") == "none"


def test_stroke_width_strips_px():
    style = StyleAttributes.from_declarations("stroke-width: 2.5px")
    assert style.stroke_width == 2.5


def test_default_stroke_width():
    assert StyleAttributes().stroke_width == 1.0


def test_dasharray_extracts_digit_tokens():
    style = StyleAttributes.from_declarations("stroke-dasharray: 12px, 6")
    assert style.dash_array == [12.0, 6.0]
    style.set("stroke-dasharray", "3 1")
    assert style.dash_array == [3.0, 1.0]


def test_baseline_shift_first_signed_integer():
    assert StyleAttributes.from_declarations("baseline-shift: -30%").baseline_shift == -30.0
    assert StyleAttributes.from_declarations("baseline-shift: super 20%").baseline_shift == 20.0


def test_font_weight_bold_only_for_literal():
    assert StyleAttributes.from_declarations("font-weight: bold").bold
    assert not StyleAttributes.from_declarations("font-weight: 700").bold


def test_opacity_is_clamped():
    assert StyleAttributes.from_declarations("opacity: 0.25").opacity == 0.25
    assert StyleAttributes.from_declarations("opacity: 3").opacity == 1.0


def test_malformed_values_are_warnings_not_errors():
    style = StyleAttributes.from_declarations("stroke: #ff0000")
    style.set("stroke", "#zz")
    style.set("stroke-width", "thick")
    style.set("baseline-shift", "sub")
    # Typed fields keep their previous values
    assert style.stroke == (255, 0, 0)
    assert style.stroke_width == 1.0
    assert style.baseline_shift == 0.0
    # Raw map still reflects what was written
    assert style.get("stroke") == "#zz"
    assert [w.property for w in style.warnings] == ["stroke", "stroke-width", "baseline-shift"]


def test_declaration_without_colon_is_a_warning():
    style = StyleAttributes.from_declarations("stroke #ff0000; fill: #00ff00")
    assert style.is_fill
    assert not style.is_stroke
    assert len(style.warnings) == 1


def test_unknown_property_kept_raw():
    style = StyleAttributes.from_declarations("text-anchor: middle")
    assert style.check("text-anchor", "middle")
    assert not style.check("text-anchor", "start")
    assert not style.check("font-family", "serif")


def test_short_hex_color():
    assert parse_hex_color("#f80") == (255, 136, 0)


def test_extend_incoming_values_win():
    base = StyleAttributes.from_declarations("stroke: #ff0000; stroke-width: 2")
    base.extend(StyleAttributes.from_declarations("stroke: #0000ff"))
    assert base.stroke == (0, 0, 255)
    assert base.stroke_width == 2.0


def test_merge_element_over_class():
    class_style = StyleAttributes.from_declarations("fill: #111111; font-weight: bold")
    element_style = StyleAttributes.from_declarations("fill: #222222")
    merged = merge(class_style, element_style)
    assert merged.fill == (0x22, 0x22, 0x22)
    assert merged.bold
    # Inputs untouched
    assert class_style.fill == (0x11, 0x11, 0x11)
    assert merged is not class_style


def test_merge_override_can_disable_fill():
    merged = merge(
        StyleAttributes.from_declarations("fill: #111111"),
        StyleAttributes.from_declarations("fill: none"),
    )
    assert not merged.is_fill
