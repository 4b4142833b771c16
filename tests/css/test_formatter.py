import pytest
from chromacss.css.formatter import (
    trim_float, format_hex, format_rgb_css, format_hsl_css, format_oklch_css, format_p3_css,
    format_css,
)
from chromacss.types.color_types import RGB, HSL, Oklch, P3
from chromacss.types.format_type import CssFormat

def test_trim_float():
    assert trim_float(0.5) == "0.5"
    assert trim_float(1.0) == "1"
    assert trim_float(0.12345) == "0.1235"
    assert trim_float(0.10004) == "0.1"
    assert trim_float(120.0) == "120"
    assert trim_float(100.0) == "100"
    assert trim_float(0.0) == "0"

def test_trim_float_never_emits_negative_zero():
    assert trim_float(-0.0) == "0"
    assert trim_float(-0.00001) == "0"
    assert trim_float(-0.25) == "-0.25"

def test_format_hex():
    assert format_hex(RGB(255, 0, 0)) == "#FF0000"
    assert format_hex(RGB(10, 171, 205)) == "#0AABCD"
    assert format_hex(RGB(255, 0, 0, 0.5)) == "#FF000080"
    assert format_hex(RGB(0, 0, 0, 0.0)) == "#00000000"

def test_format_hex_clamps_and_rounds():
    assert format_hex(RGB(300, -5, 127.5)) == "#FF0080"

def test_format_rgb_css():
    assert format_rgb_css(RGB(255, 0, 0)) == "rgb(255 0 0)"
    assert format_rgb_css(RGB(255, 0, 0, 0.5)) == "rgb(255 0 0 / 0.5)"
    assert format_rgb_css(RGB(127.5, 300, -1)) == "rgb(128 255 0)"

def test_alpha_segment_is_omitted_when_opaque():
    assert format_rgb_css(RGB(0, 0, 0, 1.0)) == "rgb(0 0 0)"
    assert format_rgb_css(RGB(0, 0, 0, 2.0)) == "rgb(0 0 0)"
    assert format_rgb_css(RGB(0, 0, 0, 0.0)) == "rgb(0 0 0 / 0)"

def test_format_hsl_css():
    assert format_hsl_css(HSL(120.0, 100.0, 50.0)) == "hsl(120 100% 50%)"
    assert format_hsl_css(HSL(209.76378, 49.80392, 50.0, 0.25)) == "hsl(209.7638 49.8039% 50% / 0.25)"

def test_format_oklch_css():
    assert format_oklch_css(Oklch(0.7, 0.1, 30.0)) == "oklch(70% 0.1 30)"
    assert format_oklch_css(Oklch(0.627955, 0.257683, 29.2339, 0.8)) == "oklch(62.7955% 0.2577 29.2339 / 0.8)"

def test_format_p3_css():
    assert format_p3_css(P3(1.0, 0.0, 0.0)) == "color(display-p3 1 0 0)"
    assert format_p3_css(P3(0.91753, 0.20026, 0.13858, 0.5)) == "color(display-p3 0.9175 0.2003 0.1386 / 0.5)"

def test_format_css_dispatch():
    assert format_css(RGB(255, 0, 0), CssFormat.RGB) == "rgb(255 0 0)"
    assert format_css(RGB(255, 0, 0), "hex") == "#FF0000"
    assert format_css(HSL(0.0, 100.0, 50.0), "hsl") == "hsl(0 100% 50%)"
    assert format_css(Oklch(0.5, 0.0, 0.0), CssFormat.OKLCH) == "oklch(50% 0 0)"
    assert format_css(P3(0.5, 0.5, 0.5), "p3") == "color(display-p3 0.5 0.5 0.5)"

def test_format_css_unknown_format():
    with pytest.raises(ValueError):
        format_css(RGB(0, 0, 0), "lab")

def test_hue_rounding_up_to_360_prints_zero():
    assert format_oklch_css(Oklch(0.5, 0.1, 359.99999)) == "oklch(50% 0.1 0)"
    assert format_hsl_css(HSL(359.99996, 50.0, 50.0)) == "hsl(0 50% 50%)"
    assert format_hsl_css(HSL(359.99994, 50.0, 50.0)) == "hsl(359.9999 50% 50%)"
