from chromacss import ColorValue, parse_color
from chromacss.types.color_types import RGB, HSL, Oklch
from chromacss.types.format_type import CssFormat


def test_rgb_with_alpha():
    """Replacing alpha on an RGB color keeps the channels."""
    color = parse_color("#FF0000")
    translucent = color.with_alpha(0.5)
    assert isinstance(translucent, ColorValue)
    assert translucent.to_rgb() == RGB(255, 0, 0, 0.5)
    assert translucent.to_css() == "rgb(255 0 0 / 0.5)"
    assert translucent.to_hex() == "#FF000080"


def test_with_alpha_leaves_original_untouched():
    color = parse_color("rgb(1 2 3 / 0.25)")
    color.with_alpha(0.75)
    assert color.alpha == 0.25
    assert color.to_css() == "rgb(1 2 3 / 0.25)"


def test_with_alpha_clamps():
    color = parse_color("#000")
    assert color.with_alpha(2).alpha == 1.0
    assert color.with_alpha(-1).alpha == 0.0
    assert color.with_alpha(2).to_css() == "rgb(0 0 0)"


def test_oklch_with_alpha():
    """Alpha edits stay in the parsed representation."""
    color = parse_color("oklch(70% 0.1 30)").with_alpha(0.5)
    assert color.materialized == {"oklch"}
    assert color.to_oklch() == Oklch(0.7, 0.1, 30.0, 0.5)
    assert color.to_css() == "oklch(70% 0.1 30 / 0.5)"
    assert color.preferred == CssFormat.OKLCH


def test_hsl_with_alpha():
    color = parse_color("hsl(120 100% 50%)").with_alpha(0.2)
    assert color.to_hsl() == HSL(120.0, 100.0, 50.0, 0.2)
    assert color.to_rgb() == RGB(0, 255, 0, 0.2)


def test_p3_with_alpha():
    color = parse_color("color(display-p3 1 0 0)").with_alpha(0.6)
    assert color.to_css() == "color(display-p3 1 0 0 / 0.6)"


def test_with_alpha_when_preferred_is_not_held():
    """Without the preferred representation, the held one is edited."""
    color = ColorValue(hsl=HSL(0.0, 100.0, 50.0), preferred="rgb")
    translucent = color.with_alpha(0.5)
    assert translucent.preferred == CssFormat.RGB
    assert translucent.materialized == {"hsl"}
    assert translucent.to_css() == "rgb(255 0 0 / 0.5)"
