import math
import numpy as np
from chromacss.conversions.to_oklab import (
    rgb_to_oklab, oklab_to_rgb, oklab_to_oklch, oklch_to_oklab,
    np_rgb_to_oklab, np_oklab_to_rgb, np_oklab_to_oklch, np_oklch_to_oklab,
)
from chromacss.types.color_types import RGB, Oklab, Oklch
from ..samples import samples_rgb_oklab, samples_rgb_oklch, rgb_grid

tolerance = 1e-3

def test_rgb_to_oklab():
    for (r, g, b), (l_exp, a_exp, b_exp) in samples_rgb_oklab.items():
        lab = rgb_to_oklab(RGB(r, g, b))
        assert abs(lab.l - l_exp) < tolerance
        assert abs(lab.a - a_exp) < tolerance
        assert abs(lab.b - b_exp) < tolerance

def test_rgb_to_oklch():
    for (r, g, b), (l_exp, c_exp, h_exp) in samples_rgb_oklch.items():
        lch = oklab_to_oklch(rgb_to_oklab(RGB(r, g, b)))
        assert abs(lch.l - l_exp) < tolerance
        assert abs(lch.c - c_exp) < tolerance
        assert abs(lch.h - h_exp) < 0.01

def test_white_is_achromatic():
    lab = rgb_to_oklab(RGB(255, 255, 255))
    assert abs(lab.l - 1.0) < 1e-6
    assert abs(lab.a) < 1e-6
    assert abs(lab.b) < 1e-6

def test_input_is_clamped_before_linearization():
    assert rgb_to_oklab(RGB(300, -20, 0)) == rgb_to_oklab(RGB(255, 0, 0))

def test_oklab_to_rgb_clamps_and_keeps_alpha():
    rgb = oklab_to_rgb(Oklab(0.5, 0.5, 0.0), 0.25)
    assert all(0 <= c <= 255 for c in (rgb.r, rgb.g, rgb.b))
    assert rgb.a == 0.25

    assert oklab_to_rgb(Oklab(0.5, 0.0, 0.0), 1.5).a == 1.0
    assert oklab_to_rgb(Oklab(0.5, 0.0, 0.0), -1).a == 0.0

def test_round_trip_rgb_oklab():
    for r, g, b in rgb_grid:
        out = oklab_to_rgb(rgb_to_oklab(RGB(r, g, b)))
        assert abs(round(out.r) - r) <= 1
        assert abs(round(out.g) - g) <= 1
        assert abs(round(out.b) - b) <= 1

def test_gray_hue_is_forced_to_zero():
    assert oklab_to_oklch(Oklab(0.5, 0.0, 0.0)).h == 0.0
    assert oklab_to_oklch(Oklab(0.5, 1e-13, -1e-13)).h == 0.0

def test_hue_is_normalized():
    assert abs(oklab_to_oklch(Oklab(0.5, 0.0, -0.1)).h - 270.0) < 1e-9
    assert abs(oklab_to_oklch(Oklab(0.5, -0.1, 0.0)).h - 180.0) < 1e-9
    for a, b in [(0.1, -1e-17), (-0.1, -1e-17), (0.01, -0.2)]:
        h = oklab_to_oklch(Oklab(0.5, a, b)).h
        assert 0.0 <= h < 360.0

def test_round_trip_oklab_oklch():
    for r, g, b in rgb_grid:
        lab = rgb_to_oklab(RGB(r, g, b))
        lch = oklab_to_oklch(lab)
        if lch.c < 1e-12:
            assert lch.h == 0.0
            continue
        back = oklch_to_oklab(lch)
        assert abs(back.l - lab.l) < 1e-9
        assert abs(back.a - lab.a) < 1e-9
        assert abs(back.b - lab.b) < 1e-9

def test_oklch_to_oklab():
    lab = oklch_to_oklab(Oklch(0.7, 0.1, 90.0))
    assert lab.l == 0.7
    assert abs(lab.a) < 1e-12
    assert abs(lab.b - 0.1) < 1e-12

def test_numpy_matches_scalar():
    the_matrix = np.array(rgb_grid, dtype=float)
    r, g, b = the_matrix[..., 0], the_matrix[..., 1], the_matrix[..., 2]

    lab = np_rgb_to_oklab(r, g, b)
    expected = np.array([rgb_to_oklab(RGB(*c)) for c in rgb_grid])
    assert np.allclose(lab, expected, atol=1e-9)

    rgb = np_oklab_to_rgb(lab[..., 0], lab[..., 1], lab[..., 2])
    assert np.allclose(np.round(rgb), the_matrix, atol=1)

    lch = np_oklab_to_oklch(lab[..., 0], lab[..., 1], lab[..., 2])
    expected_lch = np.array([tuple(oklab_to_oklch(Oklab(*row)))[:3] for row in lab])
    assert np.allclose(lch[..., :2], expected_lch[..., :2], atol=1e-9)
    chromatic = expected_lch[..., 1] > 1e-6
    assert np.allclose(lch[chromatic, 2], expected_lch[chromatic, 2], atol=1e-6)

    back = np_oklch_to_oklab(lch[..., 0], lch[..., 1], lch[..., 2])
    assert np.allclose(back, lab, atol=1e-9)

def test_overflowing_oklab_gives_finite_rgb():
    rgb = oklab_to_rgb(oklch_to_oklab(Oklch(0.5, 1e300, 0.0)))
    assert all(math.isfinite(c) and 0 <= c <= 255 for c in rgb[:3])

    lab = np_oklch_to_oklab(np.array([0.5]), np.array([1e300]), np.array([0.0]))
    with np.errstate(over="ignore", invalid="ignore"):
        out = np_oklab_to_rgb(lab[..., 0], lab[..., 1], lab[..., 2])
    assert np.all(np.isfinite(out))
