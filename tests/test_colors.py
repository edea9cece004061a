"""Tests for HSB and CIE xy conversions."""

from __future__ import annotations

import pytest

from custom_components.deconz_light.colors import WHITE_POINT, hsb_to_xy, xy_to_hsb


def test_black_maps_to_white_point() -> None:
    """Black carries no chromaticity."""

    assert hsb_to_xy(0, 0, 0) == WHITE_POINT


def test_white_is_d65() -> None:
    """Full white lands on the D65 white point."""

    x, y = hsb_to_xy(0, 0, 100)
    assert x == pytest.approx(0.3127, abs=0.002)
    assert y == pytest.approx(0.3290, abs=0.002)


def test_red_primary() -> None:
    """Pure red matches the sRGB red primary."""

    x, y = hsb_to_xy(0, 100, 100)
    assert x == pytest.approx(0.64, abs=0.01)
    assert y == pytest.approx(0.33, abs=0.01)


def test_xy_to_hsb_red() -> None:
    """The red primary converts back to a saturated red."""

    hue, saturation, brightness = xy_to_hsb(0.64, 0.33)
    assert hue < 5 or hue > 355
    assert saturation > 95
    assert brightness == pytest.approx(100.0)


def test_green_round_trip() -> None:
    """Colours inside the gamut survive a round trip."""

    x, y = hsb_to_xy(120, 100, 100)
    hue, saturation, _ = xy_to_hsb(x, y)
    assert hue == pytest.approx(120.0, abs=1.0)
    assert saturation == pytest.approx(100.0, abs=1.0)


def test_degenerate_y_falls_back_to_white() -> None:
    """A zero y coordinate is treated as white."""

    _, saturation, brightness = xy_to_hsb(0.5, 0.0)
    assert saturation == pytest.approx(0.0, abs=1.0)
    assert brightness == pytest.approx(100.0)
