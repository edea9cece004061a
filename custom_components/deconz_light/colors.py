"""Conversion between HSB colours and CIE 1931 xy chromaticity (sRGB, D65)."""

from __future__ import annotations

import colorsys

WHITE_POINT = (0.3127, 0.3290)

_RGB_TO_XYZ = (
    (0.4124, 0.3576, 0.1805),
    (0.2126, 0.7152, 0.0722),
    (0.0193, 0.1192, 0.9505),
)
_XYZ_TO_RGB = (
    (3.2406, -1.5372, -0.4986),
    (-0.9689, 1.8758, 0.0415),
    (0.0557, -0.2040, 1.0570),
)


def _linearize(channel: float) -> float:
    """Undo sRGB gamma companding."""

    if channel <= 0.04045:
        return channel / 12.92
    return ((channel + 0.055) / 1.055) ** 2.4


def _compand(channel: float) -> float:
    """Apply sRGB gamma companding."""

    if channel <= 0.0031308:
        return 12.92 * channel
    return 1.055 * channel ** (1 / 2.4) - 0.055


def _multiply(
    matrix: tuple[tuple[float, float, float], ...], vector: tuple[float, float, float]
) -> tuple[float, float, float]:
    """Apply a 3x3 colour matrix to ``vector``."""

    return (
        sum(m * v for m, v in zip(matrix[0], vector)),
        sum(m * v for m, v in zip(matrix[1], vector)),
        sum(m * v for m, v in zip(matrix[2], vector)),
    )


def hsb_to_xy(hue: float, saturation: float, brightness: float) -> tuple[float, float]:
    """Return the xy chromaticity of an HSB colour.

    ``hue`` is in degrees, ``saturation`` and ``brightness`` are percentages.
    Black has no chromaticity and maps to the D65 white point.
    """

    rgb = colorsys.hsv_to_rgb(
        (hue % 360) / 360.0, saturation / 100.0, brightness / 100.0
    )
    x_, y_, z_ = _multiply(_RGB_TO_XYZ, tuple(_linearize(c) for c in rgb))
    total = x_ + y_ + z_
    if total <= 0:
        return WHITE_POINT
    return (x_ / total, y_ / total)


def xy_to_hsb(x: float, y: float) -> tuple[float, float, float]:
    """Return the brightest HSB colour with chromaticity ``(x, y)``.

    Components outside the sRGB gamut are clipped.
    """

    if y <= 0:
        x, y = WHITE_POINT
    big_y = 1.0
    big_x = big_y / y * x
    big_z = big_y / y * (1.0 - x - y)
    linear = _multiply(_XYZ_TO_RGB, (big_x, big_y, big_z))
    linear = tuple(max(0.0, c) for c in linear)
    peak = max(linear)
    if peak <= 0:
        return (0.0, 0.0, 0.0)
    rgb = tuple(min(1.0, max(0.0, _compand(c / peak))) for c in linear)
    hue, saturation, value = colorsys.rgb_to_hsv(*rgb)
    return (hue * 360.0, saturation * 100.0, value * 100.0)
