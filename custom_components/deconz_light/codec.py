"""Conversions between device units and channel units.

Every conversion is lossy: ``to_percent(from_percent(p))`` may differ from
``p`` by one unit because brightness is rounded up on the way in and down on
the way out. Out-of-range results are clamped and logged, never raised.
"""

from __future__ import annotations

import logging
import math

from .const import BRIGHTNESS_FACTOR, CT_MAX, CT_MIN, HUE_FACTOR

_LOGGER = logging.getLogger(__name__)

_BRI_MAX = 255
_HUE_MAX = 65535


def _clamp(value: int, minimum: int, maximum: int, source: float) -> int:
    """Coerce ``value`` into ``[minimum, maximum]``, logging any correction."""

    if minimum <= value <= maximum:
        return value
    _LOGGER.debug("received value %s (converted to %s). Coercing.", source, value)
    return max(minimum, min(maximum, value))


def to_percent(bri: int) -> int:
    """Convert a device brightness (0-255) to a percentage."""

    return _clamp(math.ceil(bri / BRIGHTNESS_FACTOR), 0, 100, bri)


def from_percent(percent: float) -> int:
    """Convert a percentage to a device brightness (0-255)."""

    return _clamp(math.floor(percent * BRIGHTNESS_FACTOR), 0, _BRI_MAX, percent)


def hue_to_degrees(hue: int) -> float:
    """Convert a device hue (0-65535) to degrees in [0, 360)."""

    return (hue / HUE_FACTOR) % 360.0


def degrees_to_hue(degrees: float) -> int:
    """Convert degrees to a device hue (0-65535)."""

    return _clamp(round(degrees * HUE_FACTOR), 0, _HUE_MAX, degrees)


def ct_to_percent(mired: int) -> float:
    """Scale a colour temperature in mired to a percentage."""

    return 100.0 * (mired - CT_MIN) / (CT_MAX - CT_MIN)


def percent_to_ct(percent: float) -> int:
    """Scale a percentage to a colour temperature in mired."""

    mired = round(percent / 100.0 * (CT_MAX - CT_MIN) + CT_MIN)
    return _clamp(mired, CT_MIN, CT_MAX, percent)


def seconds_to_deciseconds(seconds: float) -> int:
    """Convert a transition time in seconds to the device's 1/10 s unit."""

    return round(10 * seconds)
