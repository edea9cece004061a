"""Constants shared across the deCONZ light integration."""

from __future__ import annotations

from enum import Enum

DOMAIN = "deconz_light"

RESOURCE_LIGHTS = "lights"

HUE_FACTOR = 65535 / 360.0
BRIGHTNESS_FACTOR = 2.54
CT_MIN = 153
CT_MAX = 500

# Position STOP inference; 254 rather than 255 because of percent rounding.
POSITION_MOVING_DOWN_MAX_BRI = 254

DEFAULT_COMMAND_EXPIRY_MS = 250
DEFAULT_HTTP_PORT = 80
DEFAULT_TIMEOUT = 2.0


class Channel(str, Enum):
    """Channel kinds a light can expose."""

    SWITCH = "switch"
    BRIGHTNESS = "brightness"
    COLOR = "color"
    COLOR_TEMPERATURE = "color_temperature"
    POSITION = "position"


class ColorMode(str, Enum):
    """Colour modes reported by the device."""

    HS = "hs"
    XY = "xy"
    CT = "ct"
    UNKNOWN = "unknown"


class LightType(str, Enum):
    """Light types supported by the handler."""

    ON_OFF = "onofflight"
    DIMMABLE = "dimmablelight"
    COLOR_TEMPERATURE = "colortemperaturelight"
    COLOR = "colorlight"
    EXTENDED_COLOR = "extendedcolorlight"
    WINDOW_COVERING = "windowcovering"
