"""Light and window covering support for deCONZ bridges."""

from __future__ import annotations

from .const import DOMAIN, Channel, ColorMode, LightType
from .light import DeconzLight
from .models import LightMessage, LightState

__all__ = [
    "DOMAIN",
    "Channel",
    "ColorMode",
    "DeconzLight",
    "LightMessage",
    "LightState",
    "LightType",
]
