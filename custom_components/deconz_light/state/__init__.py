"""State management helpers for deCONZ lights."""

from .device_state import LightStateContext, LightStateStore, SuppressionWindow

__all__ = [
    "LightStateContext",
    "LightStateStore",
    "SuppressionWindow",
]
