"""Channels exposed by each supported light type."""

from __future__ import annotations

from types import MappingProxyType

from .const import Channel, LightType
from .errors import UnsupportedLightTypeError

LIGHT_TYPE_CHANNELS = MappingProxyType(
    {
        LightType.ON_OFF: (Channel.SWITCH,),
        LightType.DIMMABLE: (Channel.BRIGHTNESS,),
        LightType.COLOR_TEMPERATURE: (Channel.BRIGHTNESS, Channel.COLOR_TEMPERATURE),
        LightType.COLOR: (Channel.COLOR,),
        LightType.EXTENDED_COLOR: (Channel.COLOR, Channel.COLOR_TEMPERATURE),
        LightType.WINDOW_COVERING: (Channel.POSITION,),
    }
)

# Type names as reported by the bridge.
_BRIDGE_TYPE_NAMES: dict[str, LightType] = {
    "on/off light": LightType.ON_OFF,
    "on/off plug-in unit": LightType.ON_OFF,
    "smart plug": LightType.ON_OFF,
    "dimmable light": LightType.DIMMABLE,
    "color temperature light": LightType.COLOR_TEMPERATURE,
    "color light": LightType.COLOR,
    "color dimmable light": LightType.COLOR,
    "extended color light": LightType.EXTENDED_COLOR,
    "window covering device": LightType.WINDOW_COVERING,
}


def resolve_light_type(name: str | LightType) -> LightType:
    """Map a light type id or bridge type name to a ``LightType``."""

    if isinstance(name, LightType):
        return name
    token = name.strip().lower()
    try:
        return LightType(token)
    except ValueError:
        pass
    light_type = _BRIDGE_TYPE_NAMES.get(token)
    if light_type is None:
        msg = f"Unsupported light type: {name}"
        raise UnsupportedLightTypeError(msg)
    return light_type


def channels_for_light_type(name: str | LightType) -> tuple[Channel, ...]:
    """Return the channels a light of type ``name`` exposes."""

    return LIGHT_TYPE_CHANNELS[resolve_light_type(name)]
