"""Tests for the light type to channel mapping."""

from __future__ import annotations

import pytest

from custom_components.deconz_light.const import Channel, LightType
from custom_components.deconz_light.device_types import (
    LIGHT_TYPE_CHANNELS,
    channels_for_light_type,
    resolve_light_type,
)
from custom_components.deconz_light.errors import UnsupportedLightTypeError


def test_every_light_type_has_channels() -> None:
    """All supported types expose at least one channel."""

    assert set(LIGHT_TYPE_CHANNELS) == set(LightType)
    assert all(LIGHT_TYPE_CHANNELS.values())


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("onofflight", (Channel.SWITCH,)),
        ("Dimmable light", (Channel.BRIGHTNESS,)),
        ("Color temperature light", (Channel.BRIGHTNESS, Channel.COLOR_TEMPERATURE)),
        ("Color light", (Channel.COLOR,)),
        ("Extended color light", (Channel.COLOR, Channel.COLOR_TEMPERATURE)),
        ("Window covering device", (Channel.POSITION,)),
        (LightType.WINDOW_COVERING, (Channel.POSITION,)),
    ],
)
def test_channels_for_light_type(name, expected) -> None:
    """Bridge type names and short ids both resolve."""

    assert channels_for_light_type(name) == expected


def test_unknown_light_type_raises() -> None:
    """Sensors and other resources are not lights."""

    with pytest.raises(UnsupportedLightTypeError):
        resolve_light_type("ZHAPresence")
