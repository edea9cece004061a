"""Tests for bridge and light configuration."""

from __future__ import annotations

import pytest
import voluptuous as vol

from custom_components.deconz_light.config import BridgeConfig, LightConfig


def test_light_config_defaults() -> None:
    """Only the light id is required."""

    config = LightConfig.from_dict({"id": 3, "unused": True})

    assert config == LightConfig(id="3", transitiontime=None, command_expiry=250)


def test_light_config_values() -> None:
    """Transition time and window length are coerced to numbers."""

    config = LightConfig.from_dict(
        {"id": "3", "transitiontime": "0.5", "command_expiry": "400"}
    )

    assert config.transitiontime == 0.5
    assert config.command_expiry == 400


@pytest.mark.parametrize(
    "data",
    [
        {},
        {"id": ""},
        {"id": "1", "transitiontime": -1},
        {"id": "1", "command_expiry": -5},
    ],
)
def test_light_config_rejects_invalid(data) -> None:
    """Invalid light settings are refused."""

    with pytest.raises(vol.Invalid):
        LightConfig.from_dict(data)


def test_bridge_config() -> None:
    """Bridge settings fill in the port and timeout."""

    config = BridgeConfig.from_dict({"host": "10.0.0.2", "apikey": "ABC"})

    assert config.http_port == 80
    assert config.timeout == 2.0
    assert config.base_url == "http://10.0.0.2:80"


def test_bridge_config_requires_apikey() -> None:
    """The API key is mandatory."""

    with pytest.raises(vol.Invalid):
        BridgeConfig.from_dict({"host": "10.0.0.2"})
