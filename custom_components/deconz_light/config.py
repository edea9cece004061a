"""Configuration for bridges and lights."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

import voluptuous as vol

from .const import DEFAULT_COMMAND_EXPIRY_MS, DEFAULT_HTTP_PORT, DEFAULT_TIMEOUT

CONF_ID = "id"
CONF_TRANSITIONTIME = "transitiontime"
CONF_COMMAND_EXPIRY = "command_expiry"
CONF_HOST = "host"
CONF_HTTP_PORT = "http_port"
CONF_APIKEY = "apikey"
CONF_TIMEOUT = "timeout"

LIGHT_CONFIG_SCHEMA = vol.Schema(
    {
        vol.Required(CONF_ID): vol.All(vol.Coerce(str), vol.Length(min=1)),
        vol.Optional(CONF_TRANSITIONTIME, default=None): vol.Any(
            None, vol.All(vol.Coerce(float), vol.Range(min=0))
        ),
        vol.Optional(CONF_COMMAND_EXPIRY, default=DEFAULT_COMMAND_EXPIRY_MS): vol.All(
            vol.Coerce(int), vol.Range(min=0)
        ),
    },
    extra=vol.REMOVE_EXTRA,
)

BRIDGE_CONFIG_SCHEMA = vol.Schema(
    {
        vol.Required(CONF_HOST): vol.All(str, vol.Length(min=1)),
        vol.Optional(CONF_HTTP_PORT, default=DEFAULT_HTTP_PORT): vol.All(
            vol.Coerce(int), vol.Range(min=1, max=65535)
        ),
        vol.Required(CONF_APIKEY): vol.All(str, vol.Length(min=1)),
        vol.Optional(CONF_TIMEOUT, default=DEFAULT_TIMEOUT): vol.All(
            vol.Coerce(float), vol.Range(min=0, min_included=False)
        ),
    },
    extra=vol.REMOVE_EXTRA,
)


@dataclass(frozen=True, slots=True)
class LightConfig:
    """Per-light settings.

    ``transitiontime`` is in seconds and ``command_expiry`` is the default
    echo-suppression window in milliseconds.
    """

    id: str
    transitiontime: float | None = None
    command_expiry: int = DEFAULT_COMMAND_EXPIRY_MS

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> LightConfig:
        """Validate ``data`` and build a light configuration."""

        validated = LIGHT_CONFIG_SCHEMA(dict(data))
        return cls(
            id=validated[CONF_ID],
            transitiontime=validated[CONF_TRANSITIONTIME],
            command_expiry=validated[CONF_COMMAND_EXPIRY],
        )


@dataclass(frozen=True, slots=True)
class BridgeConfig:
    """Connection settings for the bridge REST API."""

    host: str
    apikey: str
    http_port: int = DEFAULT_HTTP_PORT
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> BridgeConfig:
        """Validate ``data`` and build a bridge configuration."""

        validated = BRIDGE_CONFIG_SCHEMA(dict(data))
        return cls(
            host=validated[CONF_HOST],
            apikey=validated[CONF_APIKEY],
            http_port=validated[CONF_HTTP_PORT],
            timeout=validated[CONF_TIMEOUT],
        )

    @property
    def base_url(self) -> str:
        """Return the HTTP base URL of the bridge."""

        return f"http://{self.host}:{self.http_port}"
