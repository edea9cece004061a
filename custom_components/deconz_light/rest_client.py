"""REST transport for sending light state and fetching the full state."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import httpx

from .config import BridgeConfig
from .const import RESOURCE_LIGHTS
from .errors import TransportError, UnexpectedStatusError
from .models import LightMessage, LightState, ValidationError

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TransportResult:
    """Status code and raw body returned by the bridge."""

    status_code: int
    body: str

    @property
    def ok(self) -> bool:
        """Return True for 2xx responses."""

        return 200 <= self.status_code < 300


def build_url(bridge: BridgeConfig, *parts: str) -> str:
    """Return the REST URL for ``parts`` below the bridge's API key."""

    path = "/".join(str(part).strip("/") for part in parts)
    return f"{bridge.base_url}/api/{bridge.apikey}/{path}"


class DeconzRestClient:
    """Talk to one light through the bridge REST API."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        bridge: BridgeConfig,
        light_id: str,
    ) -> None:
        """Bind the HTTP client, bridge settings and light id."""

        self._client = client
        self._bridge = bridge
        self._light_id = light_id

    @property
    def state_url(self) -> str:
        """Return the URL commands are sent to."""

        return build_url(self._bridge, RESOURCE_LIGHTS, self._light_id, "state")

    @property
    def light_url(self) -> str:
        """Return the URL of the full light resource."""

        return build_url(self._bridge, RESOURCE_LIGHTS, self._light_id)

    async def async_send_state(self, delta: LightState) -> TransportResult:
        """PUT ``delta`` to the light's state endpoint."""

        payload = delta.to_payload()
        _LOGGER.debug(
            "Sending %s to light %s via %s", payload, self._light_id, self.state_url
        )
        try:
            response = await self._client.put(
                self.state_url, json=payload, timeout=self._bridge.timeout
            )
        except httpx.HTTPError as err:
            raise TransportError(f"PUT {self.state_url} failed: {err}") from err
        result = TransportResult(response.status_code, response.text)
        _LOGGER.debug("Result code=%s, body=%s", result.status_code, result.body)
        return result

    async def async_fetch_state(self) -> LightMessage | None:
        """GET the full light resource.

        Returns None when the bridge refuses access (403) and raises
        ``UnexpectedStatusError`` for any status other than 200.
        """

        try:
            response = await self._client.get(
                self.light_url, timeout=self._bridge.timeout
            )
        except httpx.HTTPError as err:
            raise TransportError(f"GET {self.light_url} failed: {err}") from err
        if response.status_code == 403:
            _LOGGER.debug("Not authorized to read light %s", self._light_id)
            return None
        if response.status_code != 200:
            _LOGGER.error(
                "Unexpected status %s reading light %s",
                response.status_code,
                self._light_id,
            )
            raise UnexpectedStatusError(response.status_code)
        try:
            message = LightMessage.model_validate_json(response.content)
        except ValidationError as err:
            raise TransportError(f"Invalid light payload: {err}") from err
        if message.id is None:
            message = message.model_copy(update={"id": self._light_id})
        return message
