"""Decoding and routing of push messages from the bridge event stream."""

from __future__ import annotations

import json
import logging
from collections.abc import Awaitable, Callable, Mapping
from typing import Any

from .const import RESOURCE_LIGHTS
from .models import LightMessage, ValidationError

_LOGGER = logging.getLogger(__name__)

LightListener = Callable[[LightMessage], Awaitable[None]]


def decode_push_message(payload: Any) -> LightMessage | None:
    """Best-effort decode of a push payload into a light message.

    Payloads that are not JSON objects, do not validate, or concern a
    resource other than lights yield None.
    """

    data = payload
    if isinstance(data, bytes | bytearray):
        data = data.decode(errors="replace")
    if isinstance(data, str):
        try:
            data = json.loads(data)
        except json.JSONDecodeError:
            _LOGGER.debug("Failed to decode push payload: %s", payload)
            return None
    if not isinstance(data, Mapping):
        _LOGGER.debug("Ignoring push payload without an object: %s", payload)
        return None
    try:
        message = LightMessage.model_validate(dict(data))
    except ValidationError as err:
        _LOGGER.debug("Ignoring malformed push payload %s: %s", payload, err)
        return None
    if message.r != RESOURCE_LIGHTS:
        return None
    return message


class PushDispatcher:
    """Route light push messages to the listener registered for each light id."""

    def __init__(self) -> None:
        """Initialise an empty listener table."""

        self._listeners: dict[str, LightListener] = {}

    def register_light_listener(self, light_id: str, listener: LightListener) -> None:
        """Deliver messages for ``light_id`` to ``listener``."""

        self._listeners[light_id] = listener

    def unregister_light_listener(self, light_id: str) -> None:
        """Stop delivering messages for ``light_id``."""

        self._listeners.pop(light_id, None)

    @property
    def light_ids(self) -> set[str]:
        """Return the ids with a registered listener."""

        return set(self._listeners)

    async def async_dispatch(self, payload: Any) -> bool:
        """Decode ``payload`` and hand it to its listener.

        Returns True when a listener received the message.
        """

        message = decode_push_message(payload)
        if message is None or message.id is None:
            return False
        listener = self._listeners.get(message.id)
        if listener is None:
            _LOGGER.debug("No listener for light %s", message.id)
            return False
        await listener(message)
        return True
