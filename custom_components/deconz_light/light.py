"""Light handler tying commands, device updates and channel values together."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Iterable
from typing import Any, Protocol

from .commands import ChannelValue, Command, RefreshCommand
from .config import LightConfig
from .const import Channel, LightType
from .device_types import channels_for_light_type
from .errors import TransportError
from .models import LightMessage, LightState
from .push import PushDispatcher
from .reconciler import UpdateReconciler, channel_value
from .rest_client import TransportResult
from .state.device_state import LightStateContext
from .translator import CommandContext, CommandTranslator, NoOp, TranslationResult

_LOGGER = logging.getLogger(__name__)

ChannelValueSink = Callable[[str, ChannelValue], None]


class LightTransport(Protocol):
    """Requests the handler delegates to the bridge."""

    async def async_send_state(self, delta: LightState) -> TransportResult:
        """Send ``delta`` to the light."""

    async def async_fetch_state(self) -> LightMessage | None:
        """Read the full light resource, None when not authorized."""


def _epoch_ms() -> int:
    """Return wall-clock time in milliseconds."""

    return int(time.time() * 1000)


class DeconzLight:
    """Keep one light's channels and device state in step.

    Commands are translated against the cached state and sent through the
    transport; states pushed or fetched from the device are reconciled into
    channel values. A successful send opens a short window during which
    updates contradicting the command are dropped.
    """

    def __init__(
        self,
        *,
        config: LightConfig,
        channels: Iterable[Channel | str],
        transport: LightTransport,
        emit: ChannelValueSink,
        clock: Callable[[], int] | None = None,
        context: LightStateContext | None = None,
    ) -> None:
        """Wire the translator and reconciler to the light's channels."""

        self._config = config
        self._channels = tuple(Channel(channel) for channel in channels)
        self._transport = transport
        self._emit = emit
        self._clock = clock or _epoch_ms
        self._context = context or LightStateContext()
        self._translator = CommandTranslator(self._channels)
        self._reconciler = UpdateReconciler(self._channels)
        self._dispatcher: PushDispatcher | None = None
        self._online = False

    @classmethod
    def for_light_type(
        cls, light_type: str | LightType, **kwargs: Any
    ) -> DeconzLight:
        """Build a handler exposing the channels of ``light_type``."""

        return cls(channels=channels_for_light_type(light_type), **kwargs)

    @property
    def light_id(self) -> str:
        """Return the bridge id of the light."""

        return self._config.id

    @property
    def channel_ids(self) -> set[str]:
        """Return the ids of every channel on the light."""

        return {channel.value for channel in self._channels}

    @property
    def online(self) -> bool:
        """Return True once a full state has been read from the bridge."""

        return self._online

    @property
    def context(self) -> LightStateContext:
        """Expose the shared state and suppression window."""

        return self._context

    async def async_handle_command(
        self, channel_id: str, command: Command
    ) -> TranslationResult | None:
        """Translate ``command`` on ``channel_id`` and send the result.

        Refresh requests re-emit the cached value and return None.
        """

        if isinstance(command, RefreshCommand):
            await self.async_refresh(channel_id)
            return None

        async with self._context.lock:
            result = self._translator.translate(
                CommandContext(
                    channel=channel_id,
                    command=command,
                    cached=self._context.store.state,
                    config=self._config,
                )
            )
        if isinstance(result, NoOp):
            return result

        delta = result.state
        try:
            response = await self._transport.async_send_state(delta)
        except TransportError as err:
            _LOGGER.debug(
                "Sending command %s to channel %s failed: %s", command, channel_id, err
            )
            return result
        except Exception:
            _LOGGER.exception(
                "Transport raised while sending %s to channel %s", command, channel_id
            )
            return result
        if not response.ok:
            _LOGGER.warning(
                "Light %s rejected %s with status %s: %s",
                self.light_id,
                delta.to_payload(),
                response.status_code,
                response.body,
            )
            return result

        async with self._context.lock:
            self._context.window.arm(delta, self._clock(), self._config.command_expiry)
        return result

    async def async_refresh(self, channel_id: str) -> None:
        """Re-emit the cached value of ``channel_id``."""

        try:
            channel = Channel(channel_id)
        except ValueError:
            return
        if channel not in self._channels:
            return
        async with self._context.lock:
            value = channel_value(channel, self._context.store.state)
            if value is not None:
                self._emit(channel.value, value)

    async def async_message_received(self, message: LightMessage) -> bool:
        """Reconcile a pushed or fetched message.

        Returns True when the state was accepted and channel values emitted.
        """

        if message.id is not None and message.id != self.light_id:
            return False
        state = message.state
        if state is None:
            return False
        _LOGGER.debug("Light %s received %s", self.light_id, state.to_payload())
        async with self._context.lock:
            values = self._reconciler.reconcile(
                state, self._context.store, self._context.window, self._clock()
            )
            if values is None:
                return False
            for channel, value in values:
                self._emit(channel.value, value)
        return True

    async def async_request_state(self) -> bool:
        """Fetch the full state from the bridge and reconcile it.

        Returns False when the bridge refused access. ``UnexpectedStatusError``
        propagates to the caller.
        """

        message = await self._transport.async_fetch_state()
        if message is None:
            return False
        await self.async_message_received(message)
        self._online = True
        return True

    async def async_start(self, dispatcher: PushDispatcher) -> None:
        """Listen for pushes from ``dispatcher`` and read the initial state."""

        self._dispatcher = dispatcher
        dispatcher.register_light_listener(self.light_id, self._async_on_push)
        await self.async_request_state()

    async def async_stop(self) -> None:
        """Stop listening for pushes."""

        if self._dispatcher is not None:
            self._dispatcher.unregister_light_listener(self.light_id)
            self._dispatcher = None
        self._online = False

    async def _async_on_push(self, message: LightMessage) -> None:
        """Forward a dispatched push to the reconciler."""

        await self.async_message_received(message)
