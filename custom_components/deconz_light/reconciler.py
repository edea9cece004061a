"""Turn light states received from the device into channel values."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from .codec import ct_to_percent, hue_to_degrees, to_percent
from .colors import xy_to_hsb
from .commands import ChannelValue, DecimalValue, HSBValue, OnOffValue, PercentValue
from .const import Channel
from .models import LightState
from .state.device_state import LightStateStore, SuppressionWindow

_LOGGER = logging.getLogger(__name__)


def should_accept(incoming: LightState, window: SuppressionWindow, now_ms: int) -> bool:
    """Return False for updates that contradict a command still in flight."""

    if window.is_active(now_ms) and not incoming.equals_ignore_none(window.last_sent):
        _LOGGER.debug(
            "Ignoring differing update after last command until %s",
            window.expire_at_ms,
        )
        return False
    return True


def channel_value(channel: Channel, state: LightState) -> ChannelValue | None:
    """Compute the value ``channel`` should show for ``state``.

    Returns None when the state does not carry enough to say anything.
    """

    if channel is Channel.SWITCH:
        if state.on is not None:
            return OnOffValue(state.on)
        return None
    if channel is Channel.COLOR:
        if state.hue is not None and state.sat is not None and state.bri is not None:
            return HSBValue(
                hue_to_degrees(state.hue), to_percent(state.sat), to_percent(state.bri)
            )
        if state.xy is not None and len(state.xy) == 2:
            return HSBValue(*xy_to_hsb(state.xy[0], state.xy[1]))
        return None
    if channel is Channel.BRIGHTNESS:
        # an off light never shows its last brightness
        if state.bri is not None and state.on is True:
            return PercentValue(to_percent(state.bri))
        return OnOffValue(False)
    if channel is Channel.COLOR_TEMPERATURE:
        if state.ct is not None:
            return DecimalValue(ct_to_percent(state.ct))
        return None
    if channel is Channel.POSITION:
        if state.bri is not None:
            return PercentValue(to_percent(state.bri))
        return None
    return None


def channel_values(
    channels: Iterable[Channel], state: LightState
) -> list[tuple[Channel, ChannelValue]]:
    """Return the values to emit for each of ``channels``."""

    values: list[tuple[Channel, ChannelValue]] = []
    for channel in channels:
        value = channel_value(channel, state)
        if value is not None:
            values.append((channel, value))
    return values


class UpdateReconciler:
    """Accept or drop incoming states and derive channel values from them."""

    def __init__(self, channels: Iterable[Channel]) -> None:
        """Bind the reconciler to the channels present on the light."""

        self._channels = tuple(channels)

    @property
    def channels(self) -> tuple[Channel, ...]:
        """Return the channels values are produced for."""

        return self._channels

    def reconcile(
        self,
        incoming: LightState,
        store: LightStateStore,
        window: SuppressionWindow,
        now_ms: int,
    ) -> list[tuple[Channel, ChannelValue]] | None:
        """Replace the cached state with ``incoming`` unless it is a stale echo.

        Returns the channel values to emit, or None when the update was dropped.
        """

        if not should_accept(incoming, window, now_ms):
            return None
        store.replace(incoming)
        return channel_values(self._channels, incoming)
