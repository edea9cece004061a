"""Translate channel commands into light state deltas."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

from .codec import degrees_to_hue, from_percent, percent_to_ct, seconds_to_deciseconds
from .colors import hsb_to_xy
from .commands import (
    Command,
    DecimalCommand,
    HSBCommand,
    OnOffCommand,
    PercentCommand,
    StopMoveCommand,
    UpDownCommand,
)
from .config import LightConfig
from .const import POSITION_MOVING_DOWN_MAX_BRI, Channel, ColorMode
from .models import LightState

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class NoOp:
    """The command does not translate into anything to send."""

    reason: str = "unsupported command"


@dataclass(frozen=True, slots=True)
class Delta:
    """Light state fields to send to the device."""

    state: LightState


TranslationResult = NoOp | Delta


@dataclass(frozen=True, slots=True)
class CommandContext:
    """Snapshot of everything a handler may look at for one command."""

    channel: str
    command: Command
    cached: LightState
    config: LightConfig


CommandHandler = Callable[[CommandContext], "dict[str, Any] | NoOp"]

_UNSUPPORTED = NoOp()


def _switch_command(context: CommandContext) -> dict[str, Any] | NoOp:
    """Only on/off commands reach the switch."""

    command = context.command
    if isinstance(command, OnOffCommand):
        return {"on": command.on}
    return _UNSUPPORTED


def _dimmer_command(context: CommandContext) -> dict[str, Any] | NoOp:
    """Handle commands on the brightness and colour channels."""

    command = context.command
    cached = context.cached
    fields: dict[str, Any]
    if isinstance(command, OnOffCommand):
        fields = {"on": command.on}
    elif isinstance(command, HSBCommand):
        fields = {"bri": from_percent(command.brightness)}
        if cached.color_mode is ColorMode.XY:
            x, y = hsb_to_xy(command.hue, command.saturation, command.brightness)
            fields["xy"] = [x, y]
        else:
            # hs is assumed whenever the colour mode is not xy
            fields["hue"] = degrees_to_hue(command.hue)
            fields["sat"] = from_percent(command.saturation)
    elif isinstance(command, PercentCommand):
        fields = {"bri": from_percent(command.value)}
    elif isinstance(command, DecimalCommand):
        fields = {"bri": int(command.value)}
    else:
        return _UNSUPPORTED

    bri = fields.get("bri")
    if bri is not None:
        if cached.on is None or (bri > 0) != cached.on:
            fields["on"] = bri > 0
        if bri == 0 and cached.on is False:
            return NoOp("light is already off")

    transitiontime = context.config.transitiontime
    if transitiontime is not None:
        fields["transitiontime"] = seconds_to_deciseconds(transitiontime)
    return fields


def _color_temperature_command(context: CommandContext) -> dict[str, Any] | NoOp:
    """Colour temperature can only be changed while the light is on."""

    command = context.command
    if not isinstance(command, DecimalCommand):
        return _UNSUPPORTED
    fields: dict[str, Any] = {
        "colormode": ColorMode.CT.value,
        "ct": percent_to_ct(command.value),
    }
    if context.cached.on is False:
        fields["on"] = True
    return fields


def _position_command(context: CommandContext) -> dict[str, Any] | NoOp:
    """Handle window covering commands; "on" drives the motor down."""

    command = context.command
    cached = context.cached
    if isinstance(command, UpDownCommand):
        return {"on": command.down}
    if isinstance(command, StopMoveCommand):
        if not command.stop:
            return _UNSUPPORTED
        if cached.on is True and cached.bri is not None:
            if cached.bri <= POSITION_MOVING_DOWN_MAX_BRI:
                # going down or already stopped
                return {"on": True}
        elif cached.on is False and cached.bri is not None and cached.bri > 0:
            # going up or already stopped
            return {"on": False}
        return NoOp("direction of travel is unknown")
    if isinstance(command, PercentCommand):
        return {"bri": from_percent(command.value)}
    return _UNSUPPORTED


DEFAULT_HANDLERS: dict[Channel, CommandHandler] = {
    Channel.SWITCH: _switch_command,
    Channel.BRIGHTNESS: _dimmer_command,
    Channel.COLOR: _dimmer_command,
    Channel.COLOR_TEMPERATURE: _color_temperature_command,
    Channel.POSITION: _position_command,
}


class CommandTranslator:
    """Compute the minimal state delta for a command on one of a light's channels."""

    def __init__(self, channels: Iterable[Channel] | None = None) -> None:
        """Register a handler for each channel kind the light exposes."""

        self._handlers: dict[Channel, CommandHandler] = {}
        for channel in channels if channels is not None else DEFAULT_HANDLERS:
            self.register(channel, DEFAULT_HANDLERS[channel])

    def register(self, channel: Channel, handler: CommandHandler) -> None:
        """Bind ``handler`` to commands arriving on ``channel``."""

        self._handlers[channel] = handler

    @property
    def channels(self) -> tuple[Channel, ...]:
        """Return the channel kinds with a registered handler."""

        return tuple(self._handlers)

    def translate(self, context: CommandContext) -> TranslationResult:
        """Return the delta to send for ``context``, or a ``NoOp``."""

        try:
            channel = Channel(context.channel)
        except ValueError:
            return NoOp("unknown channel")
        handler = self._handlers.get(channel)
        if handler is None:
            return NoOp("unknown channel")
        fields = handler(context)
        if isinstance(fields, NoOp):
            _LOGGER.debug(
                "Ignoring %s on %s: %s", context.command, channel.value, fields.reason
            )
            return fields
        if fields.get("on") is False:
            # nothing but on=false is accepted while switching off
            fields = {"on": False}
        if not fields:
            return NoOp("empty delta")
        return Delta(LightState(**fields))
