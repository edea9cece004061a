"""Channel commands and the values emitted back to channels."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class OnOffCommand:
    """Switch the light on or off."""

    on: bool


@dataclass(frozen=True, slots=True)
class UpDownCommand:
    """Move a covering; ``down`` drives the motor in the "on" direction."""

    down: bool


@dataclass(frozen=True, slots=True)
class StopMoveCommand:
    """Stop (or resume) a moving covering."""

    stop: bool = True


@dataclass(frozen=True, slots=True)
class PercentCommand:
    """Percentage in [0, 100]."""

    value: float


@dataclass(frozen=True, slots=True)
class DecimalCommand:
    """Plain decimal value, interpreted per channel."""

    value: float


@dataclass(frozen=True, slots=True)
class HSBCommand:
    """Colour as hue degrees, saturation and brightness percentages."""

    hue: float
    saturation: float
    brightness: float


@dataclass(frozen=True, slots=True)
class RefreshCommand:
    """Re-emit the cached value of a channel."""


Command = (
    OnOffCommand
    | UpDownCommand
    | StopMoveCommand
    | PercentCommand
    | DecimalCommand
    | HSBCommand
    | RefreshCommand
)


@dataclass(frozen=True, slots=True)
class OnOffValue:
    """Boolean channel value."""

    on: bool


@dataclass(frozen=True, slots=True)
class PercentValue:
    """Percentage channel value in [0, 100]."""

    value: int


@dataclass(frozen=True, slots=True)
class HSBValue:
    """Colour channel value."""

    hue: float
    saturation: float
    brightness: float


@dataclass(frozen=True, slots=True)
class DecimalValue:
    """Decimal channel value."""

    value: float


ChannelValue = OnOffValue | PercentValue | HSBValue | DecimalValue
