"""Pydantic models for the light state record exchanged with the bridge."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from .const import ColorMode

__all__ = ["LightMessage", "LightState", "ValidationError"]


class LightState(BaseModel):
    """Sparse light state; ``None`` means unknown or unchanged, never zero."""

    model_config = ConfigDict(extra="ignore")

    on: bool | None = None
    bri: int | None = None
    hue: int | None = None
    sat: int | None = None
    xy: list[float] | None = None
    ct: int | None = None
    colormode: str | None = None
    transitiontime: int | None = None

    @property
    def color_mode(self) -> ColorMode | None:
        """Return the reported colour mode, if any."""

        if self.colormode is None:
            return None
        try:
            return ColorMode(self.colormode)
        except ValueError:
            return ColorMode.UNKNOWN

    def is_empty(self) -> bool:
        """Return True when no field is populated."""

        return not self.to_payload()

    def to_payload(self) -> dict[str, Any]:
        """Return the populated fields using the bridge's JSON names."""

        return self.model_dump(exclude_none=True)

    def equals_ignore_none(self, other: LightState) -> bool:
        """Compare only the fields populated on both sides."""

        for name in type(self).model_fields:
            mine = getattr(self, name)
            theirs = getattr(other, name)
            if mine is None or theirs is None:
                continue
            if mine != theirs:
                return False
        return True


class LightMessage(BaseModel):
    """Envelope of a push event or full state response."""

    model_config = ConfigDict(extra="ignore")

    e: str | None = None
    r: str | None = None
    t: str | None = None
    id: str | None = None
    name: str | None = None
    type: str | None = None
    state: LightState | None = None

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> Any:
        """Accept numeric resource identifiers."""

        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value
