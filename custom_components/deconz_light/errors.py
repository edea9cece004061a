"""Exceptions raised by the deCONZ light integration."""

from __future__ import annotations


class DeconzLightError(RuntimeError):
    """Base class for light integration errors."""


class TransportError(DeconzLightError):
    """Raised when a request to the bridge could not be completed."""


class UnexpectedStatusError(DeconzLightError):
    """Raised when a full state request returns an unknown status code."""

    def __init__(self, status_code: int) -> None:
        """Store the offending status code."""

        super().__init__(f"Unknown status code {status_code} for full state request")
        self.status_code = status_code


class UnsupportedLightTypeError(DeconzLightError):
    """Raised when a light type has no channel mapping."""
