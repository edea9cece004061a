"""Per-light state shared by the command translator and update reconciler."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field

from ..models import LightState

_LOGGER = logging.getLogger(__name__)

_MS_PER_DECISECOND = 100


class LightStateStore:
    """Hold the last light state accepted from the device.

    The cached state is only ever replaced as a whole; fields are never merged.
    """

    def __init__(self, initial: LightState | None = None) -> None:
        """Initialise the store with an optional starting state."""

        self._state = initial if initial is not None else LightState()

    @property
    def state(self) -> LightState:
        """Return the cached light state."""

        return self._state

    def replace(self, state: LightState) -> None:
        """Discard the cached state in favour of ``state``."""

        self._state = state


@dataclass(slots=True)
class SuppressionWindow:
    """Deadline until which differing updates are treated as stale echoes."""

    expire_at_ms: int = 0
    last_sent: LightState = field(default_factory=LightState)

    def is_active(self, now_ms: int) -> bool:
        """Return True while updates are checked against the last command."""

        return now_ms < self.expire_at_ms

    def arm(self, delta: LightState, now_ms: int, default_expiry_ms: int) -> None:
        """Record ``delta`` as the last command sent at ``now_ms``.

        The window lasts for the delta's transition time when it carries one,
        otherwise for ``default_expiry_ms``. The deadline never moves backwards.
        """

        if delta.transitiontime is not None:
            duration = delta.transitiontime * _MS_PER_DECISECOND
        else:
            duration = default_expiry_ms
        self.expire_at_ms = max(self.expire_at_ms, now_ms + duration)
        self.last_sent = delta
        _LOGGER.debug("Suppressing differing updates until %s", self.expire_at_ms)


class LightStateContext:
    """Bundle of the cached state and suppression window for one light.

    Every read or write of either must happen while holding ``lock``.
    """

    def __init__(self, initial: LightState | None = None) -> None:
        """Create the store, window and lock for a single light."""

        self.store = LightStateStore(initial)
        self.window = SuppressionWindow()
        self.lock = asyncio.Lock()
