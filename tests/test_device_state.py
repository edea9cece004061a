"""Tests for the shared light state store and suppression window."""

from __future__ import annotations

from custom_components.deconz_light.models import LightState
from custom_components.deconz_light.state import (
    LightStateContext,
    LightStateStore,
    SuppressionWindow,
)


def test_window_starts_expired() -> None:
    """No update is suppressed before the first command."""

    window = SuppressionWindow()

    assert window.expire_at_ms == 0
    assert window.last_sent == LightState()
    assert not window.is_active(0)


def test_arm_uses_default_expiry() -> None:
    """Commands without a transition time open the default window."""

    window = SuppressionWindow()
    delta = LightState(on=True)

    window.arm(delta, now_ms=10_000, default_expiry_ms=250)

    assert window.expire_at_ms == 10_250
    assert window.last_sent is delta
    assert window.is_active(10_249)
    assert not window.is_active(10_250)


def test_arm_uses_transition_time() -> None:
    """A transition time keeps the window open until the fade ends."""

    window = SuppressionWindow()

    window.arm(LightState(bri=10, transitiontime=15), now_ms=0, default_expiry_ms=250)

    assert window.expire_at_ms == 1_500


def test_arm_never_moves_deadline_backwards() -> None:
    """A shorter follow-up command keeps the later deadline."""

    window = SuppressionWindow()
    window.arm(LightState(bri=10, transitiontime=20), now_ms=0, default_expiry_ms=250)
    latest = LightState(on=False)

    window.arm(latest, now_ms=100, default_expiry_ms=250)

    assert window.expire_at_ms == 2_000
    assert window.last_sent is latest


def test_store_replaces_whole_state() -> None:
    """Replacing the cached state discards every previous field."""

    store = LightStateStore(LightState(on=True, bri=5))
    store.replace(LightState(hue=3))

    assert store.state == LightState(hue=3)


def test_context_starts_empty() -> None:
    """A new context has an empty cache and an expired window."""

    context = LightStateContext()

    assert context.store.state.is_empty()
    assert context.window.expire_at_ms == 0
    assert not context.lock.locked()
