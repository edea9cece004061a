"""Pytest configuration for the deCONZ light tests."""

from __future__ import annotations

import asyncio
import inspect
import sys
from pathlib import Path

import pytest

root_path = Path(__file__).resolve().parent.parent
if str(root_path) not in sys.path:
    sys.path.insert(0, str(root_path))


class FakeClock:
    """Deterministic millisecond clock for suppression window checks."""

    def __init__(self, value: int = 1_000_000) -> None:
        """Initialise the fake clock at ``value`` milliseconds."""

        self.value = value

    def __call__(self) -> int:
        """Return the current reading."""

        return self.value

    def advance(self, ms: int) -> None:
        """Move the clock forward by ``ms`` milliseconds."""

        self.value += ms


@pytest.fixture
def clock() -> FakeClock:
    """Provide a fresh fake clock."""

    return FakeClock()


def pytest_configure(config: pytest.Config) -> None:
    """Register markers used throughout the test suite."""

    config.addinivalue_line(
        "markers", "asyncio: mark coroutine tests to execute via asyncio loop"
    )


def pytest_pyfunc_call(pyfuncitem: pytest.Function) -> bool | None:
    """Execute coroutine tests within a dedicated event loop."""

    test_function = pyfuncitem.obj
    if not inspect.iscoroutinefunction(test_function):
        return None

    loop = asyncio.new_event_loop()
    try:
        asyncio.set_event_loop(loop)
        funcargs = pyfuncitem.funcargs
        testargs = {arg: funcargs[arg] for arg in pyfuncitem._fixtureinfo.argnames}
        loop.run_until_complete(test_function(**testargs))
    finally:
        asyncio.set_event_loop(None)
        loop.close()
    return True
