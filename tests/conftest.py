"""
Shared test fixtures and helpers for the railmonads test suite.

Resets the cached settings and the global structlog configuration around
every test, so environment overrides and configure_structlog() calls made
by one test never leak into another.
"""

from __future__ import annotations

from collections.abc import Iterator

import pytest
import structlog

from railmonads.config import get_settings


@pytest.fixture(autouse=True)
def _isolate_settings_and_logging() -> Iterator[None]:
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()


class CallCounter:
    """Side-effecting probe: counts how many times it was invoked."""

    def __init__(self, returns: object = None) -> None:
        self.calls: list[object] = []
        self._returns = returns

    def __call__(self, *args: object) -> object:
        self.calls.append(args)
        return self._returns

    @property
    def count(self) -> int:
        return len(self.calls)


@pytest.fixture()
def counter() -> CallCounter:
    """Return a fresh call-counting probe."""
    return CallCounter()
