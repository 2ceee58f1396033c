"""
Pytest configuration and fixtures for the test suite.

This module contains shared fixtures used across all tests.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
import structlog

from outcome.config import get_settings

if TYPE_CHECKING:
    from collections.abc import Iterator


class CallCounter:
    """Callable that records how many times it was invoked."""

    def __init__(self, return_value: object = None) -> None:
        self.return_value = return_value
        self.calls: list[tuple[object, ...]] = []

    def __call__(self, *args: object) -> object:
        self.calls.append(args)
        return self.return_value

    @property
    def count(self) -> int:
        """Number of recorded calls."""
        return len(self.calls)


@pytest.fixture()
def counter() -> CallCounter:
    """Return a fresh call counter returning None."""
    return CallCounter()


@pytest.fixture()
def counter_factory() -> type[CallCounter]:
    """Return the CallCounter class for counters with a return value."""
    return CallCounter


@pytest.fixture(autouse=True)
def _reset_settings() -> Iterator[None]:
    """Drop cached settings and structlog configuration between tests."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()
