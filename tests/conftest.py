"""Pytest configuration for fetchql tests."""

import pytest

from fetchql import CacheConfig, ResponseCache, create_response_cache


class FakeClock:
    """Manually advanced clock for expiry tests."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    """Create a fake clock starting at a fixed reading."""
    return FakeClock()


@pytest.fixture
def response_cache(clock: FakeClock) -> ResponseCache:
    """Create an in-memory response cache driven by the fake clock."""
    return create_response_cache(CacheConfig(), clock=clock)
