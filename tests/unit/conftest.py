"""Shared fixtures for unit tests."""

from __future__ import annotations

import pytest

from boundcache.cache.bounded import BoundedTTLCache
from boundcache.monitoring.memory import MemoryUsage


class FakeClock:
    """Manually advanced stand-in for time.monotonic."""

    def __init__(self, start: float = 0.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    """Fake clock starting at t=0."""
    return FakeClock()


@pytest.fixture
def small_cache(clock):
    """Capacity 3, TTL 10 cache on the fake clock."""
    return BoundedTTLCache(capacity=3, ttl_seconds=10, clock=clock)


@pytest.fixture
def fake_probe():
    """Memory probe returning fixed numbers."""

    def probe() -> MemoryUsage:
        probe.calls += 1
        return MemoryUsage(rss_bytes=64 * 1024 * 1024, peak_rss_bytes=96 * 1024 * 1024)

    probe.calls = 0
    return probe
