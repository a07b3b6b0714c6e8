"""Unit tests for MemoryReporter."""

import logging

import anyio
import pytest

from boundcache.monitoring.reporter import CacheSnapshot, MemoryReporter


class TestMemoryReporter:
    """Test periodic size and memory reporting."""

    def test_snapshot_reads_cache_and_probe(self, small_cache, fake_probe):
        """Snapshot combines cache size, capacity and probe output."""
        small_cache.set("a", 1)
        small_cache.set("b", 2)
        reporter = MemoryReporter(small_cache, interval_seconds=5, probe=fake_probe)

        snap = reporter.snapshot()

        assert isinstance(snap, CacheSnapshot)
        assert snap.size == 2
        assert snap.capacity == 3
        assert snap.memory.rss_bytes == 64 * 1024 * 1024
        assert fake_probe.calls == 1
        assert small_cache.metrics.size.get() == 2

    def test_tick_logs_and_forwards_to_sink(self, small_cache, fake_probe, caplog):
        """A tick logs the snapshot and hands it to the sink."""
        received = []
        small_cache.set("a", 1)
        reporter = MemoryReporter(small_cache, interval_seconds=5, probe=fake_probe, sink=received.append)

        with caplog.at_level(logging.INFO, logger="boundcache.monitoring.reporter"):
            reporter.tick()

        assert len(received) == 1
        assert received[0] is reporter.last_snapshot
        assert "Cache size: 1/3 entries" in caplog.text

    def test_snapshot_to_dict(self, small_cache, fake_probe):
        """Snapshot serializes to the status payload shape."""
        reporter = MemoryReporter(small_cache, interval_seconds=5, probe=fake_probe)
        data = reporter.snapshot().to_dict()

        assert data["cacheSize"] == 0
        assert data["capacity"] == 3
        assert set(data["memory"]) == {"rss_bytes", "peak_rss_bytes"}

    @pytest.mark.asyncio
    async def test_reports_periodically(self, small_cache, fake_probe):
        """Running reporter keeps producing snapshots."""
        received = []
        reporter = MemoryReporter(small_cache, interval_seconds=0.01, probe=fake_probe, sink=received.append)

        async with anyio.create_task_group() as tg:
            await tg.start(reporter.run)
            await anyio.sleep(0.1)
            reporter.stop()

        assert len(received) >= 2
