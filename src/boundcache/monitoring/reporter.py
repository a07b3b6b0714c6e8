from __future__ import annotations

import logging
import time
import typing as t
from dataclasses import dataclass

from ..core.periodic import PeriodicTask
from .memory import MemoryProbe, MemoryUsage, process_memory_usage

if t.TYPE_CHECKING:
    from ..cache.bounded import BoundedTTLCache

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CacheSnapshot:
    size: int
    capacity: int
    memory: MemoryUsage
    timestamp: float

    def to_dict(self) -> t.Dict[str, t.Any]:
        return {
            "cacheSize": self.size,
            "capacity": self.capacity,
            "memory": self.memory.to_dict(),
            "timestamp": self.timestamp,
        }


SnapshotSink = t.Callable[[CacheSnapshot], None]


class MemoryReporter(PeriodicTask):
    """Periodically records cache size next to process memory usage."""

    def __init__(
        self,
        cache: BoundedTTLCache,
        interval_seconds: float,
        probe: MemoryProbe = process_memory_usage,
        sink: t.Optional[SnapshotSink] = None,
    ) -> None:
        super().__init__(interval_seconds, name="memory-reporter")
        self._cache = cache
        self._probe = probe
        self._sink = sink
        self.last_snapshot: t.Optional[CacheSnapshot] = None

    def snapshot(self) -> CacheSnapshot:
        size = self._cache.size()
        self._cache.metrics.size.set(size)
        return CacheSnapshot(
            size=size,
            capacity=self._cache.capacity,
            memory=self._probe(),
            timestamp=time.time(),
        )

    def tick(self) -> None:
        snap = self.snapshot()
        self.last_snapshot = snap
        logger.info(
            "Cache size: %d/%d entries, rss=%s peak_rss=%s, hit_ratio=%.2f",
            snap.size,
            snap.capacity,
            snap.memory.rss_bytes,
            snap.memory.peak_rss_bytes,
            self._cache.metrics.hit_ratio(),
        )
        if self._sink is not None:
            self._sink(snap)
