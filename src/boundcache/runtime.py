from __future__ import annotations

import contextlib
import logging
import time
import typing as t

import anyio

from .cache.bounded import BoundedTTLCache, Clock
from .core.periodic import PeriodicTask
from .core.sweeper import Sweeper
from .monitoring.memory import MemoryProbe, process_memory_usage
from .monitoring.reporter import MemoryReporter, SnapshotSink
from .utils.config import CacheConfig, ReporterConfig

logger = logging.getLogger(__name__)


class CacheRuntime:
    """Owns a cache together with the timers that keep it bounded.

    ``run()`` starts the sweeper (and reporter, if any) in a task group. On
    exit every timer is stopped before the cache is cleared, so nothing
    touches the cache after shutdown.
    """

    def __init__(
        self,
        cache: BoundedTTLCache,
        sweeper: Sweeper,
        reporter: t.Optional[MemoryReporter] = None,
    ) -> None:
        self.cache = cache
        self.sweeper = sweeper
        self.reporter = reporter
        self._running = False

    @classmethod
    def from_config(
        cls,
        cache_config: CacheConfig,
        reporter_config: t.Optional[ReporterConfig] = None,
        *,
        clock: Clock = time.monotonic,
        probe: MemoryProbe = process_memory_usage,
        sink: t.Optional[SnapshotSink] = None,
    ) -> "CacheRuntime":
        cache = BoundedTTLCache(cache_config.capacity, cache_config.ttl_seconds, clock=clock)
        sweeper = Sweeper(cache, cache_config.sweep_interval_seconds)
        reporter = None
        if reporter_config is not None and reporter_config.enabled:
            reporter = MemoryReporter(cache, reporter_config.interval_seconds, probe=probe, sink=sink)
        return cls(cache, sweeper, reporter)

    @property
    def timers(self) -> t.List[PeriodicTask]:
        timers: t.List[PeriodicTask] = [self.sweeper]
        if self.reporter is not None:
            timers.append(self.reporter)
        return timers

    @property
    def running(self) -> bool:
        return self._running

    @contextlib.asynccontextmanager
    async def run(self) -> t.AsyncIterator["CacheRuntime"]:
        """Run the timers for the duration of the ``async with`` block.

        The block executes inside an anyio task group, so an exception raised
        in it still stops the timers and clears the cache, but reaches the
        caller wrapped in an ``ExceptionGroup``.
        """
        if self._running:
            raise RuntimeError("cache runtime is already running")
        async with anyio.create_task_group() as tg:
            for timer in self.timers:
                await tg.start(timer.run)
            self._running = True
            logger.info(
                "Cache runtime started (capacity=%d, ttl=%ss, sweep every %ss)",
                self.cache.capacity,
                self.cache.ttl_seconds,
                self.sweeper.interval_seconds,
            )
            try:
                yield self
            finally:
                self.shutdown()

    def shutdown(self) -> int:
        """Stop the timers, then drop every cached entry."""
        for timer in self.timers:
            timer.stop()
        dropped = self.cache.clear()
        self._running = False
        logger.info("Cache runtime stopped, cleared %d entries", dropped)
        return dropped
