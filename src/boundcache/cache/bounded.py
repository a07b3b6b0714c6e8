from __future__ import annotations

import logging
import math
import threading
import time
import typing as t
from collections import OrderedDict
from dataclasses import dataclass

from ..monitoring.metrics import CacheMetrics

logger = logging.getLogger(__name__)

Clock = t.Callable[[], float]


def _check_ttl(ttl_seconds: float) -> float:
    # NaN and inf would produce entries that never expire
    if not (ttl_seconds > 0 and math.isfinite(ttl_seconds)):
        raise ValueError("ttl_seconds must be a finite number > 0")
    return float(ttl_seconds)


@dataclass
class CacheEntry:
    value: t.Any
    created_at: float
    expires_at: float

    def is_expired(self, now: float) -> bool:
        return self.expires_at <= now


class BoundedTTLCache:
    """Key/value store with a hard entry limit and per-entry expiration.

    Eviction is by insertion order: when the cache is full, a Put of a new
    key drops the oldest entry first. Overwriting a key re-inserts it at the
    back of that order. Expired entries are removed lazily by ``get`` and in
    bulk by ``sweep``, which a :class:`~boundcache.core.sweeper.Sweeper` runs
    on a fixed interval.

    All mutations are serialized under one lock held only for the map update
    and its metric counters, so the cache can be shared between worker
    threads and the event loop.
    """

    def __init__(
        self,
        capacity: int,
        ttl_seconds: float,
        *,
        clock: Clock = time.monotonic,
        metrics: t.Optional[CacheMetrics] = None,
    ) -> None:
        if capacity < 1:
            raise ValueError("capacity must be >= 1")
        self._capacity = int(capacity)
        self._ttl = _check_ttl(ttl_seconds)
        self._clock = clock
        self._store: "OrderedDict[t.Hashable, CacheEntry]" = OrderedDict()
        self._lock = threading.Lock()
        self.metrics = metrics or CacheMetrics()

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def ttl_seconds(self) -> float:
        return self._ttl

    def set(self, key: t.Hashable, value: t.Any, ttl_seconds: t.Optional[float] = None) -> None:
        ttl = self._ttl if ttl_seconds is None else _check_ttl(ttl_seconds)
        now = self._clock()
        entry = CacheEntry(value=value, created_at=now, expires_at=now + ttl)
        evicted = False
        with self._lock:
            if key in self._store:
                # overwrite counts as a fresh insertion
                del self._store[key]
            elif len(self._store) >= self._capacity:
                self._store.popitem(last=False)
                self.metrics.evictions.inc(reason="capacity")
                evicted = True
            self._store[key] = entry
            self.metrics.size.set(len(self._store))
        if evicted:
            logger.debug("Evicted oldest entry to admit %r (capacity=%d)", key, self._capacity)

    def get(self, key: t.Hashable, default: t.Any = None) -> t.Any:
        now = self._clock()
        with self._lock:
            entry = self._store.get(key)
            if entry is not None and entry.is_expired(now):
                del self._store[key]
                self.metrics.evictions.inc(reason="expired")
                self.metrics.size.set(len(self._store))
                entry = None
            if entry is None:
                self.metrics.misses.inc()
                return default
            self.metrics.hits.inc()
            return entry.value

    def delete(self, key: t.Hashable) -> None:
        with self._lock:
            self._store.pop(key, None)
            self.metrics.size.set(len(self._store))

    def sweep(self) -> int:
        """Drop every expired entry and return how many were removed."""
        started = time.perf_counter()
        now = self._clock()
        with self._lock:
            expired = [key for key, entry in self._store.items() if entry.is_expired(now)]
            for key in expired:
                del self._store[key]
            if expired:
                self.metrics.evictions.inc(len(expired), reason="expired")
            self.metrics.size.set(len(self._store))
            self.metrics.sweep_duration_seconds.observe(time.perf_counter() - started)
        return len(expired)

    def size(self) -> int:
        with self._lock:
            return len(self._store)

    def clear(self) -> int:
        with self._lock:
            removed = len(self._store)
            self._store.clear()
            if removed:
                self.metrics.evictions.inc(removed, reason="cleared")
            self.metrics.size.set(0)
        return removed

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, key: object) -> bool:
        now = self._clock()
        with self._lock:
            entry = self._store.get(key)  # type: ignore[arg-type]
            return entry is not None and not entry.is_expired(now)
