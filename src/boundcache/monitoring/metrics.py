from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple


def _label_key(labels: Dict[str, Any]) -> Tuple:
    return tuple(sorted(labels.items()))


@dataclass
class Counter:
    name: str
    help: str
    values: Dict[Tuple, float] = field(default_factory=dict)

    def inc(self, value: float = 1.0, **labels: Any) -> None:
        key = _label_key(labels)
        self.values[key] = self.values.get(key, 0.0) + value

    def get(self, **labels: Any) -> float:
        return self.values.get(_label_key(labels), 0.0)


@dataclass
class Gauge:
    name: str
    help: str
    values: Dict[Tuple, float] = field(default_factory=dict)

    def set(self, value: float, **labels: Any) -> None:
        self.values[_label_key(labels)] = float(value)

    def get(self, **labels: Any) -> float:
        return self.values.get(_label_key(labels), 0.0)


@dataclass
class Histogram:
    name: str
    help: str
    buckets: List[float]
    counts: Dict[Tuple, List[int]] = field(default_factory=dict)

    def observe(self, val: float, **labels: Any) -> None:
        key = _label_key(labels)
        if key not in self.counts:
            # last slot is the +Inf bucket
            self.counts[key] = [0 for _ in range(len(self.buckets) + 1)]
        for i, b in enumerate(self.buckets):
            if val <= b:
                self.counts[key][i] += 1
                break
        else:
            self.counts[key][-1] += 1

    def total(self, **labels: Any) -> int:
        return sum(self.counts.get(_label_key(labels), []))


@dataclass
class CacheMetrics:
    """Instruments owned by a single cache instance."""

    hits: Counter = field(default_factory=lambda: Counter("cache_hits_total", "Get calls that returned a value"))
    misses: Counter = field(default_factory=lambda: Counter("cache_misses_total", "Get calls that found nothing"))
    evictions: Counter = field(
        default_factory=lambda: Counter("cache_evictions_total", "Entries removed, by reason")
    )
    size: Gauge = field(default_factory=lambda: Gauge("cache_size_entries", "Entries currently held"))
    sweep_duration_seconds: Histogram = field(
        default_factory=lambda: Histogram(
            "cache_sweep_duration_seconds",
            "Time spent in a single sweep",
            buckets=[0.0001, 0.0005, 0.001, 0.005, 0.01, 0.05, 0.1, 0.5],
        )
    )

    def hit_ratio(self) -> float:
        hits = self.hits.get()
        total = hits + self.misses.get()
        return hits / total if total else 0.0
