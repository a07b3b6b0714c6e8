"""In-process metrics and the process memory probe.

The periodic reporter lives in ``boundcache.monitoring.reporter``.
"""

from .memory import MemoryProbe, MemoryUsage, process_memory_usage
from .metrics import CacheMetrics, Counter, Gauge, Histogram

__all__ = [
    "CacheMetrics",
    "Counter",
    "Gauge",
    "Histogram",
    "MemoryProbe",
    "MemoryUsage",
    "process_memory_usage",
]
