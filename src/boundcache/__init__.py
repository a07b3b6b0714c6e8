"""boundcache

A process-local key/value cache with a hard entry limit, per-entry TTL and a
background sweeper, plus the small runtime that owns it and reports its
memory footprint.
"""

from .cache import BoundedTTLCache, CacheEntry
from .core import PeriodicTask, Sweeper
from .monitoring import CacheMetrics, MemoryUsage, process_memory_usage
from .monitoring.reporter import CacheSnapshot, MemoryReporter
from .runtime import CacheRuntime
from .utils.config import AppConfig, CacheConfig, ReporterConfig, ServerConfig

__all__ = [
    "BoundedTTLCache",
    "CacheEntry",
    "PeriodicTask",
    "Sweeper",
    "CacheMetrics",
    "MemoryUsage",
    "process_memory_usage",
    "CacheSnapshot",
    "MemoryReporter",
    "CacheRuntime",
    "AppConfig",
    "CacheConfig",
    "ReporterConfig",
    "ServerConfig",
]

__version__ = "0.1.0"
