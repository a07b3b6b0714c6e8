"""Process memory probe.

The reporter only needs a zero-argument callable returning ``MemoryUsage``;
``process_memory_usage`` is the default and reads what the platform offers.
"""

from __future__ import annotations

import os
import sys
import typing as t
from dataclasses import asdict, dataclass
from pathlib import Path

_STATM = Path("/proc/self/statm")


@dataclass(frozen=True)
class MemoryUsage:
    rss_bytes: t.Optional[int] = None
    peak_rss_bytes: t.Optional[int] = None

    def to_dict(self) -> t.Dict[str, t.Optional[int]]:
        return asdict(self)


MemoryProbe = t.Callable[[], MemoryUsage]


def _current_rss() -> t.Optional[int]:
    try:
        fields = _STATM.read_text().split()
    except OSError:
        return None
    return int(fields[1]) * os.sysconf("SC_PAGE_SIZE")


def _peak_rss() -> t.Optional[int]:
    try:
        import resource
    except ImportError:  # not available on Windows
        return None
    peak = resource.getrusage(resource.RUSAGE_SELF).ru_maxrss
    # ru_maxrss is bytes on macOS, kilobytes elsewhere
    return peak if sys.platform == "darwin" else peak * 1024


def process_memory_usage() -> MemoryUsage:
    return MemoryUsage(rss_bytes=_current_rss(), peak_rss_bytes=_peak_rss())
