from __future__ import annotations

import logging
import typing as t

from .periodic import PeriodicTask

if t.TYPE_CHECKING:
    from ..cache.bounded import BoundedTTLCache

logger = logging.getLogger(__name__)


class Sweeper(PeriodicTask):
    """Reclaims expired entries on a fixed interval, including keys nobody reads again."""

    def __init__(self, cache: BoundedTTLCache, interval_seconds: float) -> None:
        super().__init__(interval_seconds, name="cache-sweeper")
        self._cache = cache
        self.removed_total = 0

    def tick(self) -> None:
        removed = self._cache.sweep()
        self.removed_total += removed
        logger.debug("Sweep removed %d expired entries, %d remain", removed, self._cache.size())
