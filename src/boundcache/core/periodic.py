from __future__ import annotations

import logging
import math
import typing as t

import anyio
from anyio.abc import TaskStatus

logger = logging.getLogger(__name__)


class PeriodicTask:
    """Calls ``tick`` every ``interval_seconds`` until stopped.

    The period is measured from the end of one tick to the start of the next,
    so a slow tick delays the schedule instead of queueing extra runs.
    """

    def __init__(self, interval_seconds: float, name: str = "periodic-task") -> None:
        if not (interval_seconds > 0 and math.isfinite(interval_seconds)):
            raise ValueError("interval_seconds must be a finite number > 0")
        self._interval = float(interval_seconds)
        self.name = name
        self.ticks = 0
        self._scope: t.Optional[anyio.CancelScope] = None

    @property
    def interval_seconds(self) -> float:
        return self._interval

    @property
    def running(self) -> bool:
        return self._scope is not None

    def tick(self) -> None:  # pragma: no cover - interface
        raise NotImplementedError

    async def run(self, *, task_status: TaskStatus[None] = anyio.TASK_STATUS_IGNORED) -> None:
        if self._scope is not None:
            raise RuntimeError(f"{self.name} is already running")
        with anyio.CancelScope() as scope:
            self._scope = scope
            logger.info("%s started (interval=%ss)", self.name, self._interval)
            task_status.started()
            try:
                while True:
                    await anyio.sleep(self._interval)
                    self._run_tick()
            finally:
                self._scope = None
                logger.info("%s stopped after %d ticks", self.name, self.ticks)

    def _run_tick(self) -> None:
        try:
            self.tick()
        except Exception:  # noqa: BLE001 - a failed tick must not end the loop
            logger.exception("%s tick failed", self.name)
        self.ticks += 1

    def stop(self) -> None:
        if self._scope is not None:
            self._scope.cancel()
