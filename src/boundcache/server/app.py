"""Demo HTTP front end: the memory-leak demo's two routes, backed by a bounded cache."""

from __future__ import annotations

import contextlib
import itertools
import logging
import secrets
import time
import typing as t
from datetime import datetime, timezone

from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Route

from ..monitoring.memory import MemoryProbe, process_memory_usage
from ..runtime import CacheRuntime
from ..utils.config import AppConfig

logger = logging.getLogger(__name__)


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def _make_payload(size_bytes: int) -> t.Dict[str, t.Any]:
    return {
        "timestamp": _now_iso(),
        "largeString": "x" * size_bytes,
        "randomData": secrets.token_hex(16) * 64,
    }


async def leak(request: Request) -> JSONResponse:
    runtime: CacheRuntime = request.app.state.runtime
    key = (time.monotonic_ns(), next(request.app.state.sequence))
    runtime.cache.set(key, _make_payload(request.app.state.payload_bytes))
    return JSONResponse(
        {
            "message": "Entry cached",
            "cacheSize": runtime.cache.size(),
            "capacity": runtime.cache.capacity,
            "timestamp": _now_iso(),
        }
    )


async def status(request: Request) -> JSONResponse:
    runtime: CacheRuntime = request.app.state.runtime
    if runtime.reporter is not None:
        snap = runtime.reporter.snapshot()
        memory = snap.memory
    else:
        memory = request.app.state.probe()
    return JSONResponse(
        {
            "cacheSize": runtime.cache.size(),
            "capacity": runtime.cache.capacity,
            "memory": memory.to_dict(),
            "timestamp": _now_iso(),
        }
    )


def create_app(
    config: t.Optional[AppConfig] = None,
    *,
    runtime: t.Optional[CacheRuntime] = None,
    probe: MemoryProbe = process_memory_usage,
) -> Starlette:
    config = config or AppConfig()
    runtime = runtime or CacheRuntime.from_config(config.cache, config.reporter, probe=probe)

    @contextlib.asynccontextmanager
    async def lifespan(app: Starlette) -> t.AsyncIterator[None]:
        async with runtime.run():
            logger.info("Application started")
            try:
                yield
            finally:
                logger.info("Application shutting down...")

    app = Starlette(
        routes=[
            Route("/leak", leak, methods=["GET"]),
            Route("/status", status, methods=["GET"]),
        ],
        lifespan=lifespan,
    )
    app.state.runtime = runtime
    app.state.probe = probe
    app.state.payload_bytes = config.server.payload_bytes
    app.state.sequence = itertools.count()
    return app
