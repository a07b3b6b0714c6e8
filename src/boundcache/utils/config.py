from __future__ import annotations

import dataclasses
import os
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional


@dataclass
class CacheConfig:
    capacity: int = 1000
    ttl_seconds: float = 60.0
    sweep_interval_seconds: float = 60.0


@dataclass
class ReporterConfig:
    enabled: bool = True
    interval_seconds: float = 5.0


@dataclass
class ServerConfig:
    host: str = "127.0.0.1"
    port: int = 3000
    payload_bytes: int = 1024 * 1024


def _env_bool(environ: Mapping[str, str], name: str, default: bool) -> bool:
    raw = environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(environ: Mapping[str, str], name: str, default: int) -> int:
    raw = environ.get(name)
    if raw is None:
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


def _env_float(environ: Mapping[str, str], name: str, default: float) -> float:
    raw = environ.get(name)
    if raw is None:
        return default
    try:
        return float(raw.strip())
    except ValueError:
        return default


@dataclass
class AppConfig:
    cache: CacheConfig = dataclasses.field(default_factory=CacheConfig)
    reporter: ReporterConfig = dataclasses.field(default_factory=ReporterConfig)
    server: ServerConfig = dataclasses.field(default_factory=ServerConfig)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AppConfig":
        def build(dc_cls, key):
            values = data.get(key, {})
            return dc_cls(**values)

        return cls(
            cache=build(CacheConfig, "cache"),
            reporter=build(ReporterConfig, "reporter"),
            server=build(ServerConfig, "server"),
        )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "AppConfig":
        env = os.environ if environ is None else environ
        cache, reporter, server = CacheConfig(), ReporterConfig(), ServerConfig()
        return cls(
            cache=CacheConfig(
                capacity=_env_int(env, "BOUNDCACHE_CAPACITY", cache.capacity),
                ttl_seconds=_env_float(env, "BOUNDCACHE_TTL_SECONDS", cache.ttl_seconds),
                sweep_interval_seconds=_env_float(env, "BOUNDCACHE_SWEEP_INTERVAL", cache.sweep_interval_seconds),
            ),
            reporter=ReporterConfig(
                enabled=_env_bool(env, "BOUNDCACHE_REPORT_ENABLED", reporter.enabled),
                interval_seconds=_env_float(env, "BOUNDCACHE_REPORT_INTERVAL", reporter.interval_seconds),
            ),
            server=ServerConfig(
                host=env.get("HOST", server.host).strip(),
                port=_env_int(env, "PORT", server.port),
                payload_bytes=_env_int(env, "BOUNDCACHE_PAYLOAD_BYTES", server.payload_bytes),
            ),
        )
