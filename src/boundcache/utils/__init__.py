"""Configuration helpers."""

from .config import AppConfig, CacheConfig, ReporterConfig, ServerConfig

__all__ = [
    "AppConfig",
    "CacheConfig",
    "ReporterConfig",
    "ServerConfig",
]
