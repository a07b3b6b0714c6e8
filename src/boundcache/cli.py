from __future__ import annotations

import dataclasses
import logging

import click

from .utils.config import AppConfig

logger = logging.getLogger(__name__)

_DEFAULTS = AppConfig.from_env()


@click.group()
def main() -> None:
    """Bounded TTL cache demo tools."""


@main.command()
@click.option("--host", default=_DEFAULTS.server.host, show_default=True, help="Interface to bind")
@click.option("--port", default=_DEFAULTS.server.port, show_default=True, help="Port to listen on for HTTP")
@click.option("--capacity", default=_DEFAULTS.cache.capacity, show_default=True, help="Maximum cached entries")
@click.option("--ttl", default=_DEFAULTS.cache.ttl_seconds, show_default=True, help="Entry time-to-live in seconds")
@click.option(
    "--sweep-interval",
    default=_DEFAULTS.cache.sweep_interval_seconds,
    show_default=True,
    help="Seconds between expiry sweeps",
)
@click.option(
    "--report-interval",
    default=_DEFAULTS.reporter.interval_seconds,
    show_default=True,
    help="Seconds between memory reports",
)
@click.option("--no-report", is_flag=True, default=False, help="Disable the periodic memory reporter")
@click.option(
    "--log-level",
    default="INFO",
    help="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
)
def serve(
    host: str,
    port: int,
    capacity: int,
    ttl: float,
    sweep_interval: float,
    report_interval: float,
    no_report: bool,
    log_level: str,
) -> int:
    """Run the demo HTTP server backed by a bounded cache."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    config = build_config(
        host=host,
        port=port,
        capacity=capacity,
        ttl=ttl,
        sweep_interval=sweep_interval,
        report_interval=report_interval,
        report=not no_report,
    )

    from .server.app import create_app

    try:
        app = create_app(config)
    except ValueError as exc:
        raise click.BadParameter(str(exc)) from exc

    import uvicorn

    logger.info("Serving on http://%s:%d (GET /leak, GET /status)", config.server.host, config.server.port)
    uvicorn.run(app, host=config.server.host, port=config.server.port, log_level=log_level.lower())
    return 0


def build_config(
    *,
    host: str,
    port: int,
    capacity: int,
    ttl: float,
    sweep_interval: float,
    report_interval: float,
    report: bool = True,
) -> AppConfig:
    return dataclasses.replace(
        _DEFAULTS,
        cache=dataclasses.replace(
            _DEFAULTS.cache,
            capacity=capacity,
            ttl_seconds=ttl,
            sweep_interval_seconds=sweep_interval,
        ),
        reporter=dataclasses.replace(_DEFAULTS.reporter, enabled=report, interval_seconds=report_interval),
        server=dataclasses.replace(_DEFAULTS.server, host=host, port=port),
    )


if __name__ == "__main__":
    main()
