"""Structured logging setup."""

import logging
import sys

import structlog


def configure_logging(level: str = "INFO", fmt: str = "json") -> None:
    """
    Configure structlog on top of the standard library logger.

    Args:
        level: Log level name (DEBUG, INFO, ...)
        fmt: "json" for machine-readable output, "plain" for console output
    """
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level.upper())

    if fmt == "json":
        renderer = structlog.processors.JSONRenderer()
    elif fmt == "plain":
        renderer = structlog.dev.ConsoleRenderer(colors=False)
    else:
        raise ValueError(f"Unknown log format: {fmt}")

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
