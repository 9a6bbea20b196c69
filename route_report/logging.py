from __future__ import annotations

import logging
import sys

import structlog

from .config import resolve_log_format, resolve_log_level


def configure_logging(level: int | None = None, log_format: str | None = None) -> None:
    """
    Route structlog events for report runs to stderr.
    ``log_format`` is "console" (default) or "json"; both fall back to the
    LOG_LEVEL / LOG_FORMAT environment settings.
    """
    level = resolve_log_level() if level is None else level
    log_format = resolve_log_format() if log_format is None else log_format
    renderer = (
        structlog.processors.JSONRenderer()
        if log_format == "json"
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    logging.basicConfig(level=level, format="%(message)s")
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            renderer,
        ],
    )


def ensure_logging() -> None:
    """Configure logging once, leaving any host application setup alone."""
    if not structlog.is_configured():
        configure_logging()
