"""Structured logging setup."""

import logging
import sys

import structlog

from repolink.core.exceptions import ConfigurationError


def configure_logging(log_level: str = "WARNING") -> None:
    """Configure structlog to render human-readable lines on stderr."""
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        raise ConfigurationError(
            f"Unknown log level: {log_level}",
            details={"log_level": log_level},
        )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="%H:%M:%S"),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def ensure_logging_configured(log_level: str = "WARNING") -> None:
    """Configure logging unless the application already did.

    structlog's unconfigured default prints every level to stdout, which
    would mix log lines into printed links.
    """
    if not structlog.is_configured():
        configure_logging(log_level=log_level)
