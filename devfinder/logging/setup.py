"""Structlog configuration for devfinder."""

import logging
import sys

import structlog

from devfinder.config import WidgetConfig, LogFormat


def configure_logging(config: WidgetConfig | None = None) -> None:
    """
    Configure structlog with appropriate processors and output format.

    Args:
        config: WidgetConfig instance, uses defaults if None
    """
    if config is None:
        config = WidgetConfig()

    log_level = getattr(logging, config.log_level.upper(), logging.INFO)
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=log_level,
    )

    processors: list = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if config.log_format == LogFormat.JSON:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.extend([
            structlog.dev.set_exc_info,
            structlog.dev.ConsoleRenderer(colors=True),
        ])

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        # stdout is reserved for rendered output
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """
    Get a configured structlog logger.

    Args:
        name: Optional logger name for context

    Returns:
        Configured structlog BoundLogger
    """
    logger = structlog.get_logger()
    if name:
        logger = logger.bind(logger_name=name)
    return logger


def printable(value: str) -> str:
    """
    Escape what a strict UTF-8 stream cannot write.

    Handles come straight from user input and may carry lone surrogates.

    Examples:
        "octocat" -> "octocat"
        "a\\udcffb" -> "a\\\\udcffb"
    """
    return value.encode("utf-8", "backslashreplace").decode("utf-8")
