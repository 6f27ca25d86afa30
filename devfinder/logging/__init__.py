"""Logging helpers."""

from devfinder.logging.setup import configure_logging, get_logger, printable

__all__ = ["configure_logging", "get_logger", "printable"]
