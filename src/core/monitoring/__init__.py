"""Logging setup."""

from src.core.monitoring.logging import LOG_FORMAT, configure_logging

__all__ = [
    "LOG_FORMAT",
    "configure_logging",
]
