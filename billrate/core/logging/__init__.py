"""Logging utilities for diagnostics on stderr."""

from billrate.core.logging.config import LogConfig
from billrate.core.logging.logger import configure_logging, log_context, logger

__all__ = [
    "LogConfig",
    "configure_logging",
    "log_context",
    "logger",
]
