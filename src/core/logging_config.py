"""Structured logging configuration.

This module initializes structlog once with a stable JSON line format.
Log lines go to stderr so stdout only carries the run summary.
"""

from __future__ import annotations

import sys
from typing import Any

import structlog


def _stderr_logger_factory(*_args: Any) -> structlog.PrintLogger:
    """Bind each log call to the current stderr stream.

    Loggers are not cached, so a replaced ``sys.stderr`` is picked up.

    Returns:
        Print logger writing to stderr.
    """
    return structlog.PrintLogger(file=sys.stderr)


structlog.configure(
    processors=[
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.add_log_level,
        structlog.processors.JSONRenderer(),
    ],
    logger_factory=_stderr_logger_factory,
    cache_logger_on_first_use=False,
)


def get_logger(name: str) -> Any:
    """Return a module logger instance.

    Args:
        name: Logger name, usually __name__.

    Returns:
        A structlog logger with structured output.
    """
    return structlog.get_logger(name)
