"""Diagnostic logger construction."""

import logging
import os
import sys
from typing import TextIO

import structlog
from structlog.typing import FilteringBoundLogger

LOG_FLAGS = os.O_APPEND | os.O_CREAT | os.O_WRONLY
LOG_PERM = 0o644


def _open_log_file(path: str) -> TextIO:
    fd = os.open(path, LOG_FLAGS, LOG_PERM)
    return os.fdopen(fd, "a", encoding="utf-8")


def new_logger(to_file: bool, path: str) -> FilteringBoundLogger:
    """Create the diagnostic logger.

    Logs to the file at ``path`` when ``to_file`` is true, otherwise to
    standard error. If the file cannot be opened, silently falls back to
    standard error. Timestamps are UTC.

    NOTE: The log file is kept open for the lifetime of the process.
    """
    out: TextIO = sys.stderr

    if to_file:
        path = os.path.normpath(path)
        try:
            out = _open_log_file(path)
        except OSError:
            out = sys.stderr

    return structlog.wrap_logger(
        structlog.PrintLogger(out),
        wrapper_class=structlog.make_filtering_bound_logger(logging.DEBUG),
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.format_exc_info,
            structlog.processors.KeyValueRenderer(
                key_order=["timestamp", "level", "event"]
            ),
        ],
    )


def configure_logging() -> None:
    """Send structlog's default output to stderr.

    Stdout carries the MCP stdio transport and must only ever see protocol
    messages.
    """
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
    )
