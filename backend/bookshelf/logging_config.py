"""
Bookshelf — Logging Setup
===========================

What:  One place that configures the root logger for both programs.
How:   logging.basicConfig with a shared format; the caller picks the stream.
       The service logs to stdout (container-friendly); the CLI logs to
       stderr so that stdout carries only note output.
"""

import logging
import sys
from typing import Optional, TextIO

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"

# These libraries log at DEBUG/INFO for every operation
NOISY_LOGGERS = ("uvicorn.access", "sqlalchemy.engine", "aiosqlite", "asyncio")


def setup_logging(level: str = "INFO", stream: Optional[TextIO] = None) -> None:
    """
    Configure logging for the entire process.

    Args:
        level:  Logging level name (already validated by Settings).
        stream: Where log records go. Defaults to stdout.
    """
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        handlers=[logging.StreamHandler(stream or sys.stdout)],
        force=True,  # Override any existing logging config
    )

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
