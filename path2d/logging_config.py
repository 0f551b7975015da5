"""Logging setup for applications built on path2d.

The library itself only creates module loggers and never installs
handlers. Applications call ``configure_logging`` once at startup.
"""

from __future__ import annotations

import logging
from typing import Optional


def configure_logging(level: str = 'INFO', log_file: Optional[str] = None) -> None:
    """Configure application-wide logging.

    Sets up the root logger with a console handler and, optionally, a file
    handler, both using the same timestamped format.

    Args:
        level: Log level string ('DEBUG', 'INFO', 'WARNING', 'ERROR').
        log_file: Optional path to log file. If None, logs to stderr only.

    Example:
        Configure at startup::

            from path2d.logging_config import configure_logging
            configure_logging(level='DEBUG', log_file='path2d.log')
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    formatter = logging.Formatter(
        fmt='%(asctime)s %(levelname)-8s [%(name)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Remove existing handlers to avoid duplicates
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    logging.getLogger(__name__).debug("Logging configured at %s", logging.getLevelName(log_level))
