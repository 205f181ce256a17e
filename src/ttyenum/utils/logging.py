"""Logging setup for ttyenum."""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from ttyenum.config.schema import LoggingConfig

LOG_FORMAT = "%(asctime)s [%(name)s] %(levelname)s: %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"


def setup_logging(config: LoggingConfig, verbose: bool = False) -> logging.Logger:
    """Configure the ``ttyenum`` logger.

    Args:
        config: The ``logging`` section of the loaded config.
        verbose: Force debug level (``--verbose``), so every skipped
            candidate and unresolved sysfs link is reported.

    Returns:
        The configured ``ttyenum`` logger.
    """
    level = logging.DEBUG if verbose else getattr(logging, config.level.upper())
    logger = logging.getLogger("ttyenum")
    logger.setLevel(level)
    logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    # stderr only: stdout carries the port listing / --json output
    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setFormatter(formatter)
    logger.addHandler(stderr_handler)

    if config.file:
        log_path = Path(config.file).expanduser()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=config.max_size_mb * 1024 * 1024,
            backupCount=config.backup_count,
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
