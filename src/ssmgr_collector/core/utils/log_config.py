"""Logging configuration for the collector plugin.

This module provides centralized logging configuration using Loguru.
It logs to the console, and optionally to a file with rotation. The
console level defaults to ``SSMGR_COLLECTOR_LOG_LEVEL`` (INFO when unset).
"""

import os
import sys
from pathlib import Path

from loguru import logger

LOG_DIR = Path.home() / ".ssmgr-collector" / "logs"
LOG_LEVEL_VAR = "SSMGR_COLLECTOR_LOG_LEVEL"
DEFAULT_LEVEL = "INFO"

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"


def setup_logging(level: str | None = None, log_file: Path | None = None) -> None:
    """Replace the Loguru handlers with the collector ones.

    Args:
        level: Console log level (default: from environment, else INFO)
        log_file: Optional file to log to at DEBUG level with rotation
    """
    level = (level or os.environ.get(LOG_LEVEL_VAR) or DEFAULT_LEVEL).upper()
    try:
        logger.level(level)
    except ValueError:
        unknown_level, level = level, DEFAULT_LEVEL
    else:
        unknown_level = None

    logger.remove()  # Remove default handler
    logger.add(
        sys.stderr,
        format=CONSOLE_FORMAT,
        level=level,
        backtrace=True,
        diagnose=True,
    )

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            rotation="10 MB",
            retention="1 week",
            compression="zip",
            format=FILE_FORMAT,
            level="DEBUG",
            backtrace=True,
            diagnose=True,
        )

    if unknown_level is not None:
        logger.warning(f"Unknown log level {unknown_level!r}, using {DEFAULT_LEVEL}")


__all__ = ["LOG_DIR", "logger", "setup_logging"]
