"""
================================================================================
Storefront Tools Common Utilities
================================================================================

Shared logging setup and filesystem helpers for the storefront suites.

Exports:
    - init_logger: Configure the loguru logger once per process
    - ensure_directory: Create a directory if needed
    - sanitize_file_name: Make a string safe to use as a file name

Usage:
    from storefront_tools.common import init_logger

    init_logger(level="DEBUG", log_file="reports/logs/ui.log")

================================================================================
"""

import os
import re
import sys
from typing import Optional

from loguru import logger


DEFAULT_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)

_logger_initialized = False


def init_logger(
    level: str = "INFO",
    format_string: Optional[str] = None,
    log_file: Optional[str] = None,
    rotation: str = "10 MB",
    retention: str = "7 days",
) -> None:
    """
    Initializes the loguru logger with standard settings.

    Subsequent calls are ignored, so both the root conftest and the test
    runner may call it.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        format_string: Log format string. Uses DEFAULT_FORMAT if not provided.
        log_file: Optional file path to also write logs to
        rotation: Rotation policy for the log file
        retention: Retention policy for rotated log files
    """
    global _logger_initialized

    if _logger_initialized:
        return

    logger.remove()
    format_string = format_string or DEFAULT_FORMAT

    logger.add(
        sys.stderr,
        format=format_string,
        level=level.upper(),
        colorize=True,
    )

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            ensure_directory(log_dir)

        logger.add(
            log_file,
            format=format_string,
            level=level.upper(),
            rotation=rotation,
            retention=retention,
        )

    _logger_initialized = True
    logger.debug(f"Logger initialized with level: {level.upper()}")


def ensure_directory(path: str) -> str:
    """
    Ensures a directory exists, creating it if necessary.

    Returns:
        The path (for chaining)
    """
    os.makedirs(path, exist_ok=True)
    return path


def sanitize_file_name(name: str) -> str:
    """
    Make a string safe to use as a file name.

    Reserved characters and whitespace become underscores, repeated
    underscores collapse, and the result is lower-cased.

    Example:
        >>> sanitize_file_name("TC002 - Add: Samsung/MacBook")
        'tc002_-_add_samsung_macbook'
    """
    cleaned = re.sub(r'[:<>"/\\|?*\x00-\x1f]', "_", name)
    cleaned = re.sub(r"\s+", "_", cleaned)
    cleaned = re.sub(r"_+", "_", cleaned)
    return cleaned.strip("_").lower() or "unnamed"


__all__ = [
    "init_logger",
    "ensure_directory",
    "sanitize_file_name",
]
