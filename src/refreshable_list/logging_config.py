"""Centralized loguru configuration for the refreshable list.

Provides:
- File sink with rotation (the TUI owns the terminal while running)
- Optional console sink for non-interactive commands
- Standard logging interception for third-party libraries

Example:
    >>> from refreshable_list.logging_config import configure_logging
    >>> configure_logging(level="DEBUG", log_file="/tmp/refreshable_list.log")
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional, Union

from loguru import logger

VALID_LEVELS = {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> - "
    "<level>{message}</level>"
)

FILE_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss.SSS} | "
    "{level: <8} | "
    "{name}:{function}:{line} | "
    "{message}"
)


class InterceptHandler(logging.Handler):
    """Intercept standard logging and redirect to loguru.

    Captures logs from third-party libraries (asyncio, Textual's stdlib
    logging, etc.) and routes them through loguru for consistent formatting.
    """

    def emit(self, record):
        """Handle a log record from standard logging."""
        # Get corresponding loguru level
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find caller from where the log originated
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def configure_logging(
    level: str = "INFO",
    log_file: Optional[Union[str, Path]] = None,
    rotation: str = "10 MB",
    retention: str = "7 days",
    console: bool = False,
    colorize: bool = True,
    intercept_standard_logging: bool = True,
    enqueue: bool = False,
) -> None:
    """Configure loguru sinks.

    Args:
        level: Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Log file path (None = no file logging)
        rotation: When to rotate the log file (size or time)
        retention: How long to keep old logs
        console: Also log to stderr (never while the TUI is running)
        colorize: Enable colored console output
        intercept_standard_logging: Capture logs from standard logging module
        enqueue: Thread-safe logging via message queue

    Raises:
        ValueError: If level is not a loguru level name
    """
    level_upper = level.upper()
    if level_upper not in VALID_LEVELS:
        raise ValueError(
            f"Invalid log level: {level}. Must be one of {sorted(VALID_LEVELS)}"
        )
    level = level_upper

    # Remove default handler
    logger.remove()

    if console:
        logger.add(
            sys.stderr,
            level=level,
            format=CONSOLE_FORMAT,
            colorize=colorize,
            enqueue=enqueue,
        )

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_path,
            level=level,
            format=FILE_FORMAT,
            rotation=rotation,
            retention=retention,
            enqueue=enqueue,
        )

    if intercept_standard_logging:
        logging.root.handlers = [InterceptHandler()]
        logging.root.setLevel(level)
