"""
Logging utilities for schemacache.

The library logs through loguru's shared ``logger`` and stays silent
until an application configures sinks, e.g. with :func:`get_logger`.

Author: Yobie Benjamin
Date: 2026-10-18
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

DEFAULT_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)

# Library default: no output unless the application opts in
logger.disable("schemacache")


def get_logger(
    name: Optional[str] = None,
    level: str = "INFO",
    log_file: Optional[Path] = None,
    rotation: str = "10 MB",
    retention: str = "7 days",
    format: Optional[str] = None,
):
    """
    Configure loguru sinks and enable schemacache logging.

    Args:
        name: Value bound as ``name`` on the returned logger
        level: Log level (TRACE, DEBUG, INFO, WARNING, ERROR)
        log_file: Path to log file
        rotation: Log rotation size/time
        retention: Log retention period
        format: Log format string

    Returns:
        Configured logger instance
    """
    # Remove default handler
    logger.remove()

    if format is None:
        format = DEFAULT_FORMAT

    logger.add(
        sys.stderr,
        format=format,
        level=level,
        colorize=True,
    )

    if log_file:
        logger.add(
            log_file,
            format=format,
            level=level,
            rotation=rotation,
            retention=retention,
            compression="zip",
        )

    logger.enable("schemacache")

    if name:
        return logger.bind(name=name)

    return logger
