"""
Logging helpers for cvpress.

All cvpress modules log through these wrappers so every message carries the
[cvpress] prefix. The CLI calls `setup_logger` to install its sink; library
users get loguru's default stderr sink unless they configure their own.
"""

import sys

from loguru import logger

CONTEXT_PREFIX = "[cvpress]"

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | <level>{level: <7}</level> | <level>{message}</level>"


def setup_logger(level: str = "INFO", *, colorize: bool = True) -> None:
    """
    Replace loguru's default sink with a single stderr sink at `level`.

    Example:
        from cvpress.logger import setup_logger, log_info

        setup_logger("DEBUG")
        log_info("Rendering preview...")
    """
    logger.remove()
    logger.add(sys.stderr, format=LOG_FORMAT, level=level, colorize=colorize)


def log_info(message: str) -> None:
    """Log info message with [cvpress] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def log_error(message: str) -> None:
    """Log error message with [cvpress] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def log_warning(message: str) -> None:
    """Log warning message with [cvpress] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def log_debug(message: str) -> None:
    """Log debug message with [cvpress] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")
