"""Logging configuration for jpseg."""

import logging
import sys
from typing import Literal

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]

# Create a package-level logger
logger = logging.getLogger("jpseg")


def setup_logging(level: LogLevel = "WARNING", verbose: bool = False) -> None:
    """Configure logging for the jpseg package.

    Args:
        level: Base logging level
        verbose: If True, sets level to DEBUG
    """
    if verbose:
        level = "DEBUG"

    logger.setLevel(getattr(logging, level))

    # Only add handler if none exist (avoid duplicate handlers)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(getattr(logging, level))

        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    else:
        for handler in logger.handlers:
            handler.setLevel(getattr(logging, level))


def get_logger(name: str) -> logging.Logger:
    """Get a child logger for a specific module.

    Args:
        name: Module name (e.g., "analyzer.concordance")

    Returns:
        Logger instance
    """
    return logging.getLogger(f"jpseg.{name}")
