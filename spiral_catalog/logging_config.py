"""Logging setup for the spiral_catalog package."""

import logging
import sys


def setup_logging(level: str = "INFO") -> None:
    """
    Configure the 'spiral_catalog' logger with a stdout handler.

    Args:
        level: Level name, e.g. "DEBUG" or "INFO"
    """
    logger = logging.getLogger("spiral_catalog")
    logger.setLevel(level)

    # Avoid duplicate handlers when the app factory runs more than once
    if logger.hasHandlers():
        logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%H:%M:%S",
        )
    )
    logger.addHandler(handler)
