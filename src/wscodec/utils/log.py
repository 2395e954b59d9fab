"""Logging helpers for the command-line tool."""

from __future__ import annotations

import logging


def setup_logger(logger_name: str, level: int = logging.WARNING) -> logging.Logger:
    """
    Set up a logger with consistent formatting.

    Calling this again for the same name only updates the level.

    Args:
        logger_name: Name of the logger
        level: Logging level

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(logger_name)
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger
