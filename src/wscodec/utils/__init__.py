"""Utility functions for wscodec.

This module provides size calculation and logging helpers.
"""

from __future__ import annotations

from .log import setup_logger
from .sizing import decoded_length, encoded_length, is_encoded

__all__ = [
    # Sizing functions
    "encoded_length",
    "decoded_length",
    "is_encoded",
    # Logging
    "setup_logger",
]
