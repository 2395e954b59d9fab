"""Whitespace codec for wscodec.

This module provides encoding and decoding between binary data and text made
of spaces and zero-width spaces.
"""

from __future__ import annotations

from .alphabet import BITS_PER_BYTE, HIGH, LOW
from .decoder import decode
from .encoder import encode

__all__ = [
    "encode",
    "decode",
    "HIGH",
    "LOW",
    "BITS_PER_BYTE",
]
