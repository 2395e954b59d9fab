"""Whitespace encoder.

This module provides the encode() function that expands binary data into a
string of spaces (high bits) and zero-width spaces (low bits).
"""

from __future__ import annotations

from collections.abc import Iterable

from ..exceptions import EncodeError
from .alphabet import HIGH, LOW
from .bitpack import BitUnpacker


def _as_bytes(data: bytes | bytearray | memoryview | Iterable[int]) -> bytes:
    if isinstance(data, bytes):
        return data
    if isinstance(data, (int, str)):
        # bytes(3) would allocate zeroes and bytes("a") needs an encoding
        raise EncodeError(f"Input is not a byte sequence: {type(data).__name__}")
    try:
        return bytes(data)
    except (TypeError, ValueError) as e:
        raise EncodeError(f"Input is not a byte sequence: {e}") from e


def encode(data: bytes | bytearray | memoryview | Iterable[int]) -> str:
    """Encode binary data as whitespace.

    Each byte becomes eight characters, one per bit, most significant bit
    first:

    - U+0020 (space) represents a high bit
    - U+200B (zero width space) represents a low bit

    Args:
        data: Bytes-like object, or an iterable of integers in 0..255

    Returns:
        Encoded text, exactly ``8 * len(data)`` characters long

    Raises:
        EncodeError: If data contains values that are not bytes

    Examples:
        ```python
        from wscodec import encode

        encode(b"\\x0a\\x0a")
        # '\\u200b\\u200b\\u200b\\u200b \\u200b \\u200b\\u200b\\u200b\\u200b\\u200b \\u200b \\u200b'
        ```
    """
    return "".join(HIGH if bit else LOW for bit in BitUnpacker(_as_bytes(data)))
