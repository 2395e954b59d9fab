"""Encoded size calculation utilities.

This module provides functions to calculate encoded and decoded sizes
without actually encoding or decoding anything.
"""

from __future__ import annotations

from ..codec.alphabet import BITS_PER_BYTE, HIGH, LOW
from ..exceptions import InvalidLengthError


def encoded_length(num_bytes: int) -> int:
    """Calculate the length of the encoded text for a payload.

    Args:
        num_bytes: Payload size in bytes

    Returns:
        Number of characters encode() produces

    Raises:
        ValueError: If num_bytes is negative

    Example:
        >>> encoded_length(2)
        16
    """
    if num_bytes < 0:
        raise ValueError(f"num_bytes must be non-negative, got {num_bytes}")
    return num_bytes * BITS_PER_BYTE


def decoded_length(num_chars: int) -> int:
    """Calculate the payload size for encoded text of a given length.

    Args:
        num_chars: Length of the encoded text in characters

    Returns:
        Number of bytes decode() produces

    Raises:
        ValueError: If num_chars is negative
        InvalidLengthError: If num_chars is not divisible by 8

    Example:
        >>> decoded_length(16)
        2
    """
    if num_chars < 0:
        raise ValueError(f"num_chars must be non-negative, got {num_chars}")
    if num_chars % BITS_PER_BYTE:
        raise InvalidLengthError(num_chars)
    return num_chars // BITS_PER_BYTE


def is_encoded(text: str) -> bool:
    """Check whether decode() would accept the given text.

    Args:
        text: Candidate encoded text

    Returns:
        True if text only uses the two alphabet characters and its length
        is a multiple of 8
    """
    if len(text) % BITS_PER_BYTE:
        return False
    return all(character in (HIGH, LOW) for character in text)
