"""wscodec: Whitespace Binary Codec

A Python library that hides arbitrary binary data in text made of only two
whitespace characters, and recovers it again.

Each byte becomes eight characters, most significant bit first:
- U+0020 (space) represents a high bit
- U+200B (zero width space) represents a low bit

Key Features:
- Lossless round-trip for any byte sequence
- Strict decoding with precise error positions
- Pure functions, no I/O and no shared state
- Command-line tool for files and pipes

Quick Start:
    >>> from wscodec import encode, decode
    >>>
    >>> text = encode(b"hi")
    >>> len(text)
    16
    >>> decode(text)
    b'hi'
"""

from __future__ import annotations

__version__ = "0.1.0"

from .codec import BITS_PER_BYTE, HIGH, LOW, decode, encode
from .exceptions import (
    DecodeError,
    EncodeError,
    InvalidCharacterError,
    InvalidLengthError,
    WscodecError,
)
from .utils import decoded_length, encoded_length, is_encoded

__all__ = [
    # Core API
    "encode",
    "decode",
    # Alphabet
    "HIGH",
    "LOW",
    "BITS_PER_BYTE",
    # Exceptions
    "WscodecError",
    "EncodeError",
    "DecodeError",
    "InvalidCharacterError",
    "InvalidLengthError",
    # Sizing
    "encoded_length",
    "decoded_length",
    "is_encoded",
    # Version
    "__version__",
]
