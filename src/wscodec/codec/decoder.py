"""Whitespace decoder.

This module provides the decode() function that converts whitespace text
produced by encode() back to binary data.
"""

from __future__ import annotations

from ..exceptions import InvalidCharacterError, InvalidLengthError
from .alphabet import HIGH, LOW
from .bitpack import BitPacker


def decode(text: str) -> bytes:
    """Decode whitespace text back into binary data.

    Decoding happens in two phases. Every character is validated first, left
    to right, and mapped to a bit; only then is the bit count checked. An
    invalid character is therefore reported even when the length is also
    wrong.

    Args:
        text: Text made only of U+0020 (high bit) and U+200B (low bit)

    Returns:
        Decoded bytes

    Raises:
        InvalidCharacterError: On the first character that is not part of
            the alphabet
        InvalidLengthError: If the number of characters is not divisible by 8
        TypeError: If text is not a str (decode bytes to text first)

    Examples:
        ```python
        from wscodec import decode

        decode("\\u200b\\u200b\\u200b\\u200b \\u200b \\u200b" * 2)
        # b'\\n\\n'
        ```
    """
    if not isinstance(text, str):
        raise TypeError(f"decode() expects str, got {type(text).__name__}")

    packer = BitPacker()

    # Phase 1: character validation
    for position, character in enumerate(text):
        if character == HIGH:
            packer.write_bit(1)
        elif character == LOW:
            packer.write_bit(0)
        else:
            raise InvalidCharacterError(position, character)

    # Phase 2: length validation
    if not packer.is_aligned():
        raise InvalidLengthError(packer.bit_length())

    return packer.to_bytes()
