"""Exception hierarchy for wscodec.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from WscodecError for easy catching of any wscodec-specific error.
"""

from __future__ import annotations


class WscodecError(Exception):
    """Base exception for all wscodec errors."""

    pass


class EncodeError(WscodecError):
    """Raised when the input to encode() is not a byte sequence.

    Examples:
        - Iterable containing integers outside 0..255
        - Iterable containing non-integer items
    """

    pass


class DecodeError(WscodecError):
    """Raised when decoding whitespace text fails.

    Decode failures are always one of the two subclasses below. Errors keep
    their diagnostic payload in ``args``, so they compare equal when the type
    and payload match and survive pickling.
    """

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.args == other.args  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), self.args))


class InvalidCharacterError(DecodeError):
    """Raised for the first character that is neither a high nor a low bit.

    Attributes:
        position: Zero-based index of the character, counted in characters
        character: The offending character
    """

    def __init__(self, position: int, character: str) -> None:
        super().__init__(position, character)
        self.position = position
        self.character = character

    def __str__(self) -> str:
        return f"Invalid character '{self.character}' at position {self.position}"

    def __repr__(self) -> str:
        return f"InvalidCharacterError(position={self.position}, character={self.character!r})"


class InvalidLengthError(DecodeError):
    """Raised when the number of bits is not a multiple of 8.

    Attributes:
        length: Number of bits (equal to the number of characters)
    """

    def __init__(self, length: int) -> None:
        super().__init__(length)
        self.length = length

    def __str__(self) -> str:
        return f"Invalid input length {self.length}. Must be divisible through 8"

    def __repr__(self) -> str:
        return f"InvalidLengthError(length={self.length})"
