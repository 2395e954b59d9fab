"""Bit-level packing and unpacking utilities.

This module provides the bit manipulation shared by the encoder and decoder.
All operations are big-endian: the first bit of every byte is its most
significant bit.
"""

from __future__ import annotations

from collections.abc import Iterator

from .alphabet import BITS_PER_BYTE


class BitPacker:
    """Packs bits into a byte buffer.

    Bits are collected with write_bit() and folded into bytes by to_bytes(),
    eight at a time. The first bit of each group lands on bit position 7.

    Example:
        >>> packer = BitPacker()
        >>> for bit in (0, 0, 0, 0, 1, 0, 1, 0):
        ...     packer.write_bit(bit)
        >>> packer.to_bytes()
        b'\\n'
    """

    def __init__(self) -> None:
        """Initialize an empty bit packer."""
        self._bits: list[int] = []  # List of 0s and 1s

    def write_bit(self, bit: int) -> None:
        """Write a single bit.

        Args:
            bit: 0 or 1

        Raises:
            ValueError: If bit is not 0 or 1
        """
        if bit not in (0, 1):
            raise ValueError(f"bit must be 0 or 1, got {bit!r}")
        self._bits.append(bit)

    def bit_length(self) -> int:
        """Return the current number of bits written.

        Returns:
            Number of bits in the buffer
        """
        return len(self._bits)

    def is_aligned(self) -> bool:
        """Return True if the bit count is a whole number of bytes."""
        return len(self._bits) % BITS_PER_BYTE == 0

    def to_bytes(self) -> bytes:
        """Convert the bit buffer to bytes.

        Unlike a general purpose packer this never pads: a partial trailing
        byte is an error.

        Returns:
            Packed bytes

        Raises:
            ValueError: If the number of bits is not a multiple of 8
        """
        if not self.is_aligned():
            raise ValueError(
                f"Cannot pack {len(self._bits)} bits into whole bytes "
                f"(need a multiple of {BITS_PER_BYTE})"
            )

        result = bytearray()
        for i in range(0, len(self._bits), BITS_PER_BYTE):
            byte = 0
            for offset, bit in enumerate(self._bits[i : i + BITS_PER_BYTE]):
                byte |= bit << (BITS_PER_BYTE - 1 - offset)
            result.append(byte)

        return bytes(result)


class BitUnpacker:
    """Unpacks the bits of a byte buffer, most significant bit first.

    Example:
        >>> list(BitUnpacker(b"\\x0a"))
        [0, 0, 0, 0, 1, 0, 1, 0]
    """

    def __init__(self, data: bytes) -> None:
        """Initialize a bit unpacker with the given data.

        Args:
            data: Byte buffer to unpack
        """
        self._data = data

    def __iter__(self) -> Iterator[int]:
        for byte in self._data:
            for position in range(BITS_PER_BYTE - 1, -1, -1):
                yield 1 if byte & (1 << position) else 0

    def bit_length(self) -> int:
        """Return the total number of bits in the buffer."""
        return len(self._data) * BITS_PER_BYTE
