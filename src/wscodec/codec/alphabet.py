"""The fixed two-character alphabet."""

from __future__ import annotations

#: High bit (1): U+0020 SPACE
HIGH = " "

#: Low bit (0): U+200B ZERO WIDTH SPACE
LOW = "\u200b"

BITS_PER_BYTE = 8
