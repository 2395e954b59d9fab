#!/usr/bin/env python3
"""Basic usage example for wscodec.

This example demonstrates:
1. Encoding binary data as whitespace
2. Hiding the result inside ordinary text
3. Decoding it back
4. Handling decode errors
"""

from __future__ import annotations

from wscodec import (
    HIGH,
    InvalidCharacterError,
    InvalidLengthError,
    decode,
    encode,
    encoded_length,
)


def show(text: str) -> str:
    """Render encoded text visibly: '1' for a space, '0' for a zero-width space."""
    return "".join("1" if character == HIGH else "0" for character in text)


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("wscodec Basic Usage Example")
    print("=" * 60)
    print()

    payload = b"Meet at dawn"

    print("1. Encoding payload...")
    print(f"   Payload: {payload!r} ({len(payload)} bytes)")
    hidden = encode(payload)
    print(f"   Encoded: {len(hidden)} characters (expected {encoded_length(len(payload))})")
    print(f"   First byte as bits: {show(hidden[:8])}")
    print()

    print("2. Hiding inside a message...")
    cover = "See you tomorrow."
    message = cover + hidden
    print(f"   Printed message: {message}")
    print(f"   Actual length: {len(message)} characters")
    print()

    print("3. Decoding...")
    recovered = decode(message[len(cover) :])
    print(f"   Recovered: {recovered!r}")
    print(f"   Match: {'✓' if recovered == payload else '✗'}")
    print()

    print("4. Handling errors...")
    try:
        decode(message)
    except InvalidCharacterError as e:
        print(f"   {e}")
    try:
        decode(hidden[:-1])
    except InvalidLengthError as e:
        print(f"   {e}")
    print()

    print("=" * 60)
    print("Example complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
