"""Bit-field helpers for 32-bit instruction words.

Bit positions count from 0 (least significant) to 31; a field is
addressed by its most significant bit, ``start``, and runs downwards.
"""

from __future__ import annotations

WORD_MASK = 0xFFFFFFFF
_BITS = "01"


def to_binary(number: int, size: int) -> str:
    """Return ``number`` in binary, zero-padded to at least ``size`` digits."""
    if number < 0:
        raise ValueError("number must not be negative")
    digits = format(number, "b") if number else ""
    return digits.rjust(size, "0")


def _position(start: int, offset: int) -> int:
    position = start - offset
    if position < 0 or position > 31:
        raise ValueError(f"bit position {position} is outside the 32-bit word")
    return position


def set_bits(word: int, start: int, pattern: str) -> int:
    """OR the bits of ``pattern`` into ``word`` from bit ``start`` downwards.

    Characters other than '0' and '1' are skipped.
    """
    for offset, char in enumerate(pattern):
        if char in _BITS:
            word |= int(char) << _position(start, offset)
    return word & WORD_MASK


def set_number(word: int, start: int, number: int, size: int) -> int:
    """OR ``number``, written with at least ``size`` bits, into ``word``."""
    return set_bits(word, start, to_binary(number, size))


def check_bits(word: int, start: int, pattern: str) -> bool:
    """Return True if ``word`` holds ``pattern`` from bit ``start`` downwards.

    Characters other than '0' and '1' match anything.
    """
    return all(
        (word >> _position(start, offset)) & 1 == int(char)
        for offset, char in enumerate(pattern)
        if char in _BITS
    )


def get_bits(word: int, start: int, size: int) -> int:
    """Return the ``size``-bit field whose top bit is ``start``."""
    if size <= 0:
        return 0
    low = _position(start, size - 1)
    _position(start, 0)
    return (word >> low) & ((1 << size) - 1)