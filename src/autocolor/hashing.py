"""MurmurHash3-style text hashing.

This is not the canonical block-wise MurmurHash3. The whole input is folded
into a single 32-bit word before one mixing round, so every color ever
assigned depends on this exact sequence. Do not "fix" it.
"""

from collections.abc import Iterator

MASK_32 = 0xFFFFFFFF

SEED = 0xDEADBEEF
C1 = 0xCC9E2D51
C2 = 0x1B873593
R1 = 15
R2 = 13
M = 5
N = 0xE6546B64


def _rotl(value: int, bits: int) -> int:
    return ((value << bits) | (value >> (32 - bits))) & MASK_32


def _code_units(text: str) -> Iterator[int]:
    """Yield UTF-16 code units, splitting astral characters into surrogates."""
    for char in text:
        point = ord(char)
        if point > 0xFFFF:
            point -= 0x10000
            yield 0xD800 | (point >> 10)
            yield 0xDC00 | (point & 0x3FF)
        else:
            yield point


def murmur_hash3(text: str) -> int:
    """Hash text to an unsigned 32-bit integer.

    All arithmetic wraps at 32 bits. The empty string is valid input.
    """
    k1 = 0
    length = 0
    for unit in _code_units(text):
        k1 = ((k1 << 8) | unit) & MASK_32
        length += 1

    k1 = (k1 * C1) & MASK_32
    k1 = _rotl(k1, R1)
    k1 = (k1 * C2) & MASK_32

    h1 = SEED ^ k1
    h1 = _rotl(h1, R2)
    h1 = (h1 * M + N) & MASK_32

    # Finalization
    h1 ^= length & MASK_32
    h1 ^= h1 >> 16
    h1 = (h1 * 0x85EBCA6B) & MASK_32
    h1 ^= h1 >> 13
    h1 = (h1 * 0xC2B2AE35) & MASK_32
    h1 ^= h1 >> 16

    return h1


def text_hash(text: str) -> int:
    """Hash a label for color generation."""
    return murmur_hash3(text)
