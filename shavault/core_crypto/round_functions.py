"""
SHA-256 logical functions (FIPS 180-4 section 4.1.2).

All functions take and return unsigned 32-bit words.
"""

from .constants import MASK_32, WORD_BITS


def rotr(value: int, amount: int) -> int:
    """Right rotate a 32-bit integer by the specified amount."""
    value &= MASK_32
    return ((value >> amount) | (value << (WORD_BITS - amount))) & MASK_32


def shr(value: int, amount: int) -> int:
    """Right shift a 32-bit integer by the specified amount."""
    return (value & MASK_32) >> amount


def ch(x: int, y: int, z: int) -> int:
    """Choice function: if x then y else z (bitwise)."""
    return ((x & y) ^ (~x & z)) & MASK_32


def maj(x: int, y: int, z: int) -> int:
    """Majority function: majority vote of bits."""
    return ((x & y) ^ (x & z) ^ (y & z)) & MASK_32


def big_sigma0(x: int) -> int:
    """Uppercase Sigma 0: used in compression."""
    return rotr(x, 2) ^ rotr(x, 13) ^ rotr(x, 22)


def big_sigma1(x: int) -> int:
    """Uppercase Sigma 1: used in compression."""
    return rotr(x, 6) ^ rotr(x, 11) ^ rotr(x, 25)


def small_sigma0(x: int) -> int:
    """Lowercase sigma 0: used in message schedule."""
    return rotr(x, 7) ^ rotr(x, 18) ^ shr(x, 3)


def small_sigma1(x: int) -> int:
    """Lowercase sigma 1: used in message schedule."""
    return rotr(x, 17) ^ rotr(x, 19) ^ shr(x, 10)
