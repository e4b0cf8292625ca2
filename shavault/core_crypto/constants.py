"""
SHA-256 Constants

Fixed values from FIPS 180-4 section 4.2.2 and 5.3.3:
- K: first 32 bits of the fractional parts of the cube roots of the first 64 primes
- H_INITIAL: first 32 bits of the fractional parts of the square roots of the first 8 primes

HashParams groups the values that would change between SHA-2 variants.
"""

from dataclasses import dataclass
from typing import Tuple


# Word and block geometry
WORD_BITS = 32
WORD_SIZE = WORD_BITS // 8          # 4 bytes
BLOCK_SIZE = 64                     # 512-bit block
BLOCK_WORDS = BLOCK_SIZE // WORD_SIZE
DIGEST_SIZE = 32                    # 256-bit digest
SCHEDULE_LENGTH = 64
ROUNDS = 64

# Length field appended by the padder
LENGTH_FIELD_SIZE = 8               # 64-bit big-endian bit count
MAX_MESSAGE_BITS = (1 << (LENGTH_FIELD_SIZE * 8)) - 1

# Mask for 32-bit arithmetic
MASK_32 = 0xFFFFFFFF


# Initial hash values: first 32 bits of fractional parts of square roots of first 8 primes
H_INITIAL: Tuple[int, ...] = (
    0x6a09e667, 0xbb67ae85, 0x3c6ef372, 0xa54ff53a,
    0x510e527f, 0x9b05688c, 0x1f83d9ab, 0x5be0cd19,
)

# Round constants: first 32 bits of fractional parts of cube roots of first 64 primes
K: Tuple[int, ...] = (
    0x428a2f98, 0x71374491, 0xb5c0fbcf, 0xe9b5dba5,
    0x3956c25b, 0x59f111f1, 0x923f82a4, 0xab1c5ed5,
    0xd807aa98, 0x12835b01, 0x243185be, 0x550c7dc3,
    0x72be5d74, 0x80deb1fe, 0x9bdc06a7, 0xc19bf174,
    0xe49b69c1, 0xefbe4786, 0x0fc19dc6, 0x240ca1cc,
    0x2de92c6f, 0x4a7484aa, 0x5cb0a9dc, 0x76f988da,
    0x983e5152, 0xa831c66d, 0xb00327c8, 0xbf597fc7,
    0xc6e00bf3, 0xd5a79147, 0x06ca6351, 0x14292967,
    0x27b70a85, 0x2e1b2138, 0x4d2c6dfc, 0x53380d13,
    0x650a7354, 0x766a0abb, 0x81c2c92e, 0x92722c85,
    0xa2bfe8a1, 0xa81a664b, 0xc24b8b70, 0xc76c51a3,
    0xd192e819, 0xd6990624, 0xf40e3585, 0x106aa070,
    0x19a4c116, 0x1e376c08, 0x2748774c, 0x34b0bcb5,
    0x391c0cb3, 0x4ed8aa4a, 0x5b9cca4f, 0x682e6ff3,
    0x748f82ee, 0x78a5636f, 0x84c87814, 0x8cc70208,
    0x90befffa, 0xa4506ceb, 0xbef9a3f7, 0xc67178f2,
)


@dataclass(frozen=True)
class HashParams:
    """Parameters of a SHA-2 family member."""
    name: str
    initial_state: Tuple[int, ...]
    round_constants: Tuple[int, ...]
    block_size: int
    digest_size: int
    word_bits: int


SHA256_PARAMS = HashParams(
    name="sha256",
    initial_state=H_INITIAL,
    round_constants=K,
    block_size=BLOCK_SIZE,
    digest_size=DIGEST_SIZE,
    word_bits=WORD_BITS,
)
