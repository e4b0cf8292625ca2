"""
SHA-256 Self-Test

Checks the from-scratch implementation against:
- NIST test vectors (FIPS 180-4 examples and common reference strings)
- The SHA-256 of the `cryptography` package, on random inputs whose
  lengths sit around the padding boundaries
"""

import secrets
from dataclasses import dataclass
from typing import List, Optional

from cryptography.hazmat.primitives import hashes

from .core_crypto.sha256 import new, sha256


# (message, expected hex digest)
NIST_VECTORS = [
    (b"", "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"),
    (b"abc", "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"),
    (b"abcdbcdecdefdefgefghfghighijhijkijkljklmklmnlmnomnopnopq",
     "248d6a61d20638b8e5c026930c3e6039a33ce45964ff2167f6ecedd419db06c1"),
    (b"The quick brown fox jumps over the lazy dog",
     "d7a8fbb307d7809469ca9abcb0082e4f8d5651e46d3cdb762d02d0bf37c9e592"),
]

# Lengths straddling the 55/56/64-byte padding boundaries
BOUNDARY_LENGTHS = (0, 1, 55, 56, 57, 63, 64, 65, 119, 120, 127, 128, 1000)


@dataclass
class SelfTestResult:
    """Outcome of one self-test case."""
    name: str
    expected: str
    actual: str

    @property
    def passed(self) -> bool:
        return self.expected == self.actual


def reference_sha256(data: bytes) -> bytes:
    """SHA-256 from the `cryptography` package, used as the reference."""
    digest = hashes.Hash(hashes.SHA256())
    digest.update(data)
    return digest.finalize()


def run_self_test(seed_data: Optional[List[bytes]] = None) -> List[SelfTestResult]:
    """
    Run all self-test cases.

    Args:
        seed_data: Messages to cross-check; random messages of
            BOUNDARY_LENGTHS are generated when omitted

    Returns:
        One SelfTestResult per case
    """
    results = []

    for message, expected in NIST_VECTORS:
        label = message[:20].decode('ascii') or "<empty>"
        results.append(SelfTestResult(
            name=f"nist:{label}",
            expected=expected,
            actual=sha256(message).hex(),
        ))

    if seed_data is None:
        seed_data = [secrets.token_bytes(n) for n in BOUNDARY_LENGTHS]

    for message in seed_data:
        expected = reference_sha256(message).hex()
        results.append(SelfTestResult(
            name=f"oneshot:{len(message)}",
            expected=expected,
            actual=sha256(message).hex(),
        ))

        # Same message fed in 7-byte pieces
        hasher = new()
        for i in range(0, len(message), 7):
            hasher.update(message[i:i + 7])
        results.append(SelfTestResult(
            name=f"incremental:{len(message)}",
            expected=expected,
            actual=hasher.hexfinalize(),
        ))

    return results
