"""
SHAVault - SHA-256 implemented from scratch (FIPS 180-4).
"""

from .core_crypto import (
    SHA256Hasher,
    SHA256Error,
    LengthOverflowError,
    UseAfterFinalizeError,
    new,
    sha256,
    sha256_hex,
)

__version__ = "1.0.0"

__all__ = [
    'SHA256Hasher',
    'SHA256Error',
    'LengthOverflowError',
    'UseAfterFinalizeError',
    'new',
    'sha256',
    'sha256_hex',
]
