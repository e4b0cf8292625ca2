"""
Exceptions raised by the SHA-256 implementation.
"""


class SHA256Error(Exception):
    """Base class for all SHA-256 errors."""
    pass


class LengthOverflowError(SHA256Error, ValueError):
    """Raised when a message bit-length does not fit in the 64-bit length field."""
    pass


class UseAfterFinalizeError(SHA256Error, RuntimeError):
    """Raised when a finalized hasher is updated, finalized or copied again."""
    pass


class MalformedBlockError(SHA256Error, ValueError):
    """Raised when padded data cannot be split into whole 64-byte blocks."""
    pass
