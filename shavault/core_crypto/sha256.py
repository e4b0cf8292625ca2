"""
SHA-256 Hash Implementation (From Scratch)

Implements the SHA-256 cryptographic hash function as defined in FIPS 180-4.
This implementation avoids using hashlib and builds the algorithm from scratch.

Components:
- Padding: Pads message to multiple of 512 bits (padding.py)
- Message Schedule: Expands 16 words to 64 words (schedule.py)
- Compression: 64 rounds of compression function (compressor.py)
- Output: 256-bit (32-byte) digest

Two interfaces are provided:
- One-shot: sha256(data) / sha256_hex(data)
- Incremental: new() -> SHA256Hasher, then update(...) and finalize()
"""

import logging
from enum import Enum
from typing import Iterator, List, Sequence, Tuple

from .compressor import compress
from .constants import (
    MAX_MESSAGE_BITS, SHA256_PARAMS,
)
from .errors import LengthOverflowError, UseAfterFinalizeError
from .padding import Block, pad_message, padding_for_length, split_into_blocks
from .schedule import create_message_schedule


logger = logging.getLogger(__name__)


class HasherState(Enum):
    """Lifecycle of an incremental hasher."""
    INITIALIZED = "initialized"
    PROCESSING = "processing"
    FINALIZED = "finalized"


def _as_bytes(data) -> bytes:
    """Copy a bytes-like object into bytes, rejecting str and other types."""
    try:
        return bytes(memoryview(data))
    except TypeError:
        raise TypeError(
            f"SHA-256 input must be bytes-like, not {type(data).__name__}"
        ) from None


def serialize_state(state: Sequence[int]) -> bytes:
    """Concatenate the state words big-endian into the digest."""
    word_size = SHA256_PARAMS.word_bits // 8
    return b''.join(word.to_bytes(word_size, byteorder='big') for word in state)


def _process_block(state: Sequence[int], block: Block) -> List[int]:
    """Run one block through the scheduler and compressor."""
    w = create_message_schedule(block.words)
    return compress(state, w, SHA256_PARAMS.round_constants)


class SHA256Hasher:
    """
    Incremental SHA-256 hasher.

    Data may be fed in any number of update() calls; partial blocks are
    buffered until 64 bytes are available. finalize() applies padding,
    compresses the last block(s) and returns the digest. A finalized
    hasher cannot be reused.

    Example:
        >>> hasher = SHA256Hasher()
        >>> hasher.update(b"a")
        >>> hasher.update(b"bc")
        >>> hasher.finalize().hex()[:16]
        'ba7816bf8f01cfea'
    """

    name = SHA256_PARAMS.name
    digest_size = SHA256_PARAMS.digest_size
    block_size = SHA256_PARAMS.block_size

    def __init__(self, data: bytes = b""):
        """
        Initialize the hasher with the standard initial hash values.

        Args:
            data: Optional first chunk of the message
        """
        self._h: List[int] = list(SHA256_PARAMS.initial_state)
        self._buffer = bytearray()
        self._length = 0
        self._blocks = 0
        self._state = HasherState.INITIALIZED

        self.update(data)

    @property
    def state(self) -> HasherState:
        """Current lifecycle state."""
        return self._state

    @property
    def message_length(self) -> int:
        """Number of message bytes consumed so far."""
        return self._length

    @property
    def blocks_processed(self) -> int:
        """Number of 64-byte blocks compressed so far."""
        return self._blocks

    def _ensure_not_finalized(self, operation: str) -> None:
        if self._state is HasherState.FINALIZED:
            raise UseAfterFinalizeError(
                f"Cannot {operation}: hasher has already been finalized"
            )

    def _consume(self, block: Block) -> None:
        self._h = _process_block(self._h, block)
        self._blocks += 1
        self._state = HasherState.PROCESSING

    def update(self, data: bytes) -> None:
        """
        Feed more message bytes into the hasher.

        Args:
            data: Bytes-like chunk of the message

        Raises:
            UseAfterFinalizeError: If the hasher was already finalized
            LengthOverflowError: If the total length would exceed 2**64 - 1 bits
            TypeError: If data is not bytes-like
        """
        self._ensure_not_finalized("update")
        data = _as_bytes(data)

        new_length = self._length + len(data)
        if new_length * 8 > MAX_MESSAGE_BITS:
            raise LengthOverflowError(
                f"Message of {new_length} bytes exceeds the 64-bit length field"
            )
        self._length = new_length
        self._buffer.extend(data)

        # Compress every complete block, keep the remainder buffered
        full = len(self._buffer) - len(self._buffer) % self.block_size
        for i in range(0, full, self.block_size):
            self._consume(Block(bytes(self._buffer[i:i + self.block_size])))
        del self._buffer[:full]

    def finalize(self) -> bytes:
        """
        Apply padding, process the final block(s) and return the digest.

        Returns:
            256-bit (32-byte) digest as bytes

        Raises:
            UseAfterFinalizeError: If the hasher was already finalized
        """
        self._ensure_not_finalized("finalize")

        tail = bytes(self._buffer) + padding_for_length(self._length)
        for block in split_into_blocks(tail):
            self._consume(block)

        self._buffer.clear()
        self._state = HasherState.FINALIZED
        logger.debug("SHA-256 finalized: %d bytes in %d blocks",
                     self._length, self._blocks)
        return serialize_state(self._h)

    def hexfinalize(self) -> str:
        """Finalize and return the digest as 64 lowercase hex characters."""
        return self.finalize().hex()

    def copy(self) -> 'SHA256Hasher':
        """
        Return an independent copy of this hasher.

        Useful to hash several messages sharing a common prefix.

        Raises:
            UseAfterFinalizeError: If the hasher was already finalized
        """
        self._ensure_not_finalized("copy")
        clone = self.__class__()
        clone._h = list(self._h)
        clone._buffer = bytearray(self._buffer)
        clone._length = self._length
        clone._blocks = self._blocks
        clone._state = self._state
        return clone

    def __repr__(self) -> str:
        return (f"<SHA256Hasher state={self._state.value} "
                f"length={self._length} blocks={self._blocks}>")


def new(data: bytes = b"") -> SHA256Hasher:
    """Create a new incremental hasher, optionally seeded with data."""
    return SHA256Hasher(data)


def iter_block_states(data: bytes) -> Iterator[Tuple[int, Block, Tuple[int, ...]]]:
    """
    Hash data one block at a time, yielding the state after each block.

    Yields:
        (block index, block, hash state words after that block)
    """
    padded = pad_message(_as_bytes(data))
    state = list(SHA256_PARAMS.initial_state)

    for index, block in enumerate(split_into_blocks(padded)):
        state = _process_block(state, block)
        yield index, block, tuple(state)


def sha256(data: bytes) -> bytes:
    """
    Compute the SHA-256 hash of the input data.

    Args:
        data: Input bytes to hash

    Returns:
        256-bit (32-byte) digest as bytes

    Example:
        >>> sha256(b"hello").hex()
        '2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824'
    """
    # Padding always yields at least one block
    state: Sequence[int] = SHA256_PARAMS.initial_state
    for _index, _block, state in iter_block_states(data):
        pass
    return serialize_state(state)


def sha256_hex(data: bytes) -> str:
    """
    Compute SHA-256 hash and return as hexadecimal string.

    Args:
        data: Input bytes to hash

    Returns:
        64-character hexadecimal string
    """
    return sha256(data).hex()


def sha256_string(text: str, encoding: str = 'utf-8') -> bytes:
    """
    Compute SHA-256 hash of a string.

    Args:
        text: Input string to hash
        encoding: String encoding (default: utf-8)

    Returns:
        256-bit (32-byte) digest as bytes
    """
    return sha256(text.encode(encoding))
