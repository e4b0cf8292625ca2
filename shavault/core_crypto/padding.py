"""
SHA-256 Padding and Block Segmentation

Padding rules (FIPS 180-4 section 5.1.1):
1. Append bit '1' to message (0x80 byte)
2. Append zeros until message length ≡ 448 (mod 512)
3. Append original message length as 64-bit big-endian integer

The padded message is then split into 512-bit blocks, each read as
16 big-endian 32-bit words.
"""

from dataclasses import dataclass
from typing import List

from .constants import (
    BLOCK_SIZE, LENGTH_FIELD_SIZE, MAX_MESSAGE_BITS, WORD_SIZE,
)
from .errors import LengthOverflowError, MalformedBlockError


# Byte offset (mod 64) at which the length field starts
LENGTH_OFFSET = BLOCK_SIZE - LENGTH_FIELD_SIZE   # 56


def encode_bit_length(bit_length: int) -> bytes:
    """
    Encode a message bit-length as the 64-bit big-endian length field.

    Raises:
        LengthOverflowError: If the length is negative or needs more than 64 bits
    """
    if bit_length < 0 or bit_length > MAX_MESSAGE_BITS:
        raise LengthOverflowError(
            f"Message bit-length {bit_length} does not fit in {LENGTH_FIELD_SIZE * 8} bits"
        )
    return bit_length.to_bytes(LENGTH_FIELD_SIZE, byteorder='big')


def padding_for_length(byte_length: int) -> bytes:
    """
    Build the padding tail for a message of the given byte length.

    The tail is 0x80, the zero fill and the length field. Appending it to
    the message yields a multiple of 64 bytes.
    """
    length_field = encode_bit_length(byte_length * 8)

    # We need: (byte_length + 1 + zeros) % 64 == 56
    zero_count = (LENGTH_OFFSET - 1 - byte_length) % BLOCK_SIZE
    return b'\x80' + b'\x00' * zero_count + length_field


def pad_message(message: bytes) -> bytes:
    """
    Pad the message according to SHA-256 specification.

    A message whose length is 56 or more (mod 64) spills the length field
    into an extra block. The empty message pads to exactly one block.

    Args:
        message: The original message bytes

    Returns:
        Padded message as bytes (length is multiple of 64 bytes / 512 bits)

    Raises:
        LengthOverflowError: If the message is longer than 2**64 - 1 bits
    """
    message = bytes(message)
    return message + padding_for_length(len(message))


def bytes_to_words(chunk: bytes) -> List[int]:
    """Convert bytes into 32-bit words (big-endian)."""
    if len(chunk) % WORD_SIZE:
        raise ValueError(f"Chunk length {len(chunk)} is not a multiple of {WORD_SIZE}")
    words = []
    for i in range(0, len(chunk), WORD_SIZE):
        word = int.from_bytes(chunk[i:i + WORD_SIZE], byteorder='big')
        words.append(word)
    return words


@dataclass(frozen=True)
class Block:
    """One 512-bit block of a padded message."""
    data: bytes

    def __post_init__(self):
        if len(self.data) != BLOCK_SIZE:
            raise MalformedBlockError(
                f"Block must be {BLOCK_SIZE} bytes, got {len(self.data)}"
            )

    @property
    def words(self) -> List[int]:
        """The 16 big-endian 32-bit words of the block."""
        return bytes_to_words(self.data)


def split_into_blocks(padded: bytes) -> List[Block]:
    """
    Split a padded message into 512-bit (64-byte) blocks, in message order.

    Raises:
        MalformedBlockError: If the length is not a multiple of 64
    """
    if len(padded) % BLOCK_SIZE:
        raise MalformedBlockError(
            f"Padded length {len(padded)} is not a multiple of {BLOCK_SIZE}"
        )
    return [
        Block(bytes(padded[i:i + BLOCK_SIZE]))
        for i in range(0, len(padded), BLOCK_SIZE)
    ]
