# Core Cryptography Module
"""
SHA-256 (FIPS 180-4) implemented from scratch:
- Constants and round functions - constants.py, round_functions.py
- Padding and block segmentation - padding.py
- Message schedule - schedule.py
- 64-round compression - compressor.py
- One-shot and incremental hashing - sha256.py
"""

from .constants import (
    H_INITIAL,
    K,
    BLOCK_SIZE,
    DIGEST_SIZE,
    MAX_MESSAGE_BITS,
    HashParams,
    SHA256_PARAMS,
)

from .errors import (
    SHA256Error,
    LengthOverflowError,
    UseAfterFinalizeError,
    MalformedBlockError,
)

from .padding import (
    Block,
    pad_message,
    padding_for_length,
    encode_bit_length,
    split_into_blocks,
    bytes_to_words,
)

from .schedule import create_message_schedule
from .compressor import compress, compress_rounds

from .sha256 import (
    SHA256Hasher,
    HasherState,
    new,
    sha256,
    sha256_hex,
    sha256_string,
    iter_block_states,
    serialize_state,
)

__all__ = [
    # Constants
    'H_INITIAL',
    'K',
    'BLOCK_SIZE',
    'DIGEST_SIZE',
    'MAX_MESSAGE_BITS',
    'HashParams',
    'SHA256_PARAMS',
    # Errors
    'SHA256Error',
    'LengthOverflowError',
    'UseAfterFinalizeError',
    'MalformedBlockError',
    # Padding
    'Block',
    'pad_message',
    'padding_for_length',
    'encode_bit_length',
    'split_into_blocks',
    'bytes_to_words',
    # Schedule and compression
    'create_message_schedule',
    'compress',
    'compress_rounds',
    # Hashing
    'SHA256Hasher',
    'HasherState',
    'new',
    'sha256',
    'sha256_hex',
    'sha256_string',
    'iter_block_states',
    'serialize_state',
]
