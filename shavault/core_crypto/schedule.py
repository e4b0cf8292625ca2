"""
SHA-256 Message Schedule

Expands the 16 words of one block into the 64 words consumed by the
compression rounds.
"""

from typing import List, Sequence

from .constants import BLOCK_WORDS, MASK_32, SCHEDULE_LENGTH
from .round_functions import small_sigma0, small_sigma1


def create_message_schedule(words: Sequence[int]) -> List[int]:
    """
    Expand 16 words into 64 words for the message schedule.

    For i from 16 to 63:
        W[i] = σ1(W[i-2]) + W[i-7] + σ0(W[i-15]) + W[i-16]

    Args:
        words: The 16 big-endian words of one block

    Returns:
        64-word message schedule

    Raises:
        ValueError: If the block does not have exactly 16 words
    """
    if len(words) != BLOCK_WORDS:
        raise ValueError(f"Message schedule needs {BLOCK_WORDS} words, got {len(words)}")

    w = [word & MASK_32 for word in words]
    for i in range(BLOCK_WORDS, SCHEDULE_LENGTH):
        s0 = small_sigma0(w[i - 15])
        s1 = small_sigma1(w[i - 2])
        w.append((s1 + w[i - 7] + s0 + w[i - 16]) & MASK_32)
    return w
