"""
SHA-256 Compression Function

Runs the 64-round main loop over the eight working variables a..h and
adds the result into the running hash state.
"""

from typing import List, Sequence, Tuple

from .constants import K, MASK_32, ROUNDS, SCHEDULE_LENGTH
from .round_functions import big_sigma0, big_sigma1, ch, maj


STATE_WORDS = 8


def compress_rounds(state: Sequence[int], w: Sequence[int],
                    round_constants: Sequence[int] = K) -> Tuple[int, ...]:
    """
    Perform 64 rounds of compression starting from the given state.

    Args:
        state: Current hash state (8 32-bit words), used as a..h
        w: Message schedule (64 32-bit words)
        round_constants: Round constant table K

    Returns:
        Working variables (a, b, c, d, e, f, g, h) after the last round

    Raises:
        ValueError: If state or schedule has the wrong length
    """
    if len(state) != STATE_WORDS:
        raise ValueError(f"Hash state must have {STATE_WORDS} words, got {len(state)}")
    if len(w) != SCHEDULE_LENGTH:
        raise ValueError(f"Message schedule must have {SCHEDULE_LENGTH} words, got {len(w)}")

    a, b, c, d, e, f, g, h = state

    for i in range(ROUNDS):
        t1 = (h + big_sigma1(e) + ch(e, f, g) + round_constants[i] + w[i]) & MASK_32
        t2 = (big_sigma0(a) + maj(a, b, c)) & MASK_32

        h = g
        g = f
        f = e
        e = (d + t1) & MASK_32
        d = c
        c = b
        b = a
        a = (t1 + t2) & MASK_32

    return a, b, c, d, e, f, g, h


def compress(state: Sequence[int], w: Sequence[int],
             round_constants: Sequence[int] = K) -> List[int]:
    """
    Compress one block into the hash state.

    Args:
        state: Current hash state (8 32-bit words)
        w: Message schedule for the block (64 32-bit words)
        round_constants: Round constant table K

    Returns:
        New hash state with the block's contribution added
    """
    working = compress_rounds(state, w, round_constants)
    return [(s + v) & MASK_32 for s, v in zip(state, working)]
