"""
Tests for the SHA-256 hasher.

Tests:
- NIST test vectors
- Agreement with hashlib and the cryptography package
- Incremental hashing and lifecycle
- Error states (use after finalize, length overflow, bad input types)
"""

import hashlib
import logging
from concurrent.futures import ThreadPoolExecutor

import pytest
from cryptography.hazmat.primitives import hashes

from shavault.core_crypto.constants import H_INITIAL, MAX_MESSAGE_BITS, SHA256_PARAMS
from shavault.core_crypto.errors import LengthOverflowError, UseAfterFinalizeError
from shavault.core_crypto.sha256 import (
    SHA256Hasher, HasherState, new, sha256, sha256_hex, sha256_string,
    iter_block_states, serialize_state,
)


def _reference(data: bytes) -> bytes:
    digest = hashes.Hash(hashes.SHA256())
    digest.update(data)
    return digest.finalize()


class TestKnownVectors:
    """NIST and widely published test vectors."""

    def test_empty_string(self):
        """Test SHA-256 of empty string."""
        expected = "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
        assert sha256_hex(b"") == expected

    def test_abc(self):
        """Test SHA-256 of 'abc'."""
        expected = "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
        assert sha256_hex(b"abc") == expected

    def test_two_block_message(self):
        """448-bit message that needs a second block for padding."""
        msg = b"abcdbcdecdefdefgefghfghighijhijkijkljklmklmnlmnomnopnopq"
        expected = "248d6a61d20638b8e5c026930c3e6039a33ce45964ff2167f6ecedd419db06c1"
        assert sha256_hex(msg) == expected

    def test_896_bit_message(self):
        msg = (b"abcdefghbcdefghicdefghijdefghijkefghijklfghijklmghijklmn"
               b"hijklmnoijklmnopjklmnopqklmnopqrlmnopqrsmnopqrstnopqrstu")
        expected = "cf5b16a778af8380036ce59e7b0492370b249b11e8f07a51afac45037afee9d1"
        assert sha256_hex(msg) == expected

    def test_quick_brown_fox(self):
        expected = "d7a8fbb307d7809469ca9abcb0082e4f8d5651e46d3cdb762d02d0bf37c9e592"
        assert sha256_hex(b"The quick brown fox jumps over the lazy dog") == expected

    def test_million_a(self):
        """One million repetitions of 'a', fed incrementally."""
        hasher = new()
        chunk = b"a" * 1000
        for _ in range(1000):
            hasher.update(chunk)
        expected = "cdc76e5c9914fb9281a1c7e284d73e67f1809a48a497200e046d39ccc7112cd0"
        assert hasher.hexfinalize() == expected


class TestOneShot:
    """Properties of sha256()."""

    def test_deterministic(self):
        """SHA-256 should be deterministic."""
        msg = b"test message"
        assert sha256(msg) == sha256(msg)

    def test_returns_32_bytes(self):
        """SHA-256 should return 32 bytes."""
        assert len(sha256(b"test")) == 32

    def test_hex_is_lowercase(self):
        digest = sha256_hex(b"test")
        assert len(digest) == 64
        assert digest == digest.lower()

    def test_single_bit_flip_changes_digest(self):
        """Messages differing in one bit hash differently."""
        msg = bytearray(b"avalanche test message")
        flipped = bytearray(msg)
        flipped[5] ^= 0x01
        assert sha256(bytes(msg)) != sha256(bytes(flipped))

    @pytest.mark.parametrize("length", list(range(0, 130)) + [255, 256, 1000, 4097])
    def test_matches_references(self, length):
        """Agrees with hashlib and cryptography across padding boundaries."""
        msg = bytes((i * 31 + 7) & 0xFF for i in range(length))
        assert sha256(msg) == hashlib.sha256(msg).digest()
        assert sha256(msg) == _reference(msg)

    def test_string_helper(self):
        assert sha256_string("abc") == sha256(b"abc")
        assert sha256_string("héllo") == sha256("héllo".encode("utf-8"))

    def test_accepts_buffer_types(self):
        assert sha256(bytearray(b"abc")) == sha256(b"abc")
        assert sha256(memoryview(b"abc")) == sha256(b"abc")

    def test_rejects_str(self):
        with pytest.raises(TypeError):
            sha256("abc")


class TestBlockStates:
    """Tests for per-block tracing."""

    def test_one_state_per_block(self):
        states = list(iter_block_states(b"x" * 56))
        assert [index for index, _, _ in states] == [0, 1]

    def test_last_state_is_digest(self):
        *_, (_, _, state) = iter_block_states(b"abc")
        assert b"".join(w.to_bytes(4, 'big') for w in state) == sha256(b"abc")


class TestIncremental:
    """Tests for the update()/finalize() interface."""

    MESSAGE = bytes(range(256)) + b"incremental" * 20

    @pytest.mark.parametrize("chunk_size", [1, 3, 7, 55, 56, 63, 64, 65, 128, 1000])
    def test_chunked_equals_one_shot(self, chunk_size):
        hasher = new()
        for i in range(0, len(self.MESSAGE), chunk_size):
            hasher.update(self.MESSAGE[i:i + chunk_size])
        assert hasher.finalize() == sha256(self.MESSAGE)

    def test_uneven_splits(self):
        hasher = new()
        cuts = [0, 1, 2, 66, 67, 200, 201, len(self.MESSAGE)]
        for start, end in zip(cuts, cuts[1:]):
            hasher.update(self.MESSAGE[start:end])
        assert hasher.finalize() == sha256(self.MESSAGE)

    def test_no_updates(self):
        assert new().finalize() == sha256(b"")

    def test_empty_updates(self):
        hasher = new()
        hasher.update(b"")
        hasher.update(b"abc")
        hasher.update(b"")
        assert hasher.finalize() == sha256(b"abc")

    def test_constructor_data(self):
        assert SHA256Hasher(b"abc").finalize() == sha256(b"abc")

    def test_copy_shares_prefix(self):
        base = new(b"common prefix ")
        left = base.copy()
        right = base.copy()
        left.update(b"left")
        right.update(b"right")
        assert left.finalize() == sha256(b"common prefix left")
        assert right.finalize() == sha256(b"common prefix right")
        assert base.finalize() == sha256(b"common prefix ")

    def test_input_buffer_not_retained(self):
        """Mutating the caller's buffer after update() has no effect."""
        data = bytearray(b"abc")
        hasher = new()
        hasher.update(data)
        data[0] = ord("z")
        assert hasher.finalize() == sha256(b"abc")

    def test_attributes(self):
        hasher = new()
        assert hasher.name == "sha256"
        assert hasher.digest_size == 32
        assert hasher.block_size == 64

    def test_attributes_follow_params(self):
        """Sizes come from the SHA-256 parameter set."""
        assert SHA256Hasher.digest_size == SHA256_PARAMS.digest_size
        assert SHA256Hasher.block_size == SHA256_PARAMS.block_size
        assert len(serialize_state(H_INITIAL)) == SHA256_PARAMS.digest_size
        assert serialize_state(H_INITIAL)[:4] == b"\x6a\x09\xe6\x67"

    def test_independent_hashers_in_threads(self):
        messages = [bytes([i]) * (i * 17) for i in range(16)]

        def work(message):
            hasher = new()
            for i in range(0, len(message), 10):
                hasher.update(message[i:i + 10])
            return hasher.finalize()

        with ThreadPoolExecutor(max_workers=4) as pool:
            results = list(pool.map(work, messages))
        assert results == [sha256(m) for m in messages]


class TestLifecycle:
    """Tests for hasher state transitions."""

    def test_initialized(self):
        hasher = new()
        assert hasher.state is HasherState.INITIALIZED
        assert hasher.blocks_processed == 0

    def test_partial_block_stays_initialized(self):
        """Buffered bytes do not consume a block."""
        hasher = new()
        hasher.update(b"a" * 63)
        assert hasher.state is HasherState.INITIALIZED
        assert hasher.message_length == 63

    def test_processing_after_first_block(self):
        hasher = new()
        hasher.update(b"a" * 64)
        assert hasher.state is HasherState.PROCESSING
        assert hasher.blocks_processed == 1

    def test_finalized(self):
        hasher = new(b"x" * 56)
        hasher.finalize()
        assert hasher.state is HasherState.FINALIZED
        assert hasher.blocks_processed == 2

    def test_repr(self):
        assert "initialized" in repr(new())


class TestErrors:
    """Tests for error conditions."""

    def test_update_after_finalize(self):
        hasher = new(b"abc")
        hasher.finalize()
        with pytest.raises(UseAfterFinalizeError):
            hasher.update(b"more")

    def test_finalize_twice(self):
        hasher = new()
        hasher.finalize()
        with pytest.raises(UseAfterFinalizeError):
            hasher.finalize()

    def test_copy_after_finalize(self):
        hasher = new()
        hasher.finalize()
        with pytest.raises(UseAfterFinalizeError):
            hasher.copy()

    def test_use_after_finalize_is_runtime_error(self):
        hasher = new()
        hasher.finalize()
        with pytest.raises(RuntimeError):
            hasher.update(b"")

    def test_length_overflow(self):
        """Exceeding 2**64 - 1 bits is rejected before any state changes."""
        hasher = new()
        hasher._length = MAX_MESSAGE_BITS // 8
        with pytest.raises(LengthOverflowError):
            hasher.update(b"a")
        assert hasher.message_length == MAX_MESSAGE_BITS // 8
        assert hasher.state is HasherState.INITIALIZED

    def test_update_rejects_str(self):
        with pytest.raises(TypeError):
            new().update("abc")

    def test_update_rejects_int(self):
        with pytest.raises(TypeError):
            new().update(42)

    def test_constructor_rejects_empty_str(self):
        """Falsy non-bytes input is still type checked."""
        with pytest.raises(TypeError):
            new("")

    def test_constructor_rejects_zero(self):
        with pytest.raises(TypeError):
            SHA256Hasher(0)


class TestLogging:
    """Debug logging on finalize."""

    def test_finalize_logs(self, caplog):
        caplog.set_level(logging.DEBUG, logger="shavault.core_crypto.sha256")
        new(b"abc").finalize()
        assert "finalized: 3 bytes in 1 blocks" in caplog.text
