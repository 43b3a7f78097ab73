"""
Unit tests for the SHA-256 core.

Tests:
- Known-answer vectors
- Chunker / padding (including the trailer split)
- Message schedule
- Compression
- Rotate helper
"""

import hashlib

import pytest
from src.core_crypto.sha256 import (
    sha256, sha256_hex, sha256_string, iter_chunks, init_buffer_state,
    calc_chunk, create_message_schedule, compress, _right_rotate,
    BufferState, H_INITIAL, K, CHUNK_SIZE, DIGEST_SIZE,
)


ABC_DIGEST_WORDS = [
    0xba7816bf, 0x8f01cfea, 0x414140de, 0x5dae2223,
    0xb00361a3, 0x96177a9c, 0xb410ff61, 0xf20015ad,
]


class TestSHA256:
    """Unit tests for SHA-256 implementation."""

    def test_empty_string(self):
        """Test SHA-256 of empty string."""
        expected = "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
        assert sha256_hex(b"") == expected

    def test_abc(self):
        """Test SHA-256 of 'abc'."""
        expected = "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
        assert sha256_hex(b"abc") == expected

    def test_long_message(self):
        """Test SHA-256 of the 448-bit NIST message (56 bytes, forces a trailer block)."""
        msg = b"abcdbcdecdefdefgefghfghighijhijkijkljklmklmnlmnomnopnopq"
        assert len(msg) == 56
        expected = "248d6a61d20638b8e5c026930c3e6039a33ce45964ff2167f6ecedd419db06c1"
        assert sha256_hex(msg) == expected

    def test_896_bit_message(self):
        """Test SHA-256 of the 896-bit NIST message."""
        msg = (b"abcdefghbcdefghicdefghijdefghijkefghijklfghijklmghijklmn"
               b"hijklmnoijklmnopjklmnopqklmnopqrlmnopqrsmnopqrstnopqrstu")
        expected = "cf5b16a778af8380036ce59e7b0492370b249b11e8f07a51afac45037afee9d1"
        assert sha256_hex(msg) == expected

    def test_million_a(self):
        """Test SHA-256 of one million 'a' characters."""
        expected = "cdc76e5c9914fb9281a1c7e284d73e67f1809a48a497200e046d39ccc7112cd0"
        assert sha256_hex(b"a" * 1_000_000) == expected

    def test_string_helper(self):
        """sha256_string should hash the encoded text."""
        assert sha256_string("abc") == sha256(b"abc")
        assert sha256_string("héllo", encoding="latin-1") == sha256("héllo".encode("latin-1"))

    def test_accepts_bytearray_and_memoryview(self):
        """Any bytes-like input should hash identically."""
        data = b"The quick brown fox jumps over the lazy dog"
        assert sha256(bytearray(data)) == sha256(data)
        assert sha256(memoryview(data)) == sha256(data)

    def test_accepts_strided_and_shaped_memoryview(self):
        """Non-contiguous and multi-dimensional views hash their logical bytes."""
        data = b"abcdefgh" * 10
        strided = memoryview(data)[::2]
        assert not strided.c_contiguous
        assert sha256(strided) == hashlib.sha256(bytes(strided)).digest()

        square = memoryview(bytes(range(64))).cast("B", (8, 8))
        assert sha256(square) == hashlib.sha256(bytes(range(64))).digest()

    def test_rejects_str(self):
        """Text must be encoded first."""
        with pytest.raises(TypeError):
            sha256("abc")

    def test_deterministic(self):
        """SHA-256 should be deterministic."""
        msg = b"test message"
        assert sha256(msg) == sha256(msg)

    def test_returns_32_bytes(self):
        """SHA-256 should return 32 bytes."""
        for length in (0, 1, 55, 56, 64, 1000):
            assert len(sha256(b"x" * length)) == DIGEST_SIZE

    @pytest.mark.parametrize("length", [55, 56, 57, 63, 64, 65])
    def test_padding_boundaries(self, length):
        """Lengths around the padding boundary must match hashlib."""
        msg = bytes(range(length))
        assert sha256(msg) == hashlib.sha256(msg).digest()

    def test_all_lengths_up_to_three_blocks(self):
        """Every length from 0 to 192 bytes must match hashlib."""
        for length in range(193):
            msg = bytes((i * 7 + length) % 256 for i in range(length))
            assert sha256(msg) == hashlib.sha256(msg).digest(), f"length {length}"


class TestChunker:
    """Unit tests for padding and chunking."""

    def test_empty_input_single_chunk(self):
        """Empty input yields exactly one chunk: marker, zeros, zero length."""
        chunks = list(iter_chunks(b""))
        assert len(chunks) == 1
        assert chunks[0] == b"\x80" + b"\x00" * 63

    def test_abc_chunk_layout(self):
        """Data, marker, zero fill and 24-bit length trailer."""
        (chunk,) = list(iter_chunks(b"abc"))
        assert chunk[:4] == b"abc\x80"
        assert chunk[4:56] == bytes(52)
        assert chunk[56:] == (24).to_bytes(8, "big")

    def test_55_bytes_fits_one_chunk(self):
        """55 bytes + marker + 8-byte trailer fills one chunk exactly."""
        chunks = list(iter_chunks(b"a" * 55))
        assert len(chunks) == 1
        assert chunks[0][55] == 0x80
        assert chunks[0][56:] == (55 * 8).to_bytes(8, "big")

    def test_56_bytes_splits_trailer(self):
        """56 bytes leaves no room for the trailer: an extra chunk is needed."""
        chunks = list(iter_chunks(b"a" * 56))
        assert len(chunks) == 2
        assert chunks[0][:56] == b"a" * 56
        assert chunks[0][56] == 0x80
        assert chunks[0][57:] == bytes(7)
        # Second chunk is pure padding plus trailer, without a second marker
        assert chunks[1][:56] == bytes(56)
        assert chunks[1][56:] == (56 * 8).to_bytes(8, "big")

    def test_63_bytes_marker_is_last_byte(self):
        """63 bytes puts the marker in the final byte of the first chunk."""
        chunks = list(iter_chunks(b"z" * 63))
        assert len(chunks) == 2
        assert chunks[0][63] == 0x80
        assert chunks[1][:56] == bytes(56)

    def test_64_bytes_marker_starts_second_chunk(self):
        """A full chunk is copied verbatim; padding starts a new chunk."""
        data = bytes(range(64))
        chunks = list(iter_chunks(data))
        assert len(chunks) == 2
        assert chunks[0] == data
        assert chunks[1][0] == 0x80
        assert chunks[1][56:] == (512).to_bytes(8, "big")

    @pytest.mark.parametrize("length", [0, 1, 55, 56, 57, 63, 64, 65, 119, 120, 128, 1000])
    def test_chunk_count(self, length):
        """Padded length is the smallest multiple of 64 holding data + 9 bytes."""
        chunks = list(iter_chunks(b"\xff" * length))
        assert len(chunks) == (length + 9 + 63) // 64
        assert all(len(c) == CHUNK_SIZE for c in chunks)

    def test_terminal_state(self):
        """Once the trailer is emitted, calc_chunk keeps returning None."""
        state = init_buffer_state(b"abc")
        assert calc_chunk(state) is not None
        assert state.total_length_delivered
        assert calc_chunk(state) is None
        assert calc_chunk(state) is None

    def test_cursor_advances(self):
        """Full chunks advance the cursor without touching padding flags."""
        state = init_buffer_state(b"q" * 130)
        calc_chunk(state)
        assert state.offset == 64
        assert state.remaining == 66
        assert not state.single_one_delivered
        calc_chunk(state)
        calc_chunk(state)
        assert state.remaining == 0
        assert state.single_one_delivered
        assert state.total_length_delivered

    def test_wide_bit_length(self):
        """Bit lengths beyond 32 bits are encoded without truncation."""
        total = 2 ** 32 + 5
        state = BufferState(data=b"", offset=0, remaining=0, total_length=total)
        chunk = calc_chunk(state)
        assert chunk[0] == 0x80
        assert chunk[56:] == (total * 8).to_bytes(8, "big")

    def test_bit_length_wraps_at_64_bits(self):
        """Only the low 64 bits of the bit length are kept."""
        state = BufferState(data=b"", offset=0, remaining=0, total_length=2 ** 61 + 1)
        chunk = calc_chunk(state)
        assert chunk[56:] == (8).to_bytes(8, "big")

    def test_chunks_are_fresh_buffers(self):
        """Each chunk is a separate buffer, not a reused one."""
        chunks = list(iter_chunks(bytes(range(128))))
        assert chunks[0] is not chunks[1]
        assert chunks[0] == bytes(range(64))


class TestMessageSchedule:
    """Unit tests for message schedule expansion."""

    def test_first_words_big_endian(self):
        """First 16 words are the chunk's big-endian words."""
        chunk = next(iter_chunks(b"abc"))
        w = create_message_schedule(chunk)
        assert len(w) == 64
        assert w[0] == 0x61626380
        assert w[1:15] == [0] * 14
        assert w[15] == 0x00000018

    def test_derived_words(self):
        """First derived words for 'abc' (FIPS 180-4 worked example)."""
        w = create_message_schedule(next(iter_chunks(b"abc")))
        assert w[16] == 0x61626380
        assert w[17] == 0x000f0000

    def test_words_are_32_bit(self):
        """All words stay within 32 bits."""
        w = create_message_schedule(b"\xff" * 64)
        assert all(0 <= word <= 0xFFFFFFFF for word in w)

    def test_wrong_chunk_size(self):
        """Chunks must be exactly 64 bytes."""
        with pytest.raises(ValueError):
            create_message_schedule(b"\x00" * 63)


class TestCompress:
    """Unit tests for the compression function."""

    def test_abc_single_block(self):
        """One compression of the 'abc' chunk yields the final digest words."""
        w = create_message_schedule(next(iter_chunks(b"abc")))
        assert compress(H_INITIAL, w) == ABC_DIGEST_WORDS

    def test_state_not_mutated(self):
        """The caller's state list is left untouched."""
        state = list(H_INITIAL)
        compress(state, create_message_schedule(bytes(64)))
        assert state == list(H_INITIAL)

    def test_wrong_lengths(self):
        """State and schedule sizes are fixed."""
        w = create_message_schedule(bytes(64))
        with pytest.raises(ValueError):
            compress(list(H_INITIAL)[:7], w)
        with pytest.raises(ValueError):
            compress(H_INITIAL, w[:63])

    def test_constant_tables(self):
        """Constant tables have the standard sizes and end values."""
        assert len(H_INITIAL) == 8
        assert len(K) == 64
        assert K[0] == 0x428a2f98
        assert K[63] == 0xc67178f2


class TestRightRotate:
    """Unit tests for the rotate helper."""

    def test_rotate(self):
        assert _right_rotate(0x00000001, 1) == 0x80000000
        assert _right_rotate(0x12345678, 8) == 0x78123456
        assert _right_rotate(0x80000000, 31) == 0x00000001

    @pytest.mark.parametrize("amount", [0, 32, -1, 33])
    def test_out_of_range(self, amount):
        """Amounts 0 and 32 (and beyond) are not defined."""
        with pytest.raises(ValueError):
            _right_rotate(0x12345678, amount)


class TestPackageExports:
    """The package re-exports the helpers, not the hash function."""

    def test_helpers_reexported(self):
        import src.core_crypto as core_crypto
        assert core_crypto.sha256_hex(b"abc").startswith("ba7816bf")
        assert core_crypto.DIGEST_SIZE == 32
        assert issubclass(core_crypto.HashAllocationError, MemoryError)

    def test_sha256_attribute_is_submodule(self):
        import src.core_crypto as core_crypto
        from src.core_crypto import sha256 as submodule
        assert submodule is core_crypto.sha256
        assert submodule.sha256(b"") == sha256(b"")
        assert "sha256" not in core_crypto.__all__
