"""
SHA-256 Hash Implementation (From Scratch)

Implements the SHA-256 cryptographic hash function as defined in FIPS 180-4.
This implementation avoids using hashlib and builds the algorithm from scratch.

Components:
- Chunker: Lazily delivers 64-byte blocks, padding the tail on the fly
- Message Schedule: Expands 16 words to 64 words
- Compression: 64 rounds of compression function
- Output: 256-bit (32-byte) digest

The whole input must be held in memory; there is no incremental update API.
"""

import logging
from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence, Union


logger = logging.getLogger(__name__)

BytesLike = Union[bytes, bytearray, memoryview]
_BYTES_TYPES = (bytes, bytearray, memoryview)

# Initial hash values: first 32 bits of fractional parts of square roots of first 8 primes
H_INITIAL = (
    0x6a09e667, 0xbb67ae85, 0x3c6ef372, 0xa54ff53a,
    0x510e527f, 0x9b05688c, 0x1f83d9ab, 0x5be0cd19
)

# Round constants: first 32 bits of fractional parts of cube roots of first 64 primes
K = (
    0x428a2f98, 0x71374491, 0xb5c0fbcf, 0xe9b5dba5,
    0x3956c25b, 0x59f111f1, 0x923f82a4, 0xab1c5ed5,
    0xd807aa98, 0x12835b01, 0x243185be, 0x550c7dc3,
    0x72be5d74, 0x80deb1fe, 0x9bdc06a7, 0xc19bf174,
    0xe49b69c1, 0xefbe4786, 0x0fc19dc6, 0x240ca1cc,
    0x2de92c6f, 0x4a7484aa, 0x5cb0a9dc, 0x76f988da,
    0x983e5152, 0xa831c66d, 0xb00327c8, 0xbf597fc7,
    0xc6e00bf3, 0xd5a79147, 0x06ca6351, 0x14292967,
    0x27b70a85, 0x2e1b2138, 0x4d2c6dfc, 0x53380d13,
    0x650a7354, 0x766a0abb, 0x81c2c92e, 0x92722c85,
    0xa2bfe8a1, 0xa81a664b, 0xc24b8b70, 0xc76c51a3,
    0xd192e819, 0xd6990624, 0xf40e3585, 0x106aa070,
    0x19a4c116, 0x1e376c08, 0x2748774c, 0x34b0bcb5,
    0x391c0cb3, 0x4ed8aa4a, 0x5b9cca4f, 0x682e6ff3,
    0x748f82ee, 0x78a5636f, 0x84c87814, 0x8cc70208,
    0x90befffa, 0xa4506ceb, 0xbef9a3f7, 0xc67178f2
)

# Mask for 32-bit arithmetic
MASK_32 = 0xFFFFFFFF

# The length trailer is a 64-bit field, so only the low 64 bits of the bit count survive
MASK_64 = 0xFFFFFFFFFFFFFFFF

CHUNK_SIZE = 64         # 512-bit blocks
TOTAL_LEN_LEN = 8       # 64-bit big-endian length trailer
DIGEST_SIZE = 32        # 256-bit output
SCHEDULE_SIZE = 64
ROUNDS = 64


class HashAllocationError(MemoryError):
    """Raised when the per-block working buffers cannot be allocated.

    Only the current hash computation is lost; the caller may retry or
    give up, but must never use a partial digest.
    """


def _right_rotate(value: int, amount: int) -> int:
    """Right rotate a 32-bit integer by the specified amount (0 < amount < 32)."""
    if not 0 < amount < 32:
        raise ValueError(f"Rotate amount must be between 1 and 31, got {amount}")
    return ((value >> amount) | (value << (32 - amount))) & MASK_32


def _ch(x: int, y: int, z: int) -> int:
    """Choice function: if x then y else z (bitwise)."""
    return (x & y) ^ (~x & z & MASK_32)


def _maj(x: int, y: int, z: int) -> int:
    """Majority function: majority vote of bits."""
    return (x & y) ^ (x & z) ^ (y & z)


def _sigma0(x: int) -> int:
    """Lowercase sigma 0: used in message schedule."""
    return _right_rotate(x, 7) ^ _right_rotate(x, 18) ^ (x >> 3)


def _sigma1(x: int) -> int:
    """Lowercase sigma 1: used in message schedule."""
    return _right_rotate(x, 17) ^ _right_rotate(x, 19) ^ (x >> 10)


def _big_sigma0(x: int) -> int:
    """Uppercase Sigma 0: used in compression."""
    return _right_rotate(x, 2) ^ _right_rotate(x, 13) ^ _right_rotate(x, 22)


def _big_sigma1(x: int) -> int:
    """Uppercase Sigma 1: used in compression."""
    return _right_rotate(x, 6) ^ _right_rotate(x, 11) ^ _right_rotate(x, 25)


# ============================================================================
# Chunker
# ============================================================================

@dataclass
class BufferState:
    """
    Cursor over the message being hashed.

    Tracks the unconsumed suffix of the input and whether the 0x80
    marker and the length trailer have already been delivered. Once
    ``total_length_delivered`` is set, no further chunks are produced.
    """
    data: BytesLike
    offset: int
    remaining: int
    total_length: int
    single_one_delivered: bool = False
    total_length_delivered: bool = False


def init_buffer_state(data: BytesLike) -> BufferState:
    """Create a fresh cursor positioned at the start of ``data``."""
    return BufferState(
        data=data,
        offset=0,
        remaining=len(data),
        total_length=len(data),
    )


def _allocate_chunk() -> bytearray:
    try:
        return bytearray(CHUNK_SIZE)
    except MemoryError as e:
        raise HashAllocationError("Unable to allocate SHA-256 chunk buffer") from e


def calc_chunk(state: BufferState) -> Optional[bytearray]:
    """
    Produce the next 64-byte chunk of the padded message.

    Padding rules (FIPS 180-4, section 5.1.1):
    1. Append bit '1' to message (0x80 byte)
    2. Append zeros until message length ≡ 448 (mod 512)
    3. Append original message length as 64-bit big-endian integer

    Full chunks are copied verbatim. The tail is padded in place; if
    fewer than 8 bytes remain after the marker, the chunk is zero-filled
    and the length trailer is deferred to one more, all-padding chunk.

    Args:
        state: Cursor returned by init_buffer_state(); advanced in place

    Returns:
        The next chunk, or None once the length trailer has been delivered
    """
    if state.total_length_delivered:
        return None

    chunk = _allocate_chunk()

    if state.remaining >= CHUNK_SIZE:
        chunk[:] = state.data[state.offset:state.offset + CHUNK_SIZE]
        state.offset += CHUNK_SIZE
        state.remaining -= CHUNK_SIZE
        return chunk

    pos = state.remaining
    chunk[:pos] = state.data[state.offset:state.offset + pos]
    state.offset += pos
    state.remaining = 0

    # At least one byte of space is left here
    if not state.single_one_delivered:
        chunk[pos] = 0x80
        pos += 1
        state.single_one_delivered = True

    # bytearray() is zero-initialised, so the zero fill is already in place
    if CHUNK_SIZE - pos >= TOTAL_LEN_LEN:
        bit_length = (state.total_length * 8) & MASK_64
        chunk[CHUNK_SIZE - TOTAL_LEN_LEN:] = bit_length.to_bytes(TOTAL_LEN_LEN, byteorder='big')
        state.total_length_delivered = True

    return chunk


def iter_chunks(data: BytesLike) -> Iterator[bytearray]:
    """Yield successive padded 64-byte chunks of ``data``."""
    state = init_buffer_state(data)
    while True:
        chunk = calc_chunk(state)
        if chunk is None:
            return
        yield chunk


# ============================================================================
# Message Schedule
# ============================================================================

def _allocate_schedule() -> List[int]:
    try:
        return [0] * SCHEDULE_SIZE
    except MemoryError as e:
        raise HashAllocationError("Unable to allocate SHA-256 message schedule") from e


def create_message_schedule(chunk: BytesLike) -> List[int]:
    """
    Expand a 64-byte chunk into the 64-word message schedule.

    W[0..15] are the chunk's big-endian words. For i from 16 to 63:
        W[i] = σ1(W[i-2]) + W[i-7] + σ0(W[i-15]) + W[i-16]
    """
    if len(chunk) != CHUNK_SIZE:
        raise ValueError(f"Expected {CHUNK_SIZE}-byte chunk, got {len(chunk)}")

    w = _allocate_schedule()

    for i in range(16):
        w[i] = int.from_bytes(chunk[4 * i:4 * i + 4], byteorder='big')

    for i in range(16, SCHEDULE_SIZE):
        s0 = _sigma0(w[i - 15])
        s1 = _sigma1(w[i - 2])
        w[i] = (w[i - 16] + s0 + w[i - 7] + s1) & MASK_32

    return w


# ============================================================================
# Compression
# ============================================================================

def compress(state: Sequence[int], w: Sequence[int]) -> List[int]:
    """
    Perform 64 rounds of compression on the state.

    Args:
        state: Current hash state (8 32-bit words); not modified
        w: Message schedule (64 32-bit words)

    Returns:
        Updated hash state
    """
    if len(state) != 8:
        raise ValueError(f"Hash state must have 8 words, got {len(state)}")
    if len(w) != SCHEDULE_SIZE:
        raise ValueError(f"Message schedule must have {SCHEDULE_SIZE} words, got {len(w)}")

    a, b, c, d, e, f, g, h = state

    for i in range(ROUNDS):
        t1 = (h + _big_sigma1(e) + _ch(e, f, g) + K[i] + w[i]) & MASK_32
        t2 = (_big_sigma0(a) + _maj(a, b, c)) & MASK_32

        h = g
        g = f
        f = e
        e = (d + t1) & MASK_32
        d = c
        c = b
        b = a
        a = (t1 + t2) & MASK_32

    return [
        (word + register) & MASK_32
        for word, register in zip(state, (a, b, c, d, e, f, g, h))
    ]


# ============================================================================
# Public API
# ============================================================================

def sha256(data: BytesLike) -> bytes:
    """
    Compute the SHA-256 hash of the input data.

    Args:
        data: Input bytes to hash (any length, including empty)

    Returns:
        256-bit (32-byte) digest as bytes

    Raises:
        TypeError: If data is not bytes-like
        HashAllocationError: If the working buffers cannot be allocated

    Example:
        >>> sha256(b"hello").hex()
        '2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824'
    """
    if not isinstance(data, _BYTES_TYPES):
        raise TypeError(f"sha256() expects a bytes-like object, got {type(data).__name__}")
    if isinstance(data, memoryview):
        # Strided views cannot be cast in place
        data = data.cast('B') if data.c_contiguous else data.tobytes()

    state = list(H_INITIAL)
    blocks = 0

    for chunk in iter_chunks(data):
        w = create_message_schedule(chunk)
        state = compress(state, w)
        blocks += 1

    logger.debug("sha256: hashed %d bytes in %d blocks", len(data), blocks)

    # Produce final hash value (big-endian)
    return b''.join(word.to_bytes(4, byteorder='big') for word in state)


def sha256_hex(data: BytesLike) -> str:
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


# Self-test when run directly
if __name__ == "__main__":
    # Test vectors from NIST
    test_cases = [
        (b"", "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"),
        (b"abc", "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"),
        (b"abcdbcdecdefdefgefghfghighijhijkijkljklmklmnlmnomnopnopq",
         "248d6a61d20638b8e5c026930c3e6039a33ce45964ff2167f6ecedd419db06c1"),
        (b"The quick brown fox jumps over the lazy dog",
         "d7a8fbb307d7809469ca9abcb0082e4f8d5651e46d3cdb762d02d0bf37c9e592"),
    ]

    print("SHA-256 Implementation Test")
    print("=" * 60)

    all_passed = True
    for data, expected in test_cases:
        result = sha256_hex(data)
        passed = result == expected
        all_passed = all_passed and passed

        status = "✓ PASS" if passed else "✗ FAIL"
        print(f"\nInput: {data[:50]}{'...' if len(data) > 50 else ''}")
        print(f"Blocks:   {sum(1 for _ in iter_chunks(data))}")
        print(f"Expected: {expected}")
        print(f"Got:      {result}")
        print(f"Status:   {status}")

    print("\n" + "=" * 60)
    print(f"Overall: {'All tests passed!' if all_passed else 'Some tests failed!'}")
