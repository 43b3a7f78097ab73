#!/usr/bin/env python
"""
╔══════════════════════════════════════════════════════════════════════════════╗
║                          SHA-256 CORE LIVE DEMO                               ║
║                   Walking through FIPS 180-4 step by step                     ║
╚══════════════════════════════════════════════════════════════════════════════╝

This script walks through each stage of the from-scratch SHA-256:
- Padding and chunking (0x80 marker, zero fill, 64-bit length trailer)
- The two-block trailer split for 56-byte messages
- Message schedule expansion
- The 64 compression rounds
- Cross-check against the cryptography package
"""

import sys

from src.core_crypto.sha256 import (
    H_INITIAL, init_buffer_state, calc_chunk, create_message_schedule,
    compress, sha256_hex, iter_chunks,
)
from src.integration.reference_check import reference_sha256, self_test


def print_header(title):
    """Print a formatted section header"""
    print("\n" + "═" * 70)
    print(f"  {title}")
    print("═" * 70)


def print_step(step_num, description):
    """Print a numbered step"""
    print(f"\n  [{step_num}] {description}")


def pause(message="Press ENTER to continue..."):
    """Pause for presenter to explain"""
    if sys.stdin.isatty():
        print(f"\n  [PAUSE] {message}")
        input()


def print_chunk(chunk):
    """Print a 64-byte chunk as four rows of hex"""
    for row in range(0, 64, 16):
        print("    " + " ".join(f"{b:02x}" for b in chunk[row:row + 16]))


def print_words(words, per_row=8):
    """Print 32-bit words in rows"""
    for row in range(0, len(words), per_row):
        print("    " + " ".join(f"{w:08x}" for w in words[row:row + per_row]))


def main():

    print("\n" * 2)
    print("╔" + "═" * 68 + "╗")
    print("║" + "           SHA-256 CORE - FROM-SCRATCH HASHING".center(68) + "║")
    print("╚" + "═" * 68 + "╝")

    pause("Press ENTER to begin the demonstration...")

    print_header("PART 1: PADDING A SHORT MESSAGE")

    message = b"abc"
    print_step("1.1", f"Chunking {message!r} ({len(message)} bytes)")
    state = init_buffer_state(message)
    chunk = calc_chunk(state)
    print_chunk(chunk)
    print(f"\n  Marker byte at offset {len(message)}: 0x{chunk[len(message)]:02x}")
    print(f"  Length trailer: {int.from_bytes(chunk[56:], 'big')} bits")
    print(f"  Further chunks: {calc_chunk(state)}")

    pause()

    print_header("PART 2: THE TRAILER SPLIT")

    message = b"a" * 56
    print_step("2.1", "A 56-byte message leaves only 7 bytes after the marker")
    chunks = list(iter_chunks(message))
    print(f"\n  Chunks produced: {len(chunks)}")
    for index, chunk in enumerate(chunks):
        print(f"\n  Chunk {index}:")
        print_chunk(chunk)

    pause()

    print_header("PART 3: MESSAGE SCHEDULE AND COMPRESSION")

    message = b"abc"
    chunk = next(iter_chunks(message))
    w = create_message_schedule(chunk)

    print_step("3.1", "First 16 schedule words (taken straight from the chunk)")
    print_words(w[:16])
    print_step("3.2", "Remaining 48 words (derived with σ0/σ1)")
    print_words(w[16:])

    pause()

    print_step("3.3", "Initial hash state")
    print_words(list(H_INITIAL))
    new_state = compress(H_INITIAL, w)
    print_step("3.4", "State after 64 rounds")
    print_words(new_state)
    print(f"\n  Digest: {sha256_hex(message)}")

    pause()

    print_header("PART 4: CROSS-CHECK")

    print(f"\n  cryptography: {reference_sha256(message).hex()}")
    print(f"  sha256-core:  {sha256_hex(message)}")

    results = self_test()
    for result in results:
        print(f"  {result}")
    passed = sum(1 for r in results if r.passed)
    print(f"\n  Overall: {passed}/{len(results)} vectors passed")

    print("\n" + "═" * 70)
    print("  Demo complete")
    print("═" * 70)


if __name__ == "__main__":
    main()
