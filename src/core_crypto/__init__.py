# Core Cryptography Module
"""
Core cryptographic implementations including:
- SHA-256 chunking and padding
- SHA-256 message schedule
- SHA-256 compression rounds

The hash function itself lives in the submodule: import it with
`from src.core_crypto.sha256 import sha256`. The package attribute
`sha256` is that submodule, so only the helpers below are re-exported.
"""

# Lazy imports to avoid RuntimeWarning when running module directly
def __getattr__(name):
    """Lazy import so `python -m src.core_crypto.sha256` runs the self-test cleanly."""
    from . import sha256
    return getattr(sha256, name)

__all__ = [
    'sha256_hex',
    'sha256_string',
    'iter_chunks',
    'HashAllocationError',
    'DIGEST_SIZE',
]
