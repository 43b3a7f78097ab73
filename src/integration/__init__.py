# Integration Module
"""
Cross-checks the from-scratch SHA-256 core against the `cryptography`
package's OpenSSL-backed SHA-256.
"""

# Lazy imports to avoid RuntimeWarning when running module directly
def __getattr__(name):
    """Lazy import to avoid circular import issues."""
    from . import reference_check
    return getattr(reference_check, name)

__all__ = [
    'VectorResult',
    'KNOWN_ANSWER_VECTORS',
    'BOUNDARY_LENGTHS',
    'reference_sha256',
    'verify_against_reference',
    'self_test',
]
