"""
Content hashing using SHA-256 or BLAKE3.

Stateless helpers for fingerprinting raw bytes, independent of the store.
"""

import hashlib

import blake3

SUPPORTED_ALGORITHMS = ('sha256', 'blake3')


def compute_hash(data: bytes, algorithm: str = 'sha256') -> str:
    """
    Compute hash of raw bytes.

    Uses SHA-256 by default, BLAKE3 when requested.
    Returns hex-encoded hash string.

    Raises ValueError for an unsupported algorithm.
    """
    if algorithm == 'sha256':
        return hashlib.sha256(data).hexdigest()
    if algorithm == 'blake3':
        return blake3.blake3(data).hexdigest()
    raise ValueError(
        f"Unsupported hash algorithm: {algorithm} "
        f"(expected one of {', '.join(SUPPORTED_ALGORITHMS)})"
    )


def verify_hash(data: bytes, expected_hash: str, algorithm: str = 'sha256') -> bool:
    """
    Verify that data matches expected hash.

    Returns True if match, False otherwise.
    """
    actual_hash = compute_hash(data, algorithm)
    return actual_hash == expected_hash


def data_sha256(data: bytes) -> str:
    """Return the SHA-256 hex fingerprint of data."""
    return compute_hash(data, 'sha256')
