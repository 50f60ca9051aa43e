"""
Identifier derivation and validation.

A derivation maps blob content to the identifier it is stored under.
Derivations must be pure and total over byte sequences.
"""

from typing import Any, Callable

from ..errors import InvalidOperationError
from .hashing import compute_hash

IdentifierDerivation = Callable[[bytes], str]


def length_identifier(data: bytes) -> str:
    """
    Derive an identifier from the content length.

    Stand-in for a real object hash: equal-length payloads collide.
    """
    return str(len(data))


def digest_identifier(data: bytes) -> str:
    """Derive an identifier from the SHA-256 digest of the content."""
    return compute_hash(data, 'sha256')


def validate_identifier(value: Any, what: str = "identifier") -> str:
    """
    Check that value is usable as a store key.

    Raises InvalidOperationError for non-string or empty values.
    """
    if not isinstance(value, str):
        raise InvalidOperationError(
            f"{what} must be a string, got {type(value).__name__}"
        )
    if not value:
        raise InvalidOperationError(f"{what} cannot be empty")
    return value


def to_owned_bytes(content: Any) -> bytes:
    """
    Copy bytes-like content into an owned, immutable bytes object.

    Raises InvalidOperationError if content is not bytes-like.
    """
    if type(content) is bytes:
        return content
    if isinstance(content, (bytes, bytearray, memoryview)):
        return bytes(content)
    raise InvalidOperationError(
        f"content must be bytes-like, got {type(content).__name__}"
    )
