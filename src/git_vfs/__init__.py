"""
git_vfs - In-memory version-control object database.

This package provides:
- Create-once object storage keyed by identifier
- Blobs addressed by an identifier derived from their content
- Mutable named references
- A symbolic HEAD pointer over the references
- A standalone SHA-256 / BLAKE3 hash utility

Main entry point:
    GitVfs - primary interface for all operations

Example usage:
    from git_vfs import GitVfs

    vfs = GitVfs()
    blob_id = vfs.create_blob(b"Hello, git virtual world!")
    vfs.create_ref("refs/heads/main", blob_id)
    vfs.set_head("refs/heads/main")
    vfs.get_ref(vfs.get_head())
"""

from .engine import GitVfs
from .errors import (
    ErrorKind,
    GitVfsError,
    NotFoundError,
    AlreadyExistsError,
    ObjectNotFoundError,
    ObjectAlreadyExistsError,
    RefNotFoundError,
    HeadNotSetError,
    InvalidOperationError,
)
from .integrity.hashing import compute_hash, data_sha256, verify_hash
from .integrity.identifiers import digest_identifier, length_identifier

__version__ = '0.1.0'

__all__ = [
    # Main engine
    'GitVfs',

    # Errors
    'ErrorKind',
    'GitVfsError',
    'NotFoundError',
    'AlreadyExistsError',
    'ObjectNotFoundError',
    'ObjectAlreadyExistsError',
    'RefNotFoundError',
    'HeadNotSetError',
    'InvalidOperationError',

    # Hashing and identifiers
    'compute_hash',
    'data_sha256',
    'verify_hash',
    'digest_identifier',
    'length_identifier',
]
