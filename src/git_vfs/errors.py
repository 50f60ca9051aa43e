"""
Error types for git_vfs operations.

All errors are explicit and never silent.
Every error carries one of three kinds: not found, already exists,
or invalid operation.
"""

from enum import Enum


class ErrorKind(Enum):
    """Coarse classification shared by all store errors."""
    NOT_FOUND = "not_found"
    ALREADY_EXISTS = "already_exists"
    INVALID_OPERATION = "invalid_operation"


class GitVfsError(Exception):
    """Base exception for all git_vfs errors."""
    kind: ErrorKind = ErrorKind.INVALID_OPERATION


class NotFoundError(GitVfsError):
    """Raised when a lookup or update target is absent."""
    kind = ErrorKind.NOT_FOUND


class AlreadyExistsError(GitVfsError):
    """Raised when a create-once key is written twice."""
    kind = ErrorKind.ALREADY_EXISTS


class ObjectNotFoundError(NotFoundError):
    """Raised when a requested object does not exist."""

    def __init__(self, identifier: str):
        self.identifier = identifier
        super().__init__(f"Object not found: {identifier}")


class ObjectAlreadyExistsError(AlreadyExistsError):
    """Raised when an object identifier is already taken."""

    def __init__(self, identifier: str):
        self.identifier = identifier
        super().__init__(f"Object already exists: {identifier}")


class RefNotFoundError(NotFoundError):
    """Raised when a reference name has never been created."""

    def __init__(self, ref_name: str):
        self.ref_name = ref_name
        super().__init__(f"Reference not found: {ref_name}")


class HeadNotSetError(NotFoundError):
    """Raised when HEAD is read before it was ever set."""

    def __init__(self):
        super().__init__("HEAD is not set")


class InvalidOperationError(GitVfsError):
    """Raised when an operation receives malformed input."""
    kind = ErrorKind.INVALID_OPERATION

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Invalid operation: {reason}")
