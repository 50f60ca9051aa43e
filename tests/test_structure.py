"""
Test package structure and exports.

Verifies that the package is correctly structured and exposes the right API.
"""

import git_vfs
from git_vfs import (
    GitVfs,
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


def test_package_exports():
    """Verify that the package exposes the expected names."""
    for name in git_vfs.__all__:
        assert getattr(git_vfs, name) is not None
    assert git_vfs.__version__ == '0.1.0'


def test_error_hierarchy():
    """Every error derives from the package base class."""
    for cls in (
        NotFoundError,
        AlreadyExistsError,
        ObjectNotFoundError,
        ObjectAlreadyExistsError,
        RefNotFoundError,
        HeadNotSetError,
        InvalidOperationError,
    ):
        assert issubclass(cls, GitVfsError)

    assert issubclass(ObjectNotFoundError, NotFoundError)
    assert issubclass(RefNotFoundError, NotFoundError)
    assert issubclass(HeadNotSetError, NotFoundError)
    assert issubclass(ObjectAlreadyExistsError, AlreadyExistsError)


def test_error_kinds():
    assert ObjectNotFoundError("x").kind is ErrorKind.NOT_FOUND
    assert ObjectAlreadyExistsError("x").kind is ErrorKind.ALREADY_EXISTS
    assert InvalidOperationError("bad").kind is ErrorKind.INVALID_OPERATION
    assert InvalidOperationError("bad").reason == "bad"


def test_no_shared_instance():
    """Each GitVfs owns its own namespaces."""
    first, second = GitVfs(), GitVfs()

    assert first.object_store is not second.object_store
    assert first.ref_store is not second.ref_store


def test_subpackage_imports():
    """Verify that subpackages are importable (even if not exposed directly)."""
    import git_vfs.storage.object_store
    import git_vfs.storage.ref_store
    import git_vfs.storage.head
    import git_vfs.integrity.hashing
    import git_vfs.integrity.identifiers

    assert git_vfs.storage.object_store.ObjectStore is not None
    assert git_vfs.storage.ref_store.RefStore is not None
    assert git_vfs.storage.head.HeadPointer is not None
    assert git_vfs.integrity.hashing.compute_hash is not None
