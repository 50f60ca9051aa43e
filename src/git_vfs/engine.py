"""
Git VFS engine.

Main entry point coordinating the object store, the reference store
and the HEAD pointer.
"""

from typing import Dict, List

from .integrity.identifiers import (
    IdentifierDerivation,
    length_identifier,
    to_owned_bytes,
)
from .storage.head import HeadPointer
from .storage.object_store import BytesLike, ObjectStore
from .storage.ref_store import RefStore


class GitVfs:
    """
    In-memory version-control object database.

    This is the primary interface for:
    - Storing and reading objects and blobs
    - Creating, reading and updating named references
    - Setting and reading the symbolic HEAD pointer

    Every operation either applies fully or raises and leaves the
    store unchanged.
    """

    def __init__(self, derive_identifier: IdentifierDerivation = length_identifier):
        """
        Create an empty store.

        Args:
            derive_identifier: maps blob content to its identifier
        """
        self.derive_identifier = derive_identifier
        self.object_store = ObjectStore()
        self.ref_store = RefStore()
        self.head = HeadPointer(self.ref_store)

    # ========== Object Storage ==========

    def create_object(self, identifier: str, content: BytesLike) -> None:
        """
        Store content under identifier.

        Raises ObjectAlreadyExistsError if identifier is already present.
        """
        self.object_store.put_object(identifier, content)

    def get_object(self, identifier: str) -> bytes:
        """Retrieve object content by identifier."""
        return self.object_store.get_object(identifier)

    def create_blob(self, content: BytesLike) -> str:
        """
        Store a blob and return its derived identifier.

        Two different payloads that derive the same identifier raise
        ObjectAlreadyExistsError on the second write.
        """
        data = to_owned_bytes(content)
        identifier = self.derive_identifier(data)
        self.object_store.put_object(identifier, data)
        return identifier

    def has_object(self, identifier: str) -> bool:
        """Check if an object exists."""
        return self.object_store.has_object(identifier)

    def list_all_objects(self) -> List[str]:
        """List all object identifiers in store."""
        return self.object_store.list_all_objects()

    # ========== Named References ==========

    def create_ref(self, ref_name: str, identifier: str) -> None:
        """Create or overwrite a named reference."""
        self.ref_store.put_ref(ref_name, identifier)

    def get_ref(self, ref_name: str) -> str:
        """Get the object identifier a reference points at."""
        return self.ref_store.get_ref(ref_name)

    def update_ref(self, ref_name: str, identifier: str) -> None:
        """
        Repoint an existing reference.

        Raises RefNotFoundError if the reference was never created.
        """
        self.ref_store.update_ref(ref_name, identifier)

    def has_ref(self, ref_name: str) -> bool:
        """Check if a named reference exists."""
        return self.ref_store.has_ref(ref_name)

    def list_refs(self) -> List[str]:
        """List all named references."""
        return self.ref_store.list_refs()

    # ========== HEAD ==========

    def set_head(self, ref_name: str) -> None:
        """
        Point HEAD at a reference name.

        Raises RefNotFoundError if ref_name does not exist.
        """
        self.head.set(ref_name)

    def get_head(self) -> str:
        """
        Return the reference name HEAD points at.

        The name is not resolved; call get_ref for the identifier.
        """
        return self.head.get()

    def resolve_head(self) -> str:
        """Resolve HEAD to an object identifier via its reference."""
        return self.get_ref(self.get_head())

    # ========== Statistics and Diagnostics ==========

    def get_statistics(self) -> Dict[str, object]:
        """
        Get store statistics.

        Returns object counts, payload size, ref count and HEAD.
        """
        stats: Dict[str, object] = dict(self.object_store.get_stats())
        stats['refs'] = len(self.ref_store)
        stats['head'] = self.head.get() if self.head.is_set else None
        return stats

    def __repr__(self) -> str:
        stats = self.get_statistics()
        return (
            f"GitVfs("
            f"objects={stats['total_objects']}, "
            f"refs={stats['refs']}, "
            f"head={stats['head']})"
        )
