"""
In-memory object storage.

Provides immutable, create-once object storage keyed by identifier.
"""

from typing import Dict, Union

from ..errors import ObjectNotFoundError, ObjectAlreadyExistsError
from ..integrity.identifiers import validate_identifier, to_owned_bytes

BytesLike = Union[bytes, bytearray, memoryview]


class ObjectStore:
    """
    Object store with immutable objects.

    Objects are stored by identifier.
    Once written, objects never change.
    """

    def __init__(self):
        """Initialize an empty object store."""
        self._objects: Dict[str, bytes] = {}

    def put_object(self, identifier: str, content: BytesLike) -> None:
        """
        Store an object under identifier.

        The object is stored immutably:
        - Identifier must be a non-empty string
        - Content is copied into an owned bytes value
        - If the identifier already exists, nothing is written

        Raises ObjectAlreadyExistsError if identifier is taken.
        Raises InvalidOperationError for malformed input.
        """
        validate_identifier(identifier)
        data = to_owned_bytes(content)

        # Existence alone decides; content is never compared
        if identifier in self._objects:
            raise ObjectAlreadyExistsError(identifier)

        self._objects[identifier] = data

    def get_object(self, identifier: str) -> bytes:
        """
        Retrieve an object by its identifier.

        Raises ObjectNotFoundError if object doesn't exist.
        Raises InvalidOperationError for a malformed identifier.
        """
        validate_identifier(identifier)
        try:
            return self._objects[identifier]
        except KeyError:
            raise ObjectNotFoundError(identifier) from None

    def has_object(self, identifier: str) -> bool:
        """Check if an object exists in the store."""
        return isinstance(identifier, str) and identifier in self._objects

    def list_all_objects(self) -> list[str]:
        """List all object identifiers in the store, sorted."""
        return sorted(self._objects)

    def get_stats(self) -> dict:
        """
        Get storage statistics.

        Returns dict with:
        - total_objects: number of objects
        - total_size_bytes: total payload size in bytes
        """
        return {
            'total_objects': len(self._objects),
            'total_size_bytes': sum(len(data) for data in self._objects.values()),
        }

    def __len__(self) -> int:
        return len(self._objects)

    def __contains__(self, identifier: object) -> bool:
        return self.has_object(identifier)
