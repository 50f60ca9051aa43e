"""
Named reference storage.

References are mutable pointers from names to object identifiers.
"""

from typing import Dict

from ..errors import RefNotFoundError
from ..integrity.identifiers import validate_identifier


class RefStore:
    """
    Mutable name -> identifier mapping.

    Creation always succeeds and overwrites.
    Updates require the name to exist already.
    Targets are not checked against the object store.
    """

    def __init__(self):
        self._refs: Dict[str, str] = {}

    def put_ref(self, name: str, target: str) -> None:
        """Create or overwrite a named reference."""
        validate_identifier(name, "ref name")
        validate_identifier(target, "ref target")
        self._refs[name] = target

    def get_ref(self, name: str) -> str:
        """
        Get the target identifier for a named reference.

        Raises RefNotFoundError if reference doesn't exist.
        """
        validate_identifier(name, "ref name")
        try:
            return self._refs[name]
        except KeyError:
            raise RefNotFoundError(name) from None

    def update_ref(self, name: str, target: str) -> None:
        """
        Point an existing reference at a new target.

        Raises RefNotFoundError if reference doesn't exist.
        """
        validate_identifier(name, "ref name")
        if name not in self._refs:
            raise RefNotFoundError(name)
        validate_identifier(target, "ref target")
        self._refs[name] = target

    def has_ref(self, name: str) -> bool:
        """Check if a named reference exists."""
        return isinstance(name, str) and name in self._refs

    def list_refs(self) -> list[str]:
        """List all reference names, sorted."""
        return sorted(self._refs)

    def items(self) -> list[tuple[str, str]]:
        """Return (name, target) pairs, sorted by name."""
        return sorted(self._refs.items())

    def __len__(self) -> int:
        return len(self._refs)

    def __contains__(self, name: object) -> bool:
        return self.has_ref(name)
