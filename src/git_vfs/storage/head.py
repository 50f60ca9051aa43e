"""
Symbolic HEAD pointer.

HEAD holds the name of a reference, never a raw object identifier.
"""

from typing import Optional

from ..errors import HeadNotSetError, RefNotFoundError
from ..integrity.identifiers import validate_identifier
from .ref_store import RefStore


class HeadPointer:
    """
    Single symbolic indirection over a RefStore.

    States: unset, or pointing at a ref name. Once set, HEAD can be
    moved to another existing ref but never cleared.
    """

    def __init__(self, refs: RefStore):
        self._refs = refs
        self._ref_name: Optional[str] = None

    @property
    def is_set(self) -> bool:
        return self._ref_name is not None

    def set(self, ref_name: str) -> None:
        """
        Point HEAD at ref_name.

        Raises RefNotFoundError if ref_name is not a known reference.
        """
        validate_identifier(ref_name, "ref name")
        if not self._refs.has_ref(ref_name):
            raise RefNotFoundError(ref_name)
        self._ref_name = ref_name

    def get(self) -> str:
        """
        Return the ref name HEAD points at.

        Raises HeadNotSetError if HEAD was never set.
        """
        if self._ref_name is None:
            raise HeadNotSetError()
        return self._ref_name
