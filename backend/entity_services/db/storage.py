"""
Storage collaborator contract.
Entity services talk to their storage only through this interface; the
concrete store is looked up by collection name from the configured backend.
"""

from collections.abc import Mapping
from typing import Any, Dict, List, Protocol

from entity_services.utils.preconditions import require_string


Record = Dict[str, Any]


class StorageCollaborator(Protocol):
    """Document store handle for one entity collection."""

    async def insert(self, record: Mapping[str, Any]) -> Record:
        """Store a new record, assigning an ``id`` when it has none."""
        ...

    async def update(self, record: Mapping[str, Any]) -> Record:
        """
        Merge ``record`` into the stored record with the same ``id``.

        Raises:
            NotFoundError: no stored record has that id
        """
        ...

    async def query(self, filter: Mapping[str, Any]) -> List[Record]:
        """Return every record matching ``filter`` in storage order."""
        ...


class DocumentDatabase(Protocol):
    """A backend able to hand out collaborators per collection."""

    def collection(self, name: str) -> StorageCollaborator:
        ...


def matches(document: Mapping[str, Any], filter: Mapping[str, Any]) -> bool:
    """
    Check a document against a query filter.

    A constraint is either an exact value or ``{"in": [...]}`` for set
    membership. A document lacking a constrained field never matches.
    """
    for field, constraint in filter.items():
        if field not in document:
            return False
        value = document[field]
        if isinstance(constraint, Mapping) and "in" in constraint:
            if value not in constraint["in"]:
                return False
        elif value != constraint:
            return False
    return True


def storage(name: str) -> StorageCollaborator:
    """Return a collaborator for the ``name`` collection of the configured backend."""
    require_string(name, "Please define the name of the storage collection.")

    from entity_services.deps.di_container import get_container

    return get_container().database().collection(name)
