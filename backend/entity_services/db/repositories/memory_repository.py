"""
In-process document store.
Keeps deep copies of every record so callers never share state with storage.
"""

import copy
import uuid
from collections.abc import Mapping
from typing import Any, Dict, List

from entity_services.core.exceptions import NotFoundError
from entity_services.core.logging import get_logger
from entity_services.db.storage import Record, matches

logger = get_logger(__name__)


class MemoryDocumentStore:
    """Storage collaborator over one in-memory collection."""

    def __init__(self, name: str, documents: List[Record]):
        """
        Initialize store.

        Args:
            name: Collection name
            documents: Backing list, shared by every store of the collection
        """
        self.name = name
        self._documents = documents

    async def insert(self, record: Mapping[str, Any]) -> Record:
        document = copy.deepcopy(dict(record))
        if not document.get("id"):
            document["id"] = uuid.uuid4().hex
        self._documents.append(document)
        logger.debug("Inserted %s document %s", self.name, document["id"])
        return copy.deepcopy(document)

    async def update(self, record: Mapping[str, Any]) -> Record:
        document_id = record.get("id")
        if document_id:
            for document in self._documents:
                if document.get("id") == document_id:
                    document.update(copy.deepcopy(dict(record)))
                    return copy.deepcopy(document)
        raise NotFoundError(
            f'No {self.name} document with the id "{document_id}".',
            details={"collection": self.name, "id": document_id},
        )

    async def query(self, filter: Mapping[str, Any]) -> List[Record]:
        return [
            copy.deepcopy(document)
            for document in self._documents
            if matches(document, filter)
        ]


class MemoryDatabase:
    """Holds the collections of the memory backend."""

    def __init__(self):
        self._collections: Dict[str, List[Record]] = {}

    def collection(self, name: str) -> MemoryDocumentStore:
        return MemoryDocumentStore(name, self._collections.setdefault(name, []))

    def clear(self) -> None:
        """Drop every stored document."""
        for documents in self._collections.values():
            documents.clear()
