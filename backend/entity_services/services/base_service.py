"""
Base entity service.
Services own one storage collaborator and translate its results and errors
into the service error taxonomy.
"""

from abc import ABC
from collections.abc import Mapping
from typing import Any, List, Optional, Sequence, Tuple

from entity_services.core.exceptions import (
    InvariantViolationError,
    NotFoundError,
    PersistenceError,
)
from entity_services.core.logging import get_logger, trace
from entity_services.db.storage import Record, StorageCollaborator
from entity_services.services.handle import ServiceHandle
from entity_services.utils.preconditions import (
    require_mapping,
    require_string,
    require_string_list,
)
from entity_services.utils.timestamps import epoch_seconds

logger = get_logger(__name__)


class BaseEntityService(ABC):
    """Base service class for all entity services."""

    entity_name: str = ""
    plural_name: str = ""
    operations: Tuple[str, ...] = ("save", "find_all", "find_by_id")

    def __init__(self, dao: StorageCollaborator):
        self._dao = dao

    @property
    def dao(self) -> StorageCollaborator:
        return self._dao

    def handle(self) -> ServiceHandle:
        """Bundle the operations this entity exposes."""
        return ServiceHandle(
            self.entity_name,
            {name: getattr(self, name) for name in self.operations},
        )

    async def save(self, record: Mapping[str, Any]) -> Record:
        """
        Persist a record.

        The record is updated when storage already knows it and inserted
        otherwise. ``modified`` is stamped on every save, ``created`` only on
        the insert.

        The caller's mapping is left untouched; use the returned record to see
        the stamped timestamps. A caller supplied ``created`` is ignored.

        Args:
            record: The record that should be persisted

        Returns:
            The stored record
        """
        require_mapping(record, f"Please define the {self.entity_name} which should be saved.")

        record = dict(record)
        record["modified"] = epoch_seconds()
        # created is only ever set by the insert path
        record.pop("created", None)

        try:
            updated = await self._dao.update(record)
        except NotFoundError:
            trace(logger, "The %s does not exist. Inserting it.", self.entity_name)
            return await self._insert(record)
        except Exception as exc:
            raise PersistenceError(
                f"failed to save the {self.entity_name}.",
                details={"id": record.get("id")},
                cause=exc,
            ) from exc

        trace(logger, "Updated existing %s: %s", self.entity_name, updated.get("id"))
        return updated

    async def _insert(self, record: Record) -> Record:
        # This is a new record, both timestamps share the save time
        record["created"] = record["modified"]

        try:
            inserted = await self._dao.insert(record)
        except Exception as exc:
            raise PersistenceError(
                f"failed to persist a new {self.entity_name}.",
                details={"id": record.get("id")},
                cause=exc,
            ) from exc

        trace(logger, "Created new %s: %s", self.entity_name, inserted.get("id"))
        return inserted

    async def find_all(self) -> List[Record]:
        """
        Find all records.

        Returns:
            Every stored record, possibly an empty list
        """
        try:
            return await self._dao.query({})
        except Exception as exc:
            raise PersistenceError(f"failed to find all {self.plural_name}.", cause=exc) from exc

    async def find_by_id(self, id: str) -> Optional[Record]:
        """
        Find a record by id.

        Returns:
            The record or None when nothing has been found

        Raises:
            InvariantViolationError: storage holds more than one record with the id
        """
        require_string(id, f"Please define an id for the {self.entity_name} that should be found.")

        try:
            records = await self._dao.query({"id": id})
        except Exception as exc:
            raise PersistenceError(
                f'failed to search for the {self.entity_name} with the id "{id}".',
                details={"id": id},
                cause=exc,
            ) from exc

        if len(records) > 1:
            raise InvariantViolationError(
                f'Found multiple {self.plural_name} with the id "{id}" that should not be possible.',
                details={"id": id, "count": len(records)},
            )

        return records[0] if records else None

    async def find_by_ids(self, ids: Sequence[str]) -> List[Record]:
        """
        Find records by a list of ids.

        The result keeps storage order, not the order of ``ids``.
        """
        ids = require_string_list(ids, "Please define a list with ids.")

        try:
            return await self._dao.query({"id": {"in": ids}})
        except Exception as exc:
            raise PersistenceError(
                f"failed to search for {self.plural_name} by ids: {ids}",
                details={"ids": ids},
                cause=exc,
            ) from exc
