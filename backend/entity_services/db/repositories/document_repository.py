"""
SQL document store.
Stores entity records as JSON bodies in the shared documents table using
async SQLAlchemy sessions.
"""

import copy
import uuid
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, List

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from entity_services.core.exceptions import NotFoundError, StorageError
from entity_services.core.logging import get_logger
from entity_services.db.storage import Record, matches
from entity_services.models.document import Document

if TYPE_CHECKING:
    from entity_services.db.session import SqlDatabase

logger = get_logger(__name__)


class SqlDocumentStore:
    """Storage collaborator over one collection of the documents table."""

    def __init__(self, name: str, database: "SqlDatabase"):
        """
        Initialize store.

        Args:
            name: Collection name
            database: Owner of the engine and sessionmaker
        """
        self.name = name
        self._database = database

    async def insert(self, record: Mapping[str, Any]) -> Record:
        """
        Insert a new document.

        Args:
            record: Document fields; an ``id`` is generated when missing

        Returns:
            The stored document
        """
        document = copy.deepcopy(dict(record))
        if not document.get("id"):
            document["id"] = uuid.uuid4().hex

        try:
            await self._database.create_tables()
            async with self._database.session_maker() as session:
                session.add(
                    Document(
                        collection=self.name,
                        document_id=document["id"],
                        body=document,
                    )
                )
                await session.commit()
        except SQLAlchemyError as exc:
            raise StorageError(
                f'failed to insert into the "{self.name}" collection',
                details={"collection": self.name, "id": document["id"]},
                cause=exc,
            ) from exc

        return copy.deepcopy(document)

    async def update(self, record: Mapping[str, Any]) -> Record:
        """
        Merge fields into an existing document.

        Args:
            record: Document fields including the ``id`` to update

        Returns:
            The merged document

        Raises:
            NotFoundError: no document with that id exists
        """
        document_id = record.get("id")
        if not document_id:
            raise NotFoundError(
                f"No {self.name} document without an id can be updated.",
                details={"collection": self.name},
            )

        try:
            await self._database.create_tables()
            async with self._database.session_maker() as session:
                result = await session.execute(
                    select(Document)
                    .where(Document.collection == self.name)
                    .where(Document.document_id == document_id)
                    .order_by(Document.pk)
                )
                row = result.scalars().first()
                if row is None:
                    raise NotFoundError(
                        f'No {self.name} document with the id "{document_id}".',
                        details={"collection": self.name, "id": document_id},
                    )

                body = dict(row.body)
                body.update(copy.deepcopy(dict(record)))
                # JSON columns do not track in-place mutation
                row.body = body
                await session.commit()
        except SQLAlchemyError as exc:
            raise StorageError(
                f'failed to update the "{self.name}" collection',
                details={"collection": self.name, "id": document_id},
                cause=exc,
            ) from exc

        return copy.deepcopy(body)

    async def query(self, filter: Mapping[str, Any]) -> List[Record]:
        """
        Find documents matching a filter.

        The ``id`` constraint runs in SQL; any other constraint is checked
        against the loaded bodies.
        """
        query = select(Document).where(Document.collection == self.name)

        if "id" in filter:
            constraint = filter["id"]
            if isinstance(constraint, Mapping) and "in" in constraint:
                query = query.where(Document.document_id.in_(list(constraint["in"])))
            else:
                query = query.where(Document.document_id == constraint)

        query = query.order_by(Document.pk)

        try:
            await self._database.create_tables()
            async with self._database.session_maker() as session:
                result = await session.execute(query)
                rows = list(result.scalars().all())
        except SQLAlchemyError as exc:
            raise StorageError(
                f'failed to query the "{self.name}" collection',
                details={"collection": self.name},
                cause=exc,
            ) from exc

        return [copy.deepcopy(row.body) for row in rows if matches(row.body, filter)]
