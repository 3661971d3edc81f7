"""
Database session management with async SQLAlchemy 2.0.
Owns the engine and sessionmaker of the SQL storage backend.
"""

from typing import Any

from sqlalchemy.ext.asyncio import (
    AsyncSession,
    create_async_engine,
    async_sessionmaker,
)

from entity_services.core.logging import get_logger
from entity_services.db.base import Base
from entity_services.db.repositories.document_repository import SqlDocumentStore

logger = get_logger(__name__)


class SqlDatabase:
    """SQL storage backend handing out one document store per collection."""

    def __init__(self, url: str, echo: bool = False, **engine_options: Any):
        self.url = url
        self.engine = create_async_engine(url, echo=echo, **engine_options)
        self.session_maker: async_sessionmaker[AsyncSession] = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )
        self._tables_created = False

        logger.info("Database engine created", extra={"url": self.engine.url.render_as_string()})

    async def create_tables(self) -> None:
        """Create the documents table on first use."""
        if self._tables_created:
            return

        # Register models with Base
        import entity_services.models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        self._tables_created = True

        logger.info("Database tables initialized")

    def collection(self, name: str) -> SqlDocumentStore:
        return SqlDocumentStore(name, self)

    async def close(self) -> None:
        """Close database connections."""
        await self.engine.dispose()
        logger.info("Database connections closed")
