"""
Pytest configuration and fixtures.
Provides a memory backed container, an in-memory SQLite database, a fixed
clock and a scriptable storage collaborator.
"""

from typing import Any, Dict, List, Optional

import pytest
from sqlalchemy.pool import StaticPool

from entity_services.db.repositories.memory_repository import MemoryDatabase
from entity_services.db.session import SqlDatabase
from entity_services.deps.di_container import build_container, reset_container, set_container


# Test database URL (in-memory SQLite for testing)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


class FakeClock:
    """Replacement for epoch_seconds returning a settable time."""

    def __init__(self, now: int = 1_700_000_000):
        self.now = now

    def __call__(self) -> int:
        return self.now


class ScriptedDao:
    """Storage collaborator that records calls and replays scripted results."""

    def __init__(
        self,
        update_error: Optional[Exception] = None,
        insert_error: Optional[Exception] = None,
        query_error: Optional[Exception] = None,
        query_result: Optional[List[Dict[str, Any]]] = None,
    ):
        self.update_error = update_error
        self.insert_error = insert_error
        self.query_error = query_error
        self.query_result = query_result if query_result is not None else []
        self.calls: List[tuple] = []

    async def update(self, record):
        self.calls.append(("update", dict(record)))
        if self.update_error is not None:
            raise self.update_error
        return dict(record)

    async def insert(self, record):
        self.calls.append(("insert", dict(record)))
        if self.insert_error is not None:
            raise self.insert_error
        return {"id": "generated", **record}

    async def query(self, filter):
        self.calls.append(("query", filter))
        if self.query_error is not None:
            raise self.query_error
        return list(self.query_result)


@pytest.fixture
def clock(monkeypatch):
    """Freeze the save timestamp."""
    fake = FakeClock()
    monkeypatch.setattr("entity_services.services.base_service.epoch_seconds", fake)
    return fake


@pytest.fixture
def container():
    """
    Install a memory backed container as the global container.
    """
    test_container = build_container(storage_backend="memory")
    set_container(test_container)
    yield test_container
    reset_container()


@pytest.fixture(scope="function")
async def sql_database():
    """
    Create a SQL backend on in-memory SQLite.
    """
    database = SqlDatabase(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    yield database
    await database.close()


@pytest.fixture(params=["memory", "sql"])
async def database(request, sql_database):
    """
    Run a test once per storage backend.
    """
    if request.param == "memory":
        return MemoryDatabase()
    return sql_database
