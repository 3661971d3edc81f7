"""
Storage collaborators: memory and SQL backends share one contract.
"""

import pytest

from entity_services.core.exceptions import NotFoundError, PreconditionError
from entity_services.db.repositories.memory_repository import MemoryDatabase
from entity_services.db.storage import matches, storage


@pytest.mark.asyncio
async def test_insert_assigns_id(database):
    people = database.collection("person")

    inserted = await people.insert({"name": "Ada"})

    assert isinstance(inserted["id"], str) and inserted["id"]
    assert await people.query({"id": inserted["id"]}) == [inserted]


@pytest.mark.asyncio
async def test_insert_keeps_given_id(database):
    people = database.collection("person")

    inserted = await people.insert({"id": "p-1", "name": "Ada"})

    assert inserted == {"id": "p-1", "name": "Ada"}


@pytest.mark.asyncio
async def test_update_merges_fields(database):
    people = database.collection("person")
    await people.insert({"id": "p-1", "name": "Ada", "created": 10})

    updated = await people.update({"id": "p-1", "name": "Ada Lovelace", "modified": 20})

    assert updated == {"id": "p-1", "name": "Ada Lovelace", "created": 10, "modified": 20}
    assert await people.query({}) == [updated]


@pytest.mark.asyncio
@pytest.mark.parametrize("record", [{"name": "Ada"}, {"id": "missing", "name": "Ada"}])
async def test_update_missing_record(database, record):
    people = database.collection("person")

    with pytest.raises(NotFoundError):
        await people.update(record)


@pytest.mark.asyncio
async def test_query_filters(database):
    people = database.collection("person")
    a = await people.insert({"id": "a", "name": "Ada", "team": "x"})
    b = await people.insert({"id": "b", "name": "Grace", "team": "y"})
    c = await people.insert({"id": "c", "name": "Edsger", "team": "x"})

    assert await people.query({}) == [a, b, c]
    assert await people.query({"team": "x"}) == [a, c]
    assert await people.query({"id": {"in": ["c", "a"]}}) == [a, c]
    assert await people.query({"id": {"in": []}}) == []
    assert await people.query({"id": "b", "team": "x"}) == []


@pytest.mark.asyncio
async def test_collections_are_isolated(database):
    await database.collection("person").insert({"id": "same", "name": "Ada"})

    assert await database.collection("organization").query({}) == []
    with pytest.raises(NotFoundError):
        await database.collection("organization").update({"id": "same"})


@pytest.mark.asyncio
async def test_returned_records_are_copies(database):
    people = database.collection("person")
    inserted = await people.insert({"id": "p-1", "tags": ["a"]})

    inserted["tags"].append("b")

    assert (await people.query({}))[0]["tags"] == ["a"]


@pytest.mark.asyncio
async def test_memory_database_clear():
    database = MemoryDatabase()
    await database.collection("person").insert({"name": "Ada"})

    database.clear()

    assert await database.collection("person").query({}) == []


def test_matches():
    document = {"id": "a", "name": "Ada"}

    assert matches(document, {})
    assert matches(document, {"name": "Ada"})
    assert matches(document, {"id": {"in": ["a", "b"]}})
    assert not matches(document, {"id": {"in": []}})
    assert not matches(document, {"email": None})


@pytest.mark.asyncio
async def test_storage_lookup_uses_container_backend(container):
    people = storage("person")

    await people.insert({"id": "p-1", "name": "Ada"})

    assert await storage("person").query({}) == [{"id": "p-1", "name": "Ada"}]


def test_storage_lookup_requires_name(container):
    with pytest.raises(PreconditionError):
        storage("")


def test_documents_table_index_names():
    from entity_services.models.document import Document

    names = {index.name for index in Document.__table__.indexes}

    assert names == {"ix_documents_collection", "ix_documents_document_id"}
