"""
Schema registry lookups.
"""

import pytest

from entity_services.core.exceptions import PreconditionError
from entity_services.schemas import registry


def test_get_registered_schema():
    schema = registry.get("person")

    assert schema["title"] == "person"
    assert "name" in schema["properties"]
    assert "name" in schema["required"]


def test_get_unregistered_schema_returns_empty_descriptor():
    assert registry.get("unregistered-name") == {}


def test_get_returns_a_copy():
    schema = registry.get("organization")
    schema["properties"].clear()

    assert registry.get("organization")["properties"]


@pytest.mark.parametrize("name", [None, "", 1])
def test_get_rejects_invalid_name(name):
    with pytest.raises(PreconditionError):
        registry.get(name)


def test_names():
    assert registry.names() == ["account", "organization", "person"]
