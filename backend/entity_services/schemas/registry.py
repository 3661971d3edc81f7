"""
Schema registry.
Maps a schema name to the JSON schema of the matching record model. Looking up
an unknown name is not an error and yields an empty descriptor.
"""

import copy
from typing import Any, Dict, List

from entity_services.schemas.account import AccountSchema
from entity_services.schemas.organization import OrganizationSchema
from entity_services.schemas.person import PersonSchema
from entity_services.utils.preconditions import require_string


SCHEMAS: Dict[str, Dict[str, Any]] = {
    "account": AccountSchema.model_json_schema(),
    "person": PersonSchema.model_json_schema(),
    "organization": OrganizationSchema.model_json_schema(),
}


def get(name: str) -> Dict[str, Any]:
    require_string(name, "Please define a name of the schema you want to grab.")

    return copy.deepcopy(SCHEMAS.get(name, {}))


def names() -> List[str]:
    """Names of all registered schemas."""
    return sorted(SCHEMAS)
