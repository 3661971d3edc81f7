"""
Organization service.
"""

from entity_services.services.base_service import BaseEntityService


class OrganizationService(BaseEntityService):
    """Service for organization operations, including lookups by many ids."""

    entity_name = "organization"
    plural_name = "organizations"
    operations = ("save", "find_all", "find_by_id", "find_by_ids")
