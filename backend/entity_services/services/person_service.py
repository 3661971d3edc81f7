"""
Person service.
"""

from entity_services.services.base_service import BaseEntityService


class PersonService(BaseEntityService):
    """Service for person operations."""

    entity_name = "person"
    plural_name = "persons"
