"""
Account service.
"""

from entity_services.services.base_service import BaseEntityService


class AccountService(BaseEntityService):
    """Service for account operations."""

    entity_name = "account"
    plural_name = "accounts"
