"""
Database models.
Import all models here to ensure they're registered with Base.
"""

from entity_services.models.document import Document

__all__ = [
    "Document",
]
