"""
SQLAlchemy declarative base for the SQL storage backend.
"""

from sqlalchemy import MetaData
from sqlalchemy.orm import DeclarativeBase


# Stable index names for the documents table
NAMING_CONVENTION = {
    "ix": "ix_%(table_name)s_%(column_0_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(DeclarativeBase):
    """Base class for storage models."""
    metadata = MetaData(naming_convention=NAMING_CONVENTION)
