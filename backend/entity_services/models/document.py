"""
Document model backing the SQL storage backend.
"""

from sqlalchemy import Column, Integer, String, JSON

from entity_services.db.base import Base


class Document(Base):
    """One stored entity record, kept as a JSON body."""

    __tablename__ = "documents"

    # Insertion order; query results are returned in this order
    pk = Column(Integer, primary_key=True, autoincrement=True)
    collection = Column(String(100), nullable=False, index=True)
    document_id = Column(String(64), nullable=False, index=True)
    body = Column(JSON, nullable=False)
