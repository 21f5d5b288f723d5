import uuid
from sqlalchemy import Column, DateTime, Index, JSON, String, func

from glowboard.db.base import Base


class Document(Base):
    """One schemaless document of a named collection."""
    __tablename__ = "documents"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    collection = Column(String(100), nullable=False)
    data = Column(JSON, nullable=False, default=dict)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    __table_args__ = (
        Index("idx_documents_collection", "collection"),
    )

    def __repr__(self):
        return f"<Document(collection={self.collection}, id={self.id})>"
