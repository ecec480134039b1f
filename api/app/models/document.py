from datetime import datetime
from sqlalchemy import JSON, String, DateTime, Index
from sqlalchemy.orm import Mapped, mapped_column

from app.db.database import Base


class Document(Base):
    """A schemaless record in a network-scoped collection."""

    __tablename__ = 'documents'

    # Address: network / collection / doc_id
    network: Mapped[str] = mapped_column(String(20), primary_key=True)
    collection: Mapped[str] = mapped_column(String(50), primary_key=True)
    doc_id: Mapped[str] = mapped_column(String(100), primary_key=True)

    data: Mapped[dict] = mapped_column(JSON, default=dict)

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, default=datetime.utcnow, onupdate=datetime.utcnow
    )

    __table_args__ = (
        Index('ix_document_collection', 'network', 'collection'),
    )
