"""Document ORM - one row per stored document, grouped into named collections.

Invariants:
    - id is a 32-char hex string assigned by the store when the caller supplies none
    - id is never rewritten after insert
    - body holds the document fields without the id
    - collection scopes every query; documents of different collections never mix

Design Decisions:
    - JSON body column: schema-flexible documents on the relational engine,
      no per-entity tables (ADR: one generic table serves every resource)
    - created_at kept only to give find_all a stable order
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, DateTime, JSON
from sqlalchemy.orm import Mapped, mapped_column

from customer_store.db.base import Base


def new_document_id() -> str:
    return uuid.uuid4().hex


class Document(Base):
    """Stored document belonging to one collection."""
    __tablename__ = "documents"

    id: Mapped[str] = mapped_column(
        String(64), primary_key=True, default=new_document_id,
    )
    collection: Mapped[str] = mapped_column(
        String(64), nullable=False, index=True,
    )
    body: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    def to_record(self) -> dict:
        """Document as returned to callers: id first, then the body fields."""
        return {"id": self.id, **self.body}
