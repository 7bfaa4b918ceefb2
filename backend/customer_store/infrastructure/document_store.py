"""Document Store - list/insert/update/delete against one named collection.

Invariants:
    - Every query is scoped to self.name; other collections are never touched
    - Each operation commits on success and rolls back on failure
    - update_by_id and delete_by_id on an unknown id match zero documents, never raise
    - Any SQLAlchemy failure becomes DatabaseError tagged with the failed Operation

Design Decisions:
    - Bound to the request's AsyncSession: the session dependency owns acquisition
      and release, the store owns the unit of work per call
    - $set semantics on update: the given fields overwrite the stored ones; callers
      pass the full bound record, so every model field is replaced
    - No retries anywhere (ADR: failures surface to the caller as one 400)
"""

import logging
from typing import Any

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from customer_store.core.domain_types import CollectionName, DocumentId, Operation
from customer_store.core.errors import DatabaseError, ErrorContext
from customer_store.models.document import Document, new_document_id

logger = logging.getLogger(__name__)


class DocumentCollection:
    """CRUD over the documents of one collection."""

    def __init__(self, db: AsyncSession, name: CollectionName):
        self._db = db
        self.name = name

    async def find_all(self) -> list[dict[str, Any]]:
        """All documents of the collection, oldest first."""
        try:
            result = await self._db.execute(
                select(Document)
                .where(Document.collection == self.name)
                .order_by(Document.created_at),
            )
            return [doc.to_record() for doc in result.scalars().all()]
        except SQLAlchemyError as e:
            raise await self._fail(Operation.LIST, e)

    async def insert(
        self, fields: dict[str, Any], document_id: DocumentId | None = None,
    ) -> dict[str, Any]:
        """Store a new document; the store assigns the id when none is given."""
        document = Document(
            id=document_id or new_document_id(),
            collection=self.name,
            body=dict(fields),
        )
        record = document.to_record()
        try:
            self._db.add(document)
            await self._db.commit()
        except SQLAlchemyError as e:
            raise await self._fail(Operation.INSERT, e, document_id)
        logger.info(
            "Document inserted",
            extra={"collection": self.name, "document_id": record["id"]},
        )
        return record

    async def update_by_id(
        self, document_id: DocumentId, fields: dict[str, Any],
    ) -> int:
        """Merge fields into the stored document. Returns the matched count."""
        try:
            document = await self._get(document_id)
            if document is None:
                logger.info(
                    "Update matched no document",
                    extra={"collection": self.name, "document_id": document_id},
                )
                return 0
            document.body = {**document.body, **fields}
            await self._db.commit()
        except SQLAlchemyError as e:
            raise await self._fail(Operation.UPDATE, e, document_id)
        logger.info(
            "Document updated",
            extra={"collection": self.name, "document_id": document_id},
        )
        return 1

    async def delete_by_id(self, document_id: DocumentId) -> int:
        """Remove the document with this id. Returns the deleted count."""
        try:
            result = await self._db.execute(
                delete(Document).where(
                    Document.collection == self.name,
                    Document.id == document_id,
                ),
            )
            await self._db.commit()
        except SQLAlchemyError as e:
            raise await self._fail(Operation.DELETE, e, document_id)
        logger.info(
            "Document deleted",
            extra={
                "collection": self.name, "document_id": document_id,
                "matched": result.rowcount,
            },
        )
        return result.rowcount

    async def drop(self) -> int:
        """Remove every document of the collection. Returns the deleted count."""
        try:
            result = await self._db.execute(
                delete(Document).where(Document.collection == self.name),
            )
            await self._db.commit()
        except SQLAlchemyError as e:
            raise await self._fail(Operation.DROP, e)
        logger.info(
            "Collection dropped",
            extra={"collection": self.name, "matched": result.rowcount},
        )
        return result.rowcount

    async def _get(self, document_id: DocumentId) -> Document | None:
        result = await self._db.execute(
            select(Document).where(
                Document.collection == self.name,
                Document.id == document_id,
            ),
        )
        return result.scalar_one_or_none()

    async def _fail(
        self,
        operation: Operation,
        error: SQLAlchemyError,
        document_id: DocumentId | None = None,
    ) -> DatabaseError:
        await self._db.rollback()
        logger.error(
            f"DB {operation.value} failed: {error}",
            extra={
                "collection": self.name, "operation": operation.value,
                "document_id": document_id,
            },
        )
        return DatabaseError(
            type(error).__name__, operation,
            ErrorContext(collection=self.name, document_id=document_id),
        )
