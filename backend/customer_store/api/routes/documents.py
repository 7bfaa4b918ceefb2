"""Document Routes - GET/POST/PUT/DELETE for one resource, built from a ResourceSpec.

Invariants:
    - Session comes from get_db: handlers never run without a verified session
    - Body binding happens before the handler; failures are 400 "Incorrect data"
    - PUT and DELETE require a non-empty id in the body
    - Unknown ids on PUT/DELETE are a 200 no-op, not an error
    - Every response is an Envelope {message, body}

Design Decisions:
    - One factory for every resource instead of duplicated handler sets
      (ADR: /customer and /cliente differ only in path, collection and fields)
    - Mutating verbs carry the record in the body, ids are not path parameters
      (ADR: wire compatibility with existing clients)
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from customer_store.core.domain_types import DocumentId, Operation
from customer_store.core.errors import ErrorContext, RequestBindingError
from customer_store.core.messages import SUCCESS_MESSAGES
from customer_store.core.resources import ResourceSpec
from customer_store.infrastructure.database import get_db
from customer_store.infrastructure.document_store import DocumentCollection
from customer_store.schemas.document import DocumentModel, Envelope


def require_id(record: DocumentModel, resource: ResourceSpec) -> DocumentId:
    """Id of a bound record, or RequestBindingError when it is missing."""
    if not record.id:
        raise RequestBindingError(
            "id is required", ErrorContext(collection=resource.collection),
        )
    return DocumentId(record.id)


def build_document_router(resource: ResourceSpec) -> APIRouter:
    """Router exposing list/insert/update/delete for one resource."""
    model = resource.model
    router = APIRouter(prefix=resource.path, tags=[resource.tag])

    def collection(db: AsyncSession) -> DocumentCollection:
        return DocumentCollection(db, resource.collection)

    @router.get("", response_model=Envelope)
    async def list_documents(db: AsyncSession = Depends(get_db)):
        """All documents of the resource's collection."""
        documents = await collection(db).find_all()
        return Envelope(message=SUCCESS_MESSAGES[Operation.LIST], body=documents)

    @router.post("", response_model=Envelope)
    async def insert_document(record: model, db: AsyncSession = Depends(get_db)):
        """Insert the record; the store assigns the id when absent."""
        stored = await collection(db).insert(
            record.document_fields(),
            DocumentId(record.id) if record.id else None,
        )
        return Envelope(message=SUCCESS_MESSAGES[Operation.INSERT], body=stored)

    @router.put("", response_model=Envelope)
    async def update_document(record: model, db: AsyncSession = Depends(get_db)):
        """Replace every field of the document with the record's id."""
        document_id = require_id(record, resource)
        await collection(db).update_by_id(document_id, record.document_fields())
        return Envelope(
            message=SUCCESS_MESSAGES[Operation.UPDATE], body=record.to_body(),
        )

    @router.delete("", response_model=Envelope)
    async def delete_document(record: model, db: AsyncSession = Depends(get_db)):
        """Delete the document with the record's id."""
        document_id = require_id(record, resource)
        await collection(db).delete_by_id(document_id)
        return Envelope(
            message=SUCCESS_MESSAGES[Operation.DELETE], body=record.to_body(),
        )

    return router
