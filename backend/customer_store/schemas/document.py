"""Document Schemas - Pydantic binding models for request bodies and the response envelope.

Invariants:
    - Binding is type-only: no length, range or presence rules beyond the type
    - Omitted fields bind to zero values ("" and 0), id binds to None
    - Strict mode: "30" is not an int, 30.5 is not an int, true is not an int
    - Envelope is the only response shape: {message, body}

Design Decisions:
    - Zero-value defaults keep the original binding behaviour where a missing
      field is stored as its zero value, not rejected
    - id is a plain str: the store assigns opaque hex ids and never parses them
"""

from typing import Any

from pydantic import BaseModel, ConfigDict


class DocumentModel(BaseModel):
    """Base binding model - every document carries an optional store-assigned id."""
    model_config = ConfigDict(strict=True, extra="ignore")

    id: str | None = None

    def document_fields(self) -> dict[str, Any]:
        """Fields to persist, without the id. Zero values included."""
        return self.model_dump(exclude={"id"})

    def to_body(self) -> dict[str, Any]:
        """Response body form: id omitted when absent."""
        return self.model_dump(exclude_none=True)


class Customer(DocumentModel):
    """Customer record served under /customer."""
    name: str = ""
    age: int = 0


class Cliente(DocumentModel):
    """Cliente record served under /cliente."""
    name: str = ""
    idade: int = 0


class Envelope(BaseModel):
    """Response envelope for every endpoint."""
    message: str
    body: Any = None
