"""Resource Specs - one descriptor per CRUD resource exposed over HTTP.

Invariants:
    - Every resource maps exactly one URL path to exactly one collection
    - The model is the binding shape for POST/PUT/DELETE bodies

Design Decisions:
    - A frozen dataclass parameterises a single router factory instead of
      duplicating handlers per entity (ADR: /customer and /cliente differ only
      in path, collection and field names)
"""

from dataclasses import dataclass

from customer_store.config import Settings
from customer_store.core.domain_types import CollectionName
from customer_store.schemas.document import Cliente, Customer, DocumentModel


@dataclass(frozen=True)
class ResourceSpec:
    """Path, collection and binding model for one CRUD resource."""
    path: str
    collection: CollectionName
    model: type[DocumentModel]
    tag: str


def build_resources(settings: Settings) -> list[ResourceSpec]:
    """Resources served by the application, collections taken from settings."""
    return [
        ResourceSpec(
            path="/customer",
            collection=CollectionName(settings.collection_name),
            model=Customer,
            tag="customer",
        ),
        ResourceSpec(
            path="/cliente",
            collection=CollectionName(settings.cliente_collection_name),
            model=Cliente,
            tag="cliente",
        ),
    ]
