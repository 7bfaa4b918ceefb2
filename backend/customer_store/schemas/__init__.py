"""Pydantic Schemas - request binding and response envelope for API endpoints.

Invariants:
    - Schemas validate at system boundary (request bodies)
    - Envelope is shared by success and error responses

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence (ADR: DDD boundary)
"""
