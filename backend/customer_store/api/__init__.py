"""API Layer - FastAPI routes, middleware and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All resource endpoints return the {message, body} envelope

Design Decisions:
    - Thin routes delegate to the document store (ADR: impureim sandwich)
"""
