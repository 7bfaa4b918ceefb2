"""Infrastructure Layer - database session management, document storage, logging.

Invariants:
    - Infrastructure never imports from api/
    - Driver exceptions are mapped to core/errors.py types before leaving this layer

Design Decisions:
    - Session manager and document store split: acquisition/release vs unit of work
"""
