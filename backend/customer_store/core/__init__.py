"""Core Layer - domain types, messages, errors and resource descriptors.

Invariants:
    - No module in core/ imports from api/, infrastructure/, or db/
    - No IO, no async

Design Decisions:
    - Functional core separated from imperative shell (ADR: impureim sandwich)
"""
