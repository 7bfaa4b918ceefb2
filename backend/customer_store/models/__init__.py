"""ORM Models - SQLAlchemy declarative models for stored documents.

Invariants:
    - All models inherit from Base (db/base.py)

Design Decisions:
    - Models imported here so Base.metadata is populated before create_all runs
"""

from customer_store.models.document import Document  # noqa: F401
