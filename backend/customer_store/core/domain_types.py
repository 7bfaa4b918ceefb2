"""Domain Types - rich types that replace bare primitives across the codebase.

Invariants:
    - DocumentId wraps the store-assigned hex string; never parse it
    - Operation covers every Data Access Layer call that reaches the database

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON and log extras without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

DocumentId = NewType("DocumentId", str)
CollectionName = NewType("CollectionName", str)


# ─── Enums ───────────────────────────────────────────────────────

class Operation(str, Enum):
    """Data Access Layer operations, one per HTTP verb plus collection reset."""
    LIST = "list"
    INSERT = "insert"
    UPDATE = "update"
    DELETE = "delete"
    DROP = "drop"
