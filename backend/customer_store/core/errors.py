"""Error Hierarchy - typed, categorized exceptions for every failure mode of the store.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Request errors are 400-level; an unreachable database is 503
    - to_response() always produces the {message, body} envelope with body=None
    - No driver details leaked in user-facing messages (they go to the log only)

Design Decisions:
    - Single hierarchy with CustomerStoreError base: FastAPI global handler catches all
      (ADR: uniform error shape, one response per request)
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone

from customer_store.core.domain_types import CollectionName, DocumentId, Operation
from customer_store.core.messages import (
    DATABASE_UNREACHABLE, FAILURE_MESSAGES, INCORRECT_DATA,
)


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    collection: CollectionName | None = None
    document_id: DocumentId | None = None
    user_message: str | None = None
    debug_info: dict[str, Any] | None = None


class CustomerStoreError(Exception):
    """Base exception for all store errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the standard response envelope."""
        return {
            "message": self.context.user_message or self.message,
            "body": None,
        }


# ─── Request Errors (400-level) ─────────────────────────────────

class RequestBindingError(CustomerStoreError):
    """Request body could not be bound to the resource shape."""
    def __init__(self, reason: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.user_message = INCORRECT_DATA
        super().__init__(
            f"Request binding failed: {reason}",
            "BINDING_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, ctx, 400,
        )
        self.reason = reason


class DatabaseError(CustomerStoreError):
    """Database read or write failed for one operation."""
    def __init__(
        self, message: str, operation: Operation, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.user_message = FAILURE_MESSAGES[operation]
        super().__init__(
            f"Database {operation.value} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.ERROR, ctx, 400,
        )
        self.operation = operation


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseUnavailableError(CustomerStoreError):
    """No database session could be established for the request."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.user_message = DATABASE_UNREACHABLE
        super().__init__(
            f"Database unavailable: {message}",
            "DATABASE_UNAVAILABLE", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, ctx, 503,
        )
