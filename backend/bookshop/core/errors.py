"""Error Hierarchy — typed, categorized exceptions for every bookshop failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (4xx) describe caller mistakes or business-rule rejections
    - ConflictingStateError signals stored data that breaks a model invariant (5xx)
    - to_response() produces the REST envelope; no internal details leaked
    - Envelope timestamps use the wire format (naive UTC, no fraction)

Design Decisions:
    - Single hierarchy with BookshopError base: FastAPI global handler catches all
      (ADR: uniform error shape)
    - ErrorContext as dataclass: ids for observability without coupling to logging
    - Nothing in core retries; the transport layer decides what to show the user
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone

from bookshop.core.wire_format import format_timestamp


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    BUSINESS_RULE = "business_rule"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATA_INTEGRITY = "data_integrity"
    DATABASE = "database"
    INTERNAL = "internal"


def _utc_now() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None, microsecond=0)


@dataclass
class ErrorContext:
    """Identifiers attached to an error for debugging."""
    timestamp: datetime = field(default_factory=_utc_now)
    item_id: int | None = None
    order_id: int | None = None
    customer_id: int | None = None
    debug_info: dict[str, Any] | None = None


class BookshopError(Exception):
    """Base exception for all bookshop errors."""

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
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": format_timestamp(self.context.timestamp),
                "context": {
                    "item_id": self.context.item_id,
                    "order_id": self.context.order_id,
                    "customer_id": self.context.customer_id,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class NotFoundError(BookshopError):
    """Referenced entity id does not exist."""
    def __init__(
        self, resource_type: str, resource_id: object,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class InvalidArgumentError(BookshopError):
    """Caller-supplied value violates a precondition."""
    def __init__(
        self, message: str, field: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "INVALID_ARGUMENT", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.field = field


class InvalidTransitionError(BookshopError):
    """Requested order status is not reachable from the current one."""
    def __init__(
        self, current: str, requested: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Cannot move order from {current} to {requested}",
            "INVALID_TRANSITION", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.ERROR, context, 409,
        )
        self.current = current
        self.requested = requested


class InsufficientStockError(BookshopError):
    """Stock decrease would drive the quantity below zero."""
    def __init__(
        self, item_id: int, available: int, requested: int,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.item_id = item_id
        super().__init__(
            f"Not enough stock for item {item_id}. "
            f"Available: {available}, requested: {requested}",
            "INSUFFICIENT_STOCK", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.ERROR, ctx, 409,
        )
        self.item_id = item_id
        self.available = available
        self.requested = requested


# ─── Integrity / Infrastructure Errors (500-level) ──────────────

class ConflictingStateError(BookshopError):
    """Item found with an invalid combination of condition/content facets."""
    def __init__(
        self, item_id: int | None, detail: str,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.item_id = item_id
        super().__init__(
            f"Item {item_id} is in a conflicting state: {detail}",
            "CONFLICTING_STATE", ErrorCategory.DATA_INTEGRITY,
            ErrorSeverity.CRITICAL, ctx, 500,
        )
        self.item_id = item_id
        self.detail = detail


class DatabaseError(BookshopError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
