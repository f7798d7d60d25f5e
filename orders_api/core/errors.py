"""Error Hierarchy: typed, categorized exceptions for every orders-api failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors are 400/404; persistence failures are 500
    - to_response() produces the REST envelope used by the global handlers
    - No driver or SQL details leak into user-facing messages

Design Decisions:
    - Single hierarchy under OrdersApiError: one FastAPI handler catches all
    - ErrorContext names the resource involved so logs and responses agree
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for logging and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Which resource the failure concerns."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    resource: str | None = None
    resource_id: str | None = None


class OrdersApiError(Exception):
    """Base exception for all orders-api errors."""

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
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "resource": self.context.resource,
                    "resource_id": self.context.resource_id,
                },
            }
        }


# ─── Client Errors (400-level) ──────────────────────────────────

class InvalidIdentifierError(OrdersApiError):
    """Path id is not a positive integer."""
    def __init__(self, resource: str, raw_id: str):
        label = "ID" if resource == "user" else f"{resource} ID"
        super().__init__(
            f"invalid {label}",
            "INVALID_ID", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING,
            ErrorContext(resource=resource, resource_id=raw_id), 400,
        )
        self.raw_id = raw_id


class ResourceNotFoundError(OrdersApiError):
    """Requested row does not exist."""
    def __init__(self, resource: str, resource_id: int | str):
        super().__init__(
            f"{resource} not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING,
            ErrorContext(resource=resource, resource_id=str(resource_id)), 404,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(OrdersApiError):
    """Database operation failed."""
    def __init__(
        self, message: str, operation: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation
