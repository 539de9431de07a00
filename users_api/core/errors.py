"""Error Hierarchy — typed, categorized exceptions for store-tier failures.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Store errors never reach the client as-is: handlers collapse them into
      the endpoint's generic failure message
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with UsersApiError base: handlers catch the whole tier at once
    - ErrorContext as dataclass: observability without coupling to logging framework
"""

from dataclasses import dataclass
from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity — decides the log level a store failure is reported at."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"


@dataclass
class ErrorContext:
    """Context carried alongside an error into the logs."""
    user_id: int | None = None
    operation: str | None = None


class UsersApiError(Exception):
    """Base exception for all Users API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()

    def log_extra(self) -> dict:
        """Fields surfaced by JSONFormatter when this error is logged."""
        return {
            "error_code": self.code,
            "error_category": self.category.value,
            "operation": self.context.operation,
            "user_id": self.context.user_id,
        }


# ─── Domain Errors ──────────────────────────────────────────────

class ResourceNotFoundError(UsersApiError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: int, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.user_id = resource_id
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, ctx,
        )
        self.resource_id = resource_id


# ─── Infrastructure Errors ──────────────────────────────────────

class DatabaseError(UsersApiError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.operation = operation
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, ctx,
        )
        self.operation = operation
