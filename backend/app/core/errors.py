"""Error Hierarchy — typed, categorized exceptions for all Unsocial failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - str(error) is exactly the message (callers match on it)
    - ValidationError is raised synchronously, before any IO is attempted
    - SystemError wraps an infrastructure failure and keeps its original message

Design Decisions:
    - Single hierarchy with UnsocialError base: callers can catch one type
    - ErrorContext as dataclass: rich observability without coupling to logging framework
    - SystemError shadows the builtin only where imported from this module
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


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
    CONFLICT = "conflict"
    DATABASE = "database"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    user_id: str | None = None
    post_id: str | None = None
    comment_id: str | None = None
    debug_info: dict[str, Any] | None = None


class UnsocialError(Exception):
    """Base exception for all Unsocial errors."""

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

    def __str__(self) -> str:
        return self.message

    def to_response(self) -> dict:
        """Convert to standardized error envelope."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "user_id": self.context.user_id,
                    "post_id": self.context.post_id,
                    "comment_id": self.context.comment_id,
                },
            }
        }


# ─── Domain Errors ──────────────────────────────────────────────

class ValidationError(UnsocialError):
    """Argument has the wrong type, length or format."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context,
        )


class NotFoundError(UnsocialError):
    """Referenced entity does not exist."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context,
        )


class OwnershipError(UnsocialError):
    """Acting user does not own the target entity."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "OWNERSHIP_ERROR", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.ERROR, context,
        )


class DuplicityError(UnsocialError):
    """Entity with the same unique fields already exists."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "DUPLICITY_ERROR", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, context,
        )


# ─── Infrastructure Errors ──────────────────────────────────────

class SystemError(UnsocialError):  # noqa: A001
    """Underlying database operation failed."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "SYSTEM_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context,
        )
