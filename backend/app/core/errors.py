"""Error Hierarchy: typed, categorized failures for every post operation.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (4xx) are recoverable; infrastructure errors (5xx) are critical
    - to_response() produces the REST envelope used by routes and global handlers
    - Messages are human-readable and never carry driver or SQL details

Design Decisions:
    - Errors are values: the service returns them inside Err and never raises them
      across its boundary. Infrastructure raises them internally (store, id generator)
      and the service converts them to Err
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    AUTHORIZATION = "authorization"
    BUSINESS_RULE = "business_rule"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logs and responses."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    post_id: str | None = None
    caller: str | None = None
    operation: str | None = None
    debug_info: dict[str, Any] | None = None


class PostServiceError(Exception):
    """Base exception for all post service errors."""

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
                    "post_id": self.context.post_id,
                    "operation": self.context.operation,
                },
            }
        }


# ─── Domain Errors (4xx) ────────────────────────────────────────

class InvalidInputError(PostServiceError):
    """A required field is missing or empty."""
    def __init__(
        self, fields: list[str], message: str = "Missing required fields",
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "INVALID_INPUT", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.fields = fields


class PostNotFoundError(PostServiceError):
    """The id does not resolve to a stored post."""
    def __init__(self, post_id: str, action: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.post_id = post_id
        super().__init__(
            f"Couldn't {action} post with id={post_id}. Post not found",
            "NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, ctx, 404,
        )
        self.post_id = post_id


class UnauthorizedError(PostServiceError):
    """Caller is not the post's owner (update/delete)."""
    def __init__(self, action: str, context: ErrorContext | None = None):
        super().__init__(
            f"Only the owner can {action} the post",
            "UNAUTHORIZED", ErrorCategory.AUTHORIZATION,
            ErrorSeverity.WARNING, context, 403,
        )


class ForbiddenError(PostServiceError):
    """Owner attempted to like their own post."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Owners cannot like their own post",
            "FORBIDDEN", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.WARNING, context, 403,
        )


# ─── Infrastructure Errors (5xx) ────────────────────────────────

class DatabaseError(PostServiceError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation


class IdGenerationError(PostServiceError):
    """No unused post id found within the attempt budget."""
    def __init__(self, attempts: int, context: ErrorContext | None = None):
        super().__init__(
            f"Could not generate a unique post id after {attempts} attempts",
            "ID_GENERATION_FAILED", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.attempts = attempts
