"""Error Hierarchy — typed, categorized exceptions for all blog failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors (400-level) are produced by explicit checks, never by catching
    - StoreError is the only 500-level domain error; it carries the fault detail
    - Errors with has_body=False are answered with a bare status code

Design Decisions:
    - Single hierarchy with BlogError base: one global handler catches all
    - ErrorContext as dataclass: observability fields without coupling to logging
"""

from dataclasses import dataclass, field
from enum import Enum
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
    AUTHENTICATION = "authentication"
    RESOURCE_NOT_FOUND = "resource_not_found"
    STORE = "store"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logs and responses."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    post_id: str | None = None


class BlogError(Exception):
    """Base exception for all blog errors."""

    has_body: bool = True

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
                "context": {"post_id": self.context.post_id},
            }
        }


# ─── Client Errors (400-level) ──────────────────────────────────

class InvalidPostIdError(BlogError):
    """Path identifier is not a well-formed post id."""
    def __init__(self, raw_id: str, context: ErrorContext | None = None):
        super().__init__(
            f"'{raw_id}' is not a valid post id",
            "INVALID_POST_ID", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.raw_id = raw_id


class InvalidPageError(BlogError):
    """Requested page is not an integer of 1 or more."""
    def __init__(self, page: int | str, context: ErrorContext | None = None):
        super().__init__(
            f"Page must be an integer of 1 or greater, got {page!r}",
            "INVALID_PAGE", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.page = page


class NotAuthenticatedError(BlogError):
    """Caller has no logged-in session."""
    has_body = False

    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Login required", "NOT_AUTHENTICATED",
            ErrorCategory.AUTHENTICATION, ErrorSeverity.WARNING, context, 401,
        )


class PostNotFoundError(BlogError):
    """No post stored under the given id."""
    has_body = False

    def __init__(self, post_id: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.post_id = post_id
        super().__init__(
            f"Post '{post_id}' not found",
            "POST_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.INFO, ctx, 404,
        )


# ─── Store Errors (500-level) ───────────────────────────────────

class StoreError(BlogError):
    """Document store operation failed."""
    def __init__(
        self, message: str, operation: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Store {operation} failed: {message}",
            "STORE_ERROR", ErrorCategory.STORE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation
        self.detail = message

    def to_response(self) -> dict:
        response = super().to_response()
        response["error"]["detail"] = self.detail
        response["error"]["operation"] = self.operation
        return response
