"""Error Hierarchy — typed, categorized exceptions for all ToS API failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors (400-level) are recoverable; server errors (500-level) are critical
    - to_response() produces the REST envelope {"error": {"code", "message"}}
    - No filesystem details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with TosApiError base: FastAPI global handler catches all
      (ADR: uniform error shape)
    - ErrorContext as dataclass: observability data stays on the exception,
      never in the response body
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
    RESOURCE_NOT_FOUND = "resource_not_found"
    STORAGE = "storage"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logging only."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    requested_file: str | None = None
    debug_info: dict[str, Any] | None = None


class TosApiError(Exception):
    """Base exception for all ToS API errors."""

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
            }
        }


# ─── Client Errors (400-level) ──────────────────────────────────

class ResourceNotFoundError(TosApiError):
    """Requested resource does not exist (or is outside the sandbox)."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, context, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


# ─── Server Errors (500-level) ──────────────────────────────────

class DocumentUnreadableError(TosApiError):
    """Document exists inside the sandbox but could not be read."""
    def __init__(self, file: str, reason: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.requested_file = file
        ctx.debug_info = {"reason": reason}
        super().__init__(
            f"File '{file}' could not be read",
            "INTERNAL_ERROR", ErrorCategory.STORAGE,
            ErrorSeverity.CRITICAL, ctx, 500,
        )
        self.reason = reason
