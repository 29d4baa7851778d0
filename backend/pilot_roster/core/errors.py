"""Error Hierarchy: typed, categorized exceptions for every roster failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Caller-visible errors carry the offending field so the UI can place the message
    - Validation errors (400) are raised before any store call
    - to_response() produces the REST envelope; no internal details leak into it

Design Decisions:
    - Single hierarchy rooted at RosterError: one FastAPI handler covers all of it
    - Store uniqueness violations and pre-checks share DuplicateActiveCallsignError
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
    EXTERNAL_API = "external_api"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logs and the response envelope."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    pilot_id: str | None = None
    callsign: str | None = None
    debug_info: dict[str, Any] | None = None


class RosterError(Exception):
    """Base exception for all roster errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
        field: str | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status
        self.field = field

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "field": self.field,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "pilot_id": self.context.pilot_id,
                    "callsign": self.context.callsign,
                },
            }
        }


# ─── Validation Errors (400) ────────────────────────────────────

class RequiredFieldError(RosterError):
    """A mandatory field is missing or blank."""
    def __init__(self, field: str, context: ErrorContext | None = None):
        super().__init__(
            f"{field} is required",
            "REQUIRED_FIELD", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400, field,
        )


class FormatError(RosterError):
    """Callsign does not follow the ASX### grammar."""
    def __init__(
        self, value: str, field: str = "callsign", context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{field} must be ASX followed by 3 digits (e.g. ASX001), got '{value}'",
            "INVALID_FORMAT", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400, field,
        )
        self.value = value


class InvalidValueError(RosterError):
    """Numeric field outside its allowed range."""
    def __init__(self, field: str, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "INVALID_VALUE", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400, field,
        )


class MissingReasonError(RosterError):
    """Suspension requested without a reason."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "A suspension reason is required",
            "MISSING_REASON", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400, "suspension_reason",
        )


# ─── Business Rule Errors (404 / 409) ───────────────────────────

class DuplicateActiveCallsignError(RosterError):
    """Another active pilot already holds this callsign."""
    def __init__(self, callsign: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.callsign = callsign
        super().__init__(
            f"Callsign {callsign} is already in use by an active pilot",
            "DUPLICATE_ACTIVE_CALLSIGN", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, ctx, 409, "callsign",
        )
        self.callsign = callsign


class InvalidStateError(RosterError):
    """Operation not allowed from the pilot's current lifecycle state."""
    def __init__(
        self, message: str, field: str = "suspended", context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "INVALID_STATE", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.ERROR, context, 409, field,
        )


class NotFoundError(RosterError):
    """Operation targets a pilot id that does not exist."""
    def __init__(self, pilot_id: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.pilot_id = pilot_id
        super().__init__(
            f"Pilot '{pilot_id}' not found",
            "PILOT_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404, "id",
        )
        self.pilot_id = pilot_id


# ─── Infrastructure Errors (503) ────────────────────────────────

class TransportError(RosterError):
    """Store or notification endpoint unreachable or rejected the call."""
    def __init__(
        self,
        message: str,
        collaborator: str,
        operation: str,
        context: ErrorContext | None = None,
    ):
        category = (
            ErrorCategory.DATABASE if collaborator == "store"
            else ErrorCategory.EXTERNAL_API
        )
        super().__init__(
            f"{collaborator} {operation} failed: {message}",
            "TRANSPORT_ERROR", category,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.collaborator = collaborator
        self.operation = operation
