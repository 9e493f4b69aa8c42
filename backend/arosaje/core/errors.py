"""Error Hierarchy — typed, categorized exceptions for all Arosaje failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - to_response() produces the REST error envelope
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with ArosajeError base: one FastAPI handler catches all
    - ErrorContext as dataclass: observability data without coupling to logging
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    BUSINESS_RULE = "business_rule"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logs and the response envelope."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    resource_type: str | None = None
    resource_id: str | None = None


class ArosajeError(Exception):
    """Base exception for all Arosaje errors."""

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
                    "resource_type": self.context.resource_type,
                    "resource_id": self.context.resource_id,
                },
            }
        }


# ─── Not Found (404) ────────────────────────────────────────────

class ResourceNotFoundError(ArosajeError):
    """Requested resource does not exist."""
    def __init__(
        self,
        resource_type: str,
        resource_id: int | str,
        code: str = "RESOURCE_NOT_FOUND",
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.resource_type = resource_type
        ctx.resource_id = str(resource_id)
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            code, ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )
        self.resource_id = resource_id


class GuardianshipNotFoundError(ResourceNotFoundError):
    def __init__(self, guardianship_id: int, context: ErrorContext | None = None):
        super().__init__(
            "Guardianship", guardianship_id, "GUARDIANSHIP_NOT_FOUND", context,
        )


class UserNotFoundError(ResourceNotFoundError):
    def __init__(self, user_id: int, context: ErrorContext | None = None):
        super().__init__("User", user_id, "USER_NOT_FOUND", context)


class PlantNotFoundError(ResourceNotFoundError):
    def __init__(self, plant_id: int, context: ErrorContext | None = None):
        super().__init__("Plant", plant_id, "PLANT_NOT_FOUND", context)


# ─── Domain Errors (400-level) ──────────────────────────────────

class GuardianshipIdMismatchError(ArosajeError):
    """Body id of an update does not match the id in the path."""
    def __init__(
        self, path_id: int, body_id: int, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Guardianship id in body ({body_id}) does not match path id ({path_id})",
            "ID_MISMATCH", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.path_id = path_id
        self.body_id = body_id


class InvalidCarePeriodError(ArosajeError):
    """Care period ends before it starts."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "INVALID_CARE_PERIOD", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )


class SelfGuardianshipError(ArosajeError):
    """Guardian is the owner of the plant."""
    def __init__(
        self, user_id: int, plant_id: int, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"User '{user_id}' owns plant '{plant_id}' and cannot be its guardian",
            "SELF_GUARDIANSHIP", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.ERROR, context, 400,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(ArosajeError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
