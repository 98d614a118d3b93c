"""Error Hierarchy: typed, categorized exceptions for every floormap failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors are 400-level; infrastructure errors are 500-level
    - to_response() produces the REST envelope consumed by api/error_handlers.py
    - Authentication failures never say which credential field was wrong

Design Decisions:
    - Single hierarchy with FloorMapError base: one global handler catches all
    - ResourceNotFoundError subclasses per entity so callers can tell which hop
      of the map → floor → pin chain was missing
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
    AUTHORIZATION = "authorization"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logs and the response envelope."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    resource_type: str | None = None
    resource_id: str | None = None


class FloorMapError(Exception):
    """Base exception for all floormap errors."""

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


# ─── Domain Errors (400-level) ──────────────────────────────────

class ValidationError(FloorMapError):
    """Malformed or missing input. Never retried; the client must resubmit."""
    def __init__(
        self, message: str, field: str | None = None, context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.field = field


class SelfProtectionError(FloorMapError):
    """An admin tried to change their own role or delete their own account."""
    def __init__(self, action: str, context: ErrorContext | None = None):
        super().__init__(
            f"Administrators cannot {action} their own account",
            "SELF_PROTECTION", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.action = action


class ResourceNotFoundError(FloorMapError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.resource_type = resource_type
        ctx.resource_id = resource_id
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )


class UserNotFoundError(ResourceNotFoundError):
    def __init__(self, user_id: str, context: ErrorContext | None = None):
        super().__init__("User", user_id, context)


class MapNotFoundError(ResourceNotFoundError):
    def __init__(self, map_id: str, context: ErrorContext | None = None):
        super().__init__("Map", map_id, context)


class FloorNotFoundError(ResourceNotFoundError):
    def __init__(self, floor_id: str, context: ErrorContext | None = None):
        super().__init__("Floor", floor_id, context)


class PinNotFoundError(ResourceNotFoundError):
    def __init__(self, pin_id: str, context: ErrorContext | None = None):
        super().__init__("Pin", pin_id, context)


class EditorNotFoundError(ResourceNotFoundError):
    def __init__(self, editor_id: str, context: ErrorContext | None = None):
        super().__init__("PublicEditor", editor_id, context)


class ForbiddenError(FloorMapError):
    """Requester was resolved but lacks permission for the action."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "FORBIDDEN", ErrorCategory.AUTHORIZATION,
            ErrorSeverity.WARNING, context, 403,
        )


class MapNotPubliclyEditableError(ForbiddenError):
    """Public-editor registration on a map that does not allow public editing."""
    def __init__(self, map_id: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.resource_type = "Map"
        ctx.resource_id = map_id
        super().__init__("This map does not allow public editing", ctx)
        self.code = "MAP_NOT_PUBLICLY_EDITABLE"


class CurrentPasswordMismatchError(FloorMapError):
    """Password change submitted with a wrong current password."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Current password is incorrect",
            "CURRENT_PASSWORD_MISMATCH", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )


# ─── Authentication Errors (401) ────────────────────────────────

class CredentialMismatchError(FloorMapError):
    """Email or password wrong. Deliberately does not say which."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Invalid email or password",
            "CREDENTIAL_MISMATCH", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 401,
        )


class InvalidSessionError(FloorMapError):
    """Bearer token missing, malformed, badly signed or expired."""
    def __init__(self, message: str = "Invalid or expired session", context: ErrorContext | None = None):
        super().__init__(
            message, "INVALID_SESSION", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 401,
        )


class InvalidTokenError(FloorMapError):
    """Public editor token does not match the stored token."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Invalid editor token",
            "INVALID_EDITOR_TOKEN", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 401,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class HashingError(FloorMapError):
    """Password hashing library failed."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            f"Password hashing failed: {message}",
            "HASHING_ERROR", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context, 500,
        )


class SigningError(FloorMapError):
    """Session token could not be signed with the configured key material."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            f"Session signing failed: {message}",
            "SIGNING_ERROR", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context, 500,
        )


class DatabaseError(FloorMapError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
