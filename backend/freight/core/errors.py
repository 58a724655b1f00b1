"""Error Hierarchy — typed, categorized exceptions for failures at the I/O boundary.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Raised only where IO or a backend can fail (store, bcrypt, config, token decoding)
    - to_response() produces the REST envelope; message never carries driver details

Design Decisions:
    - Expected results (conflict, not found, bad credentials) are Outcome values
      (core/outcome.py), not exceptions
    - ErrorContext as dataclass: timestamp captured when the error is raised
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
    AUTHENTICATION = "authentication"
    DATABASE = "database"
    CONFIGURATION = "configuration"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """When the error happened; extend with request context as needed."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class FreightError(Exception):
    """Base exception for all Freight API errors."""

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
        """Convert to the standard {success, message, data} envelope."""
        return {
            "success": False,
            "message": self.message,
            "data": None,
            "error": {
                "code": self.code,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
            },
        }


class TokenInvalidError(FreightError):
    """Bearer token missing, malformed, expired or signed with another key."""
    def __init__(self, reason: str, context: ErrorContext | None = None):
        super().__init__(
            "Invalid or expired token.",
            "TOKEN_INVALID", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 401,
        )
        self.reason = reason


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(FreightError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation


class PasswordHashingError(FreightError):
    """Hashing backend produced no usable hash."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "PASSWORD_HASHING_ERROR", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context, 500,
        )


class ConfigurationError(FreightError):
    """Required configuration missing at startup."""
    def __init__(self, setting: str, context: ErrorContext | None = None):
        super().__init__(
            f"Missing required setting: {setting}",
            "CONFIGURATION_ERROR", ErrorCategory.CONFIGURATION,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.setting = setting
