"""Error Hierarchy — stable error codes for the validator and typed exceptions for the shell.

Invariants:
    - RouteErrorCode values are part of the caller contract: never renumber, never reuse
    - Core returns RouteErrorCode values; only the shell raises RouteRegistryError
    - Domain errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - to_response() produces REST envelope; no internal details leaked in user-facing messages

Design Decisions:
    - IntEnum for codes: compares equal to the wire integer, name doubles as the error kind
    - Single hierarchy with RouteRegistryError base: FastAPI global handler catches all
      (ADR: uniform error shape)
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from datetime import datetime, timezone


class RouteErrorCode(IntEnum):
    """Caller-visible error kinds. Gaps (106, 108-110, 112) are reserved."""
    NOT_AUTHORIZED = 100
    INVALID_HASH = 101
    INVALID_DESCRIPTION = 102
    INVALID_SAFETY_LEVEL = 103
    INVALID_GEOLOCATION = 104
    ROUTE_ALREADY_EXISTS = 105
    ROUTE_NOT_FOUND = 107
    INVALID_BOUNDARIES = 111
    INVALID_UPDATE_HASH = 113
    MAX_ROUTES_EXCEEDED = 114
    INVALID_ROUTE_TYPE = 115
    INVALID_DISTANCE = 116
    INVALID_ELEVATION = 117
    INVALID_WEATHER_CONDITION = 118
    INVALID_TRAFFIC_STATUS = 119

    @property
    def kind(self) -> str:
        """CamelCase kind name, e.g. INVALID_HASH -> InvalidHash."""
        return "".join(part.capitalize() for part in self.name.split("_"))


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    AUTHORIZATION = "authorization"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    STORAGE = "storage"
    INTERNAL = "internal"


_CODE_CATEGORIES: dict[RouteErrorCode, tuple[ErrorCategory, int]] = {
    RouteErrorCode.NOT_AUTHORIZED: (ErrorCategory.AUTHORIZATION, 403),
    RouteErrorCode.ROUTE_NOT_FOUND: (ErrorCategory.RESOURCE_NOT_FOUND, 404),
    RouteErrorCode.ROUTE_ALREADY_EXISTS: (ErrorCategory.CONFLICT, 409),
    RouteErrorCode.MAX_ROUTES_EXCEEDED: (ErrorCategory.CONFLICT, 409),
}


def categorize(code: RouteErrorCode) -> tuple[ErrorCategory, int]:
    """Map an error code to (category, http_status). Field rules default to 400."""
    return _CODE_CATEGORIES.get(code, (ErrorCategory.VALIDATION, 400))


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    route_id: int | None = None
    caller: str | None = None


class RouteRegistryError(Exception):
    """Base exception for all route registry errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
        numeric_code: int | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status
        self.numeric_code = numeric_code

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "numeric_code": self.numeric_code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "route_id": self.context.route_id,
                    "caller": self.context.caller,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class RouteRejectedError(RouteRegistryError):
    """A register/update/get call returned a failed Result."""
    def __init__(self, error: RouteErrorCode, context: ErrorContext | None = None):
        category, http_status = categorize(error)
        super().__init__(
            f"Route operation rejected: {error.kind}",
            error.kind, category, ErrorSeverity.ERROR, context, http_status,
            numeric_code=int(error),
        )
        self.error = error


# ─── Infrastructure Errors (500-level) ──────────────────────────

class StorageError(RouteRegistryError):
    """Route store backend operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Storage {operation} failed: {message}",
            "STORAGE_ERROR", ErrorCategory.STORAGE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
