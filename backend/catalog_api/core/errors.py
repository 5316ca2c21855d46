"""Error Hierarchy — typed, categorized exceptions for all catalog failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - to_response() produces the {success: false, message} envelope
    - Domain errors are 400/404/405; storage errors are 500

Design Decisions:
    - Single hierarchy with CatalogError base: one FastAPI handler catches all
    - DatabaseError carries the storage layer's text so clients see what failed
"""

from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    METHOD_NOT_ALLOWED = "method_not_allowed"
    DATABASE = "database"
    INTERNAL = "internal"


class CatalogError(Exception):
    """Base exception for all catalog errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the standard error envelope."""
        return {"success": False, "message": self.message}


# ─── Domain Errors (400-level) ──────────────────────────────────

class ValidationFailedError(CatalogError):
    """Request is missing a required field or carries an invalid one."""
    def __init__(self, message: str, field: str | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, 400,
        )
        self.field = field


class ResourceNotFoundError(CatalogError):
    """Requested track or release does not exist."""
    def __init__(self, resource_type: str, resource_id: str):
        super().__init__(
            f"{resource_type} not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class MethodNotAllowedError(CatalogError):
    """Path exists but does not support the request method."""
    def __init__(self, method: str, path: str):
        super().__init__(
            "Method not allowed",
            "METHOD_NOT_ALLOWED", ErrorCategory.METHOD_NOT_ALLOWED,
            ErrorSeverity.WARNING, 405,
        )
        self.method = method
        self.path = path


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(CatalogError):
    """Database operation failed."""
    def __init__(self, action: str, detail: str):
        super().__init__(
            f"{action}: {detail}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, 500,
        )
        self.action = action
        self.detail = detail


class StoredDataError(CatalogError):
    """Persisted data could not be interpreted (e.g. malformed track length)."""
    def __init__(self, action: str, detail: str):
        super().__init__(
            f"{action}: {detail}",
            "STORED_DATA_ERROR", ErrorCategory.INTERNAL,
            ErrorSeverity.ERROR, 500,
        )
