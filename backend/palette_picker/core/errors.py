"""Error Hierarchy: typed, categorized exceptions for all Palette Picker failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory) and http_status
    - Validation errors are 422, missing resources 404, datastore failures 500
    - to_response() produces the REST envelope {"error": <message>}
    - details carries the structured context logged by the global handler

Design Decisions:
    - Single hierarchy with PalettePickerError base: one global handler catches all
    - Lowercase "error" key on every envelope
"""

from enum import Enum


class ErrorCategory(str, Enum):
    """High-level error categories for routing and logging."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"


class PalettePickerError(Exception):
    """Base exception for all Palette Picker errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        http_status: int = 500,
        details: dict | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.http_status = http_status
        self.details = details or {}

    def to_response(self) -> dict:
        """Convert to the REST error envelope."""
        return {"error": self.message}


# ─── Domain Errors (400-level) ──────────────────────────────────

class BodyValidationError(PalettePickerError):
    """Request body is missing a required property or carries extra ones."""
    def __init__(self, message: str, field: str | None = None):
        super().__init__(
            message, "BODY_VALIDATION_ERROR", ErrorCategory.VALIDATION, 422,
            {"field": field},
        )
        self.field = field


class QueryValidationError(PalettePickerError):
    """Query string parameter is malformed."""
    def __init__(self, message: str, parameter: str):
        super().__init__(
            message, "QUERY_VALIDATION_ERROR", ErrorCategory.VALIDATION, 422,
            {"parameter": parameter},
        )
        self.parameter = parameter


class ResourceNotFoundError(PalettePickerError):
    """Requested row does not exist."""
    def __init__(self, message: str, resource_type: str, resource_id: int):
        super().__init__(
            message, "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND, 404,
            {"resource_type": resource_type, "resource_id": resource_id},
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(PalettePickerError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE, 500,
            {"operation": operation},
        )
        self.operation = operation
