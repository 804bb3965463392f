"""Error Hierarchy - typed, categorized exceptions for all registry failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are raised synchronously to the immediate caller, never retried
    - to_response() produces a REST-style envelope; to_result() produces the tagged
      result dict returned by service handlers
    - Bulk operations surface the first element-level failure unchanged

Design Decisions:
    - Single hierarchy with VocabularyError base: one except clause at every service edge
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any

from vocabulary.core.document_schema import FieldViolation


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
    CONFLICT = "conflict"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    collection: str | None = None
    doc_id: str | None = None
    entity_name: str | None = None
    debug_info: dict[str, Any] | None = None


class VocabularyError(Exception):
    """Base exception for all registry errors."""

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
                    "collection": self.context.collection,
                    "doc_id": self.context.doc_id,
                    "entity_name": self.context.entity_name,
                },
            }
        }

    def to_result(self) -> dict:
        """Convert to the tagged failure dict returned by service handlers."""
        return {
            "status": "error",
            "error_code": self.code,
            "message": self.message,
        }


# --- Domain Errors (400-level) -----------------------------------------------

class NotFoundError(VocabularyError):
    """An id or name does not resolve to exactly one document."""
    def __init__(
        self, collection: str, key: str, matches: int = 0,
        context: ErrorContext | None = None,
    ):
        if matches > 1:
            message = (
                f"{collection} '{key}' matched {matches} documents, "
                f"expected exactly one"
            )
        else:
            message = f"{collection} '{key}' not found"
        ctx = context or ErrorContext()
        ctx.collection = collection
        super().__init__(
            message, "NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )
        self.collection = collection
        self.key = key
        self.matches = matches


class DuplicateNameError(VocabularyError):
    """define() called with a name already used in the collection."""
    def __init__(
        self, collection: str, name: str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.collection = collection
        ctx.entity_name = name
        super().__init__(
            f"{name} is previously defined in another {collection} entry",
            "DUPLICATE_NAME", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, ctx, 409,
        )
        self.collection = collection
        self.name = name


class InvalidIdentifierError(VocabularyError):
    """A value is not a well-formed document identifier."""
    def __init__(self, value: object, context: ErrorContext | None = None):
        super().__init__(
            f"'{value}' is not a valid document identifier",
            "INVALID_IDENTIFIER", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.value = value


class ValidationError(VocabularyError):
    """Schema validator rejected the shape or types of a document."""
    def __init__(
        self, collection: str, violations: list[FieldViolation],
        context: ErrorContext | None = None,
    ):
        details = "; ".join(f"{v.field}: {v.message}" for v in violations)
        ctx = context or ErrorContext()
        ctx.collection = collection
        super().__init__(
            f"Invalid {collection} document: {details}",
            "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx, 400,
        )
        self.collection = collection
        self.violations = violations

    def to_response(self) -> dict:
        response = super().to_response()
        response["error"]["details"] = [v.to_dict() for v in self.violations]
        return response

    def to_result(self) -> dict:
        result = super().to_result()
        result["violations"] = [v.to_dict() for v in self.violations]
        return result


# --- Infrastructure Errors (500-level) ---------------------------------------

class DatabaseError(VocabularyError):
    """Database operation failed."""
    def __init__(
        self, message: str, operation: str, context: ErrorContext | None = None,
        code: str = "DATABASE_ERROR", http_status: int = 503,
    ):
        super().__init__(
            f"Database {operation} failed: {message}",
            code, ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, http_status,
        )
        self.operation = operation


class IntegrityViolationError(DatabaseError):
    """A store-level constraint (unique index) rejected the write."""
    def __init__(self, operation: str, context: ErrorContext | None = None):
        super().__init__(
            "Integrity constraint violated", operation, context,
            code="INTEGRITY_VIOLATION", http_status=409,
        )
