"""Error Hierarchy — typed, categorized exceptions for all Pizzeria failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - to_response() produces the REST envelope used by every error handler
    - No internal details leaked in user-facing messages
    - "Not found" is NOT raised by the store (it returns None/False);
      ResourceNotFoundError exists for the HTTP layer only

Design Decisions:
    - Single hierarchy with PizzeriaError base: FastAPI global handler catches all
    - ErrorContext as dataclass: rich observability without coupling to logging framework
    - Store messages are stable strings: API clients match on them
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone

from pizzeria.core.domain_types import EntityKind


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    REFERENTIAL_INTEGRITY = "referential_integrity"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    entity: str | None = None
    entity_id: str | None = None
    debug_info: dict[str, Any] | None = None


class PizzeriaError(Exception):
    """Base exception for all Pizzeria errors."""

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
                    "entity": self.context.entity,
                    "entity_id": self.context.entity_id,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class ReferentialIntegrityError(PizzeriaError):
    """create() referenced a foreign entity that does not exist."""
    def __init__(
        self, message: str, target: EntityKind, missing_id: str,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.entity = ctx.entity or target.value
        ctx.entity_id = ctx.entity_id or missing_id
        super().__init__(
            message, "REFERENTIAL_INTEGRITY", ErrorCategory.REFERENTIAL_INTEGRITY,
            ErrorSeverity.ERROR, ctx, 400,
        )
        self.target = target
        self.missing_id = missing_id


class DependencyInUseError(PizzeriaError):
    """delete() blocked because another collection still references the target."""
    def __init__(
        self, message: str, kind: EntityKind, entity_id: str,
        dependents: list[str] | None = None, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.entity = ctx.entity or kind.value
        ctx.entity_id = ctx.entity_id or entity_id
        super().__init__(
            message, "DEPENDENCY_IN_USE", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, ctx, 400,
        )
        self.kind = kind
        self.entity_id = entity_id
        self.dependents = dependents or []


class InvalidFieldError(PizzeriaError):
    """create() or update() named a store-assigned or unknown field."""
    def __init__(
        self, kind: EntityKind, field_name: str, reason: str,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.entity = ctx.entity or kind.value
        super().__init__(
            f"Cannot set field '{field_name}' on {kind.value}: {reason}",
            "INVALID_FIELD", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx, 400,
        )
        self.field = field_name


class ResourceNotFoundError(PizzeriaError):
    """Requested resource does not exist."""
    def __init__(
        self, kind: EntityKind, resource_id: str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.entity = ctx.entity or kind.value
        ctx.entity_id = ctx.entity_id or resource_id
        super().__init__(
            f"{kind.label} not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class IdGenerationError(PizzeriaError):
    """Id generator kept returning ids already taken in the collection."""
    def __init__(self, kind: EntityKind, attempts: int, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.entity = ctx.entity or kind.value
        super().__init__(
            f"No free {kind.value} id after {attempts} attempts",
            "ID_GENERATION_FAILED", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, ctx, 500,
        )
