"""Error Hierarchy: typed, categorized exceptions for every API failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - to_response() always produces {"error": <message>}
    - Store and identity-provider errors carry the upstream message verbatim

Design Decisions:
    - Single hierarchy with SiteApiError base: one global handler maps all of them
    - ErrorContext as dataclass: observability fields travel with the error, not the logger
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
    AUTHENTICATION = "authentication"
    AUTHORIZATION = "authorization"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    DATABASE = "database"
    EXTERNAL_API = "external_api"
    CONFIGURATION = "configuration"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    user_id: str | None = None
    table: str | None = None
    row_id: str | None = None
    debug_info: dict[str, Any] | None = None


class SiteApiError(Exception):
    """Base exception for all API errors."""

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
        """Convert to the REST error envelope."""
        return {"error": self.message}

    def log_extra(self) -> dict:
        """Fields surfaced by the JSON log formatter."""
        return {
            "error_code": self.code,
            "user_id": self.context.user_id,
            "table": self.context.table,
            "row_id": self.context.row_id,
        }


# ─── Access Errors (401/403) ────────────────────────────────────

class UnauthenticatedError(SiteApiError):
    """No bearer token, or the identity provider rejected it."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "UNAUTHENTICATED", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 401,
        )


class ForbiddenError(SiteApiError):
    """Identity is valid but lacks the admin role."""
    def __init__(
        self, message: str = "Forbidden", context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "FORBIDDEN", ErrorCategory.AUTHORIZATION,
            ErrorSeverity.WARNING, context, 403,
        )


# ─── Domain Errors (404/409) ────────────────────────────────────

class ResourceNotFoundError(SiteApiError):
    """Requested row does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.row_id = resource_id
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.INFO, ctx, 404,
        )
        self.resource_type = resource_type


class SlotUnavailableError(SiteApiError):
    """Meeting slot was claimed by another request."""
    def __init__(self, slot_id: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext(table="meeting_slots")
        ctx.row_id = slot_id
        super().__init__(
            "Meeting slot is already booked",
            "SLOT_UNAVAILABLE", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, ctx, 409,
        )


# ─── Infrastructure Errors (500) ────────────────────────────────

class StoreError(SiteApiError):
    """Managed data store operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            message, "STORE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation


class IdentityProviderError(SiteApiError):
    """Identity provider was unreachable or answered unexpectedly."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "IDENTITY_PROVIDER_ERROR", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.CRITICAL, context, 500,
        )


class ConfigError(SiteApiError):
    """Required environment variable missing (raised at first use)."""
    def __init__(self, variable: str):
        super().__init__(
            f"Missing {variable}", "CONFIG_ERROR", ErrorCategory.CONFIGURATION,
            ErrorSeverity.CRITICAL, None, 500,
        )
        self.variable = variable
