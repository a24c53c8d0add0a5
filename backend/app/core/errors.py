"""Error Hierarchy — typed, categorized exceptions for every activity/participation failure.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - All errors are 400/404-level and terminal for the request (no partial effects)
    - to_response() produces the public envelope {"erro": <message>}
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with EquilibrioError base: one FastAPI handler catches all (ADR: uniform error shape)
    - ErrorContext as dataclass: observability extras without coupling to logging framework
    - Portuguese messages: the front end displays `erro` verbatim
"""

from dataclasses import dataclass, field, replace
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
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Identifiers involved in the failure, surfaced as log extras."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    activity_id: int | None = None
    user_id: int | None = None


class EquilibrioError(Exception):
    """Base exception for all domain errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 400,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the public REST error body."""
        return {"erro": self.message}

    def log_extra(self) -> dict:
        """Extras for structured logging (see infrastructure/observability.py)."""
        return {
            "error_code": self.code,
            "activity_id": self.context.activity_id,
            "user_id": self.context.user_id,
        }


# ─── Domain Errors ──────────────────────────────────────────────

class ActivityNotFoundError(EquilibrioError):
    """No activity has the requested id."""
    def __init__(self, activity_id: int, context: ErrorContext | None = None):
        ctx = replace(context or ErrorContext(), activity_id=activity_id)
        super().__init__(
            "Atividade não encontrada",
            "ACTIVITY_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, ctx, 404,
        )
        self.activity_id = activity_id


class AlreadyJoinedError(EquilibrioError):
    """The (user, activity) participation already exists."""
    def __init__(
        self, user_id: int, activity_id: int, context: ErrorContext | None = None,
    ):
        ctx = replace(
            context or ErrorContext(), user_id=user_id, activity_id=activity_id,
        )
        super().__init__(
            "Usuário já participa desta atividade",
            "ALREADY_JOINED", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, ctx, 400,
        )


class NotParticipatingError(EquilibrioError):
    """Leave requested for a (user, activity) pair that does not exist."""
    def __init__(
        self, user_id: int, activity_id: int, context: ErrorContext | None = None,
    ):
        ctx = replace(
            context or ErrorContext(), user_id=user_id, activity_id=activity_id,
        )
        super().__init__(
            "Usuário não participa desta atividade",
            "NOT_PARTICIPATING", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, ctx, 404,
        )


class InvalidInputError(EquilibrioError):
    """A required identifier is missing or falsy."""
    def __init__(self, field_name: str, context: ErrorContext | None = None):
        super().__init__(
            f"{field_name} é obrigatório",
            "INVALID_INPUT", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.field = field_name
