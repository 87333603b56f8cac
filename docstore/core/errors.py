"""Error Hierarchy — typed, categorized exceptions for docstore failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - error code is logged as the error_code extra before the error is raised
    - "Not found" is never an error: lookups return None
    - Missing arguments are programming errors, so MissingArgumentError is also a TypeError

Design Decisions:
    - Single hierarchy with DocStoreError base: callers catch one type
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and caller handling."""
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    operation: str | None = None


class DocStoreError(Exception):
    """Base exception for all docstore errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()


# ─── Programming Errors ─────────────────────────────────────────

class MissingArgumentError(DocStoreError, TypeError):
    """A required argument was None."""
    def __init__(self, argument: str, operation: str):
        super().__init__(
            f"{operation}() requires a {argument}, got None",
            "MISSING_ARGUMENT", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, ErrorContext(operation=operation),
        )
        self.argument = argument
