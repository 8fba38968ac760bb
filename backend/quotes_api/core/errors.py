"""Error Hierarchy: typed, categorized exceptions for every Quotes API failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Criteria errors (400-level) are recoverable; data errors (500-level) are critical
    - "No quotes matched" is NOT raised by the core: matchers return NO_MATCH,
      the route layer converts it into NoQuotesFoundError
    - to_response() produces the REST envelope; no internal details leaked

Design Decisions:
    - Single hierarchy with QuotesError base: one FastAPI global handler catches all
    - ErrorContext as dataclass: observability data without coupling to logging
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATA_UNAVAILABLE = "data_unavailable"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    parameter: str | None = None
    invalid_values: list[str] | None = None


class QuotesError(Exception):
    """Base exception for all Quotes API errors."""

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
                    "parameter": self.context.parameter,
                    "invalid_values": self.context.invalid_values,
                },
            }
        }


# ─── Criteria Errors (400-level) ────────────────────────────────

class InvalidCriteriaError(QuotesError):
    """Request criteria are malformed or out of range."""
    def __init__(
        self,
        message: str,
        parameter: str,
        code: str = "INVALID_CRITERIA",
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.parameter = parameter
        super().__init__(
            message, code, ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx, 400,
        )
        self.parameter = parameter


class CountOutOfRangeError(InvalidCriteriaError):
    """count/limit outside its allowed range."""
    def __init__(self, parameter: str, maximum: int, context: ErrorContext | None = None):
        super().__init__(
            f"{parameter.capitalize()} must be a number between 1 and {maximum}.",
            parameter, "COUNT_OUT_OF_RANGE", context,
        )
        self.maximum = maximum


class LengthBoundsError(InvalidCriteriaError):
    """minLength greater than maxLength."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "minLength must be less than or equal to maxLength.",
            "minLength", "INVALID_LENGTH_BOUNDS", context,
        )


class UnknownAuthorError(InvalidCriteriaError):
    """One or more requested authors are not in the authors directory."""
    def __init__(self, authors: list[str], context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.invalid_values = list(authors)
        super().__init__(
            f"Invalid author(s): {', '.join(authors)}",
            "authors", "UNKNOWN_AUTHOR", ctx,
        )
        self.authors = authors


class UnknownTagError(InvalidCriteriaError):
    """One or more requested tags are not in the tags vocabulary."""
    def __init__(self, tags: list[str], context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.invalid_values = list(tags)
        super().__init__(
            f"Invalid tag(s): {', '.join(tags)}",
            "tags", "UNKNOWN_TAG", ctx,
        )
        self.tags = tags


class MalformedEncodingError(InvalidCriteriaError):
    """A percent-encoded request value could not be decoded."""
    def __init__(
        self, value: str, parameter: str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.invalid_values = [value]
        super().__init__(
            f"Malformed percent-encoding in '{value}'",
            parameter, "MALFORMED_ENCODING", ctx,
        )
        self.value = value


class NoQuotesFoundError(QuotesError):
    """Filters produced an empty candidate set (route-level rendering of NO_MATCH)."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "No quotes found matching the criteria.",
            "NO_QUOTES_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.INFO, context, 404,
        )


# ─── Data Errors (500-level) ────────────────────────────────────

class DataUnavailableError(QuotesError):
    """Corpus or auxiliary data file could not be read."""
    def __init__(self, message: str, source: str, context: ErrorContext | None = None):
        super().__init__(
            message, "DATA_UNAVAILABLE", ErrorCategory.DATA_UNAVAILABLE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.source = source
