"""Error Handlers: global exception handlers for the Quotes API.

Invariants:
    - QuotesError → its own to_response() envelope and http_status
    - RequestValidationError → 400 with field-level error details
    - Exception (catch-all) → 500, never leaks internal details
    - Every envelope carries code, message, category, severity and timestamp,
      so clients parse one shape whatever layer rejected the request

Design Decisions:
    - Three-layer handler: domain (QuotesError), validation (Pydantic), catch-all (Exception)
    - 4xx domain errors logged at INFO, 5xx at ERROR: a missed filter is not
      an operational problem
"""

import logging
from datetime import datetime, timezone

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from quotes_api.core.errors import ErrorCategory, ErrorSeverity, QuotesError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_quotes_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def build_error_envelope(
    code: str,
    message: str,
    category: ErrorCategory,
    severity: ErrorSeverity,
    **extra: object,
) -> dict:
    """Envelope for errors raised outside the QuotesError hierarchy."""
    return {
        "error": {
            "code": code,
            "message": message,
            "category": category.value,
            "severity": severity.value,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            **extra,
        },
    }


def _register_quotes_error_handler(app: FastAPI) -> None:

    @app.exception_handler(QuotesError)
    async def quotes_error_handler(request: Request, exc: QuotesError):
        level = logging.ERROR if exc.http_status >= 500 else logging.INFO
        logger.log(
            level,
            f"QuotesError: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "status_code": exc.http_status,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Query parameters that fail type coercion (e.g. count=abc)."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=build_error_envelope(
                "VALIDATION_ERROR",
                "Invalid request parameters",
                ErrorCategory.VALIDATION,
                ErrorSeverity.ERROR,
                details=[
                    {
                        "field": ".".join(str(loc) for loc in e["loc"]),
                        "message": e["msg"],
                        "type": e["type"],
                    }
                    for e in exc.errors()
                ],
            ),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=build_error_envelope(
                "INTERNAL_ERROR",
                "An unexpected error occurred",
                ErrorCategory.INTERNAL,
                ErrorSeverity.CRITICAL,
            ),
        )
