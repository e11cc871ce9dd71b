"""Error Handlers — map every failure to the bookshop error envelope.

Invariants:
    - Every error body is {"error": {code, message, category, severity, timestamp, ...}}
    - BookshopError keeps its own http_status and context ids
    - RequestValidationError → 400 VALIDATION_ERROR with one detail per field
    - Any other exception → 500 INTERNAL_ERROR; the message never carries internals

Design Decisions:
    - 5xx domain errors (corrupt rows, database down) log at error level,
      business-rule rejections at warning
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from bookshop.core.errors import (
    BookshopError, ErrorCategory, ErrorContext, ErrorSeverity,
)
from bookshop.core.wire_format import format_timestamp

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register the domain, validation and catch-all handlers on the app."""
    app.add_exception_handler(BookshopError, _domain_error)
    app.add_exception_handler(RequestValidationError, _validation_error)
    app.add_exception_handler(Exception, _unexpected_error)


async def _domain_error(request: Request, exc: BookshopError) -> JSONResponse:
    log = logger.error if exc.http_status >= 500 else logger.warning
    log(
        f"{request.method} {request.url.path} rejected: {exc.message}",
        extra={
            "error_code": exc.code,
            "item_id": exc.context.item_id,
            "order_id": exc.context.order_id,
            "customer_id": exc.context.customer_id,
        },
    )
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


async def _validation_error(
    request: Request, exc: RequestValidationError,
) -> JSONResponse:
    details = [
        {
            "field": ".".join(str(part) for part in err["loc"]),
            "message": err["msg"],
            "type": err["type"],
        }
        for err in exc.errors()
    ]
    logger.warning(
        f"{request.method} {request.url.path} invalid: "
        f"{', '.join(d['field'] for d in details)}",
        extra={"error_code": "VALIDATION_ERROR"},
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_envelope(
            "VALIDATION_ERROR", "Invalid request data",
            ErrorCategory.VALIDATION, ErrorSeverity.ERROR, details=details,
        ),
    )


async def _unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        f"{request.method} {request.url.path} failed: {exc!r}",
        exc_info=exc,
        extra={"error_code": "INTERNAL_ERROR"},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_envelope(
            "INTERNAL_ERROR", "An unexpected error occurred",
            ErrorCategory.INTERNAL, ErrorSeverity.CRITICAL,
        ),
    )


def _envelope(
    code: str, message: str, category: ErrorCategory, severity: ErrorSeverity,
    **extra,
) -> dict:
    body = {
        "code": code,
        "message": message,
        "category": category.value,
        "severity": severity.value,
        "timestamp": format_timestamp(ErrorContext().timestamp),
    }
    body.update(extra)
    return {"error": body}
