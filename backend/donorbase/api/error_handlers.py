"""Error Handlers - map every failure to the DonorbaseError JSON envelope.

Invariants:
    - DonorbaseError → its own status and to_response() body
    - RequestValidationError → 400 InputValidationError envelope plus field details
    - Exception (catch-all) → 500 INTERNAL_ERROR envelope, no internal details
    - 4xx logged as warning, 5xx as error, always with the request path

Design Decisions:
    - Malformed bodies and unexpected crashes are wrapped in DonorbaseError
      subclasses so clients see a single response shape
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from donorbase.core.errors import (
    DonorbaseError,
    ErrorCategory,
    ErrorSeverity,
    InputValidationError,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    app.add_exception_handler(DonorbaseError, handle_donorbase_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)


async def handle_donorbase_error(request: Request, exc: DonorbaseError) -> JSONResponse:
    log = logger.warning if exc.http_status < 500 else logger.error
    log(
        exc.message,
        extra={
            "error_code": exc.code,
            "path": request.url.path,
            "entity": exc.context.entity,
            "record_id": exc.context.record_id,
        },
    )
    return _respond(exc)


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError,
) -> JSONResponse:
    details = [
        {
            "field": ".".join(str(loc) for loc in e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]
    error = InputValidationError("Invalid request data", details[0]["field"] if details else "body")
    logger.warning(
        f"Request validation failed: {[d['field'] for d in details]}",
        extra={"error_code": error.code, "path": request.url.path},
    )
    return _respond(error, details=details)


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all: the client only learns that something went wrong."""
    logger.error(
        f"Unhandled {type(exc).__name__}: {exc}",
        exc_info=exc,
        extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
    )
    error = DonorbaseError(
        "An unexpected error occurred", "INTERNAL_ERROR",
        ErrorCategory.INTERNAL, ErrorSeverity.CRITICAL,
    )
    return _respond(error)


def _respond(error: DonorbaseError, details: list[dict] | None = None) -> JSONResponse:
    content = error.to_response()
    if details is not None:
        content["error"]["details"] = details
    return JSONResponse(status_code=error.http_status, content=content)
