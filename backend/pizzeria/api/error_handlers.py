"""Error Handlers — global exception handlers for the Pizzeria API.

Invariants:
    - PizzeriaError → structured JSON with its own http_status
      (referential / dependency / field errors 400, not-found 404)
    - RequestValidationError → 400 with field-level error details
    - Exception (catch-all) → 500, never leaks internal details

Design Decisions:
    - Three-layer handler: domain (PizzeriaError), validation (Pydantic), catch-all (Exception)
    - Validation failures answer 400 (not FastAPI's default 422): clients of the
      API treat every rejected body the same way
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from pizzeria.core.errors import PizzeriaError, ErrorSeverity

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_pizzeria_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_pizzeria_error_handler(app: FastAPI) -> None:
    """Register domain error handler."""

    @app.exception_handler(PizzeriaError)
    async def pizzeria_error_handler(request: Request, exc: PizzeriaError):
        """Handle all store and lookup errors."""
        log = logger.error if exc.http_status >= 500 else logger.warning
        log(
            f"PizzeriaError: {exc.message}",
            extra={
                "error_code": exc.code, "path": request.url.path,
                "entity": exc.context.entity, "entity_id": exc.context.entity_id,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                    "category": "internal",
                    "severity": ErrorSeverity.CRITICAL.value,
                },
            },
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build structured validation error response."""
    details = [
        {
            "field": ".".join(str(loc) for loc in e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]
    return {
        "error": {
            "code": "VALIDATION_ERROR",
            "message": "Invalid request data",
            "category": "validation",
            "severity": ErrorSeverity.ERROR.value,
            "details": details,
        },
        "errors": [f"{d['field'].split('.')[-1]}: {d['message']}" for d in details],
    }
