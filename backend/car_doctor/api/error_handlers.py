"""Error Handlers — the single translation boundary from errors to HTTP responses.

Invariants:
    - AuthError → 401 with its fixed legacy body
    - ValidationError → 400 {error, code, message}
    - StorageError → {error: true, message} with status 200 when
      settings.storage_errors_as_ok, else 503
    - RequestValidationError → 400 with field-level details
    - Exception (catch-all) → 500, never leaks internal details

Design Decisions:
    - Storage failures answer 200 by default (legacy contract);
      STORAGE_ERRORS_AS_OK=false switches them to 503
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from car_doctor.config import Settings
from car_doctor.core.errors import (
    AuthError, CarDoctorError, StorageError, ValidationError,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI, settings: Settings) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_auth_error_handler(app)
    _register_storage_error_handler(app, settings.storage_errors_as_ok)
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_auth_error_handler(app: FastAPI) -> None:

    @app.exception_handler(AuthError)
    async def auth_error_handler(request: Request, exc: AuthError):
        logger.warning(
            f"AuthError: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_storage_error_handler(app: FastAPI, as_ok: bool) -> None:

    @app.exception_handler(StorageError)
    async def storage_error_handler(request: Request, exc: StorageError):
        logger.error(
            f"StorageError: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "operation": exc.operation,
                "collection": exc.collection,
            },
        )
        return JSONResponse(
            status_code=status.HTTP_200_OK if as_ok else exc.http_status,
            content=exc.to_response(),
        )


def _register_domain_error_handler(app: FastAPI) -> None:
    """ValidationError and any other CarDoctorError."""

    @app.exception_handler(CarDoctorError)
    async def car_doctor_error_handler(request: Request, exc: CarDoctorError):
        log = logger.warning if isinstance(exc, ValidationError) else logger.error
        log(
            f"CarDoctorError: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
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
                "error": True,
                "code": "INTERNAL_ERROR",
                "message": "An unexpected error occurred",
            },
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build structured validation error response."""
    return {
        "error": True,
        "code": "VALIDATION_ERROR",
        "message": "Invalid request data",
        "details": [
            {
                "field": ".".join(str(loc) for loc in e["loc"]),
                "message": e["msg"],
                "type": e["type"],
            }
            for e in exc.errors()
        ],
    }
