"""Error Handlers — global exception handlers for the forum API.

Invariants:
    - ForumError → its own http_status with {"message": ...}
    - RequestValidationError → 400 with a message naming every offending field
    - Exception (catch-all) → 500, never leaks internal details
    - Every failure body has exactly one key: message

Design Decisions:
    - Three-layer handler: domain (ForumError), validation (pydantic), catch-all (Exception)
    - Kept out of main.py so the app module stays a list of registrations
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from forum.core.errors import ForumError, ErrorSeverity

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_forum_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_forum_error_handler(app: FastAPI) -> None:
    """Register forum domain/infrastructure error handler."""

    @app.exception_handler(ForumError)
    async def forum_error_handler(request: Request, exc: ForumError):
        """Handle all forum domain/infrastructure errors."""
        log = (
            logger.error if exc.severity == ErrorSeverity.CRITICAL
            else logger.warning
        )
        log(
            f"ForumError: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "method": request.method,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle pydantic validation errors."""
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
            content={"message": "An unexpected error occurred"},
        )


def _format_location(loc: tuple) -> str:
    """("body", "firstName") → "firstName"; a bare ("body",) → "body"."""
    parts = [str(p) for p in loc if p != "body"] or ["body"]
    return ".".join(parts)


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Flatten pydantic errors into one human-readable message."""
    details = "; ".join(
        f"{_format_location(e['loc'])}: {e['msg']}" for e in exc.errors()
    )
    return {"message": f"Validation failed: {details}"}
