"""Error Handlers: the single boundary translating failures into the error envelope.

Invariants:
    - Every failure response is {"error": {"message": ...}}
    - PlaceReviewsError → its http_status; InternalError subclasses return a generic message
    - RequestValidationError → 400 with a field summary
    - Starlette HTTPException (unknown route, wrong method) → its status, same envelope
    - Exception (catch-all) → 500, never leaks internal details

Design Decisions:
    - Full detail (code, category, context, traceback) goes to the server log only
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from place_reviews.core.errors import (
    PlaceReviewsError, ErrorSeverity, GENERIC_INTERNAL_MESSAGE,
)

logger = logging.getLogger(__name__)


def error_body(message: str) -> dict:
    return {"error": {"message": message}}


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_error_handler(app)
    _register_generic_error_handler(app)


def _register_domain_error_handler(app: FastAPI) -> None:

    @app.exception_handler(PlaceReviewsError)
    async def domain_error_handler(request: Request, exc: PlaceReviewsError):
        """Handle all domain/infrastructure errors."""
        extra = {
            "error_code": exc.code,
            "path": request.url.path,
            "user_id": exc.context.user_id,
            "place_id": exc.context.place_id,
        }
        if exc.severity == ErrorSeverity.CRITICAL:
            logger.error(
                f"{type(exc).__name__}: {exc.message}",
                extra=extra, exc_info=exc,
            )
        else:
            logger.warning(f"{type(exc).__name__}: {exc.message}", extra=extra)
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:

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
            content=error_body(_summarize_validation_errors(exc)),
        )


def _register_http_error_handler(app: FastAPI) -> None:

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        message = exc.detail if isinstance(exc.detail, str) else "Request failed"
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(message),
            headers=getattr(exc, "headers", None),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_body(GENERIC_INTERNAL_MESSAGE),
        )


def _summarize_validation_errors(exc: RequestValidationError) -> str:
    """'Invalid request data: body.rating: Input should be a valid integer; ...'"""
    parts = [
        f"{'.'.join(str(loc) for loc in e['loc'])}: {e['msg']}"
        for e in exc.errors()
    ]
    if not parts:
        return "Invalid request data"
    return "Invalid request data: " + "; ".join(parts)
