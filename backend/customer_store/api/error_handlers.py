"""Error Handlers - global exception handlers mapping failures to the response envelope.

Invariants:
    - CustomerStoreError -> its own http_status with {message, body: null}
    - RequestValidationError -> 400 "Incorrect data" (body binding failed)
    - Exception (catch-all) -> 500, never leaks internal details
    - Exactly one response per request: handlers raise, they never write and continue

Design Decisions:
    - Three-layer handler: domain (CustomerStoreError), validation (Pydantic), catch-all (Exception)
    - The catch-all is the recovery layer: a crashing handler still yields a JSON envelope
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from customer_store.core.errors import CustomerStoreError
from customer_store.core.messages import INCORRECT_DATA, UNEXPECTED_ERROR

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_store_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_store_error_handler(app: FastAPI) -> None:
    """Register domain/infrastructure error handler."""

    @app.exception_handler(CustomerStoreError)
    async def store_error_handler(request: Request, exc: CustomerStoreError):
        """Handle all store domain/infrastructure errors."""
        logger.error(
            f"CustomerStoreError: {exc.message}",
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
        """Handle body binding errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {_summarize(exc)}",
            extra={"error_code": "BINDING_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": INCORRECT_DATA, "body": None},
        )


def internal_error_response() -> JSONResponse:
    """500 envelope shared by the catch-all handler and the request middleware."""
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": UNEXPECTED_ERROR, "body": None},
    )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all - never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
        )
        return internal_error_response()


def _summarize(exc: RequestValidationError) -> list[str]:
    return [
        f"{'.'.join(str(loc) for loc in e['loc'])}: {e['msg']}"
        for e in exc.errors()
    ]
