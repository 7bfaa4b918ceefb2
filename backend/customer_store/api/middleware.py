"""Request Logging Middleware - one log line per request, with a request id.

Invariants:
    - Every response carries X-Request-ID (echoed from the request or generated),
      the 500 envelope of a crashed handler included
    - Logged fields: request_id, method, path, status_code, duration_ms
    - request_id_var is set for the whole request, so every log line under it
      carries the same id
    - Runs outermost, ahead of the session dependency

Design Decisions:
    - Starlette BaseHTTPMiddleware over a raw ASGI app: only headers and timing
      are touched, never the body
    - Unhandled exceptions are turned into the 500 envelope here: the app-level
      Exception handler runs outside every user middleware and would lose the
      header and the access line
"""

import logging
import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from customer_store.api.error_handlers import internal_error_response
from customer_store.infrastructure.observability import request_id_var

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log method, path, status and latency of each request."""

    async def dispatch(self, request: Request, call_next) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        token = request_id_var.set(request_id)
        started = time.perf_counter()
        try:
            try:
                response = await call_next(request)
            except Exception as e:
                logger.error(
                    f"Unhandled exception on {request.url.path}: {e}",
                    exc_info=True,
                    extra={
                        "request_id": request_id,
                        "error_code": "INTERNAL_ERROR",
                        "path": request.url.path,
                    },
                )
                response = internal_error_response()
            duration_ms = round((time.perf_counter() - started) * 1000, 2)
            response.headers[REQUEST_ID_HEADER] = request_id
            logger.info(
                f"{request.method} {request.url.path} {response.status_code}",
                extra={
                    "request_id": request_id,
                    "method": request.method,
                    "path": request.url.path,
                    "status_code": response.status_code,
                    "duration_ms": duration_ms,
                },
            )
            return response
        finally:
            request_id_var.reset(token)
