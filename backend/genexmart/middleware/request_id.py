"""
GenexMart Backend: Request ID Middleware
===========================================

What:  Tags every request with a short correlation ID.
How:   Reuses the caller's X-Request-ID header or mints an 8-character one,
       keeps it in a ContextVar for the duration of the request and echoes
       it back on the response.
Who:   Read by RequestLoggingMiddleware, the exception handlers and the
       RequestIDLogFilter attached to the root log handler.
"""

import logging
import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

REQUEST_ID_HEADER = "X-Request-ID"

# Coroutine-local: concurrent requests on one event loop each see their own ID
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


class RequestIDLogFilter(logging.Filter):
    """Adds `request_id` to every log record ("-" outside a request)."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_var.get("") or "-"
        return True


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Assigns, stores and echoes the request correlation ID."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        # Why accept the caller's ID: a till that retries can correlate both attempts
        rid = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex[:8]

        token = request_id_var.set(rid)
        # Why both: ContextVar for loggers, request.state for exception handlers
        request.state.request_id = rid
        try:
            response = await call_next(request)
        finally:
            request_id_var.reset(token)

        response.headers[REQUEST_ID_HEADER] = rid
        return response
