"""
Request context middleware.

For every request:
- Propagates the caller's X-Request-ID or assigns a new one
- Binds the id to the logging context for the lifetime of the request
- Adds secure default headers to the response
- Logs method, path, status and latency (never bodies)

Unexpected errors are rendered here as a classified envelope, so error
responses carry the same headers and access-log line as any other.
"""

import logging
import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from app.shared.errors.handlers import classified_response
from app.shared.logging import request_id_var

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"

SECURE_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "strict-origin-when-cross-origin",
    "Content-Security-Policy": "default-src 'self'",
}


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Tags each request with an id and records its outcome."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        request.state.request_id = request_id
        token = request_id_var.set(request_id)
        start = time.monotonic()

        try:
            try:
                response = await call_next(request)
            except Exception as exc:
                logger.exception("Unexpected error: %s", type(exc).__name__)
                response = classified_response(request, exc)

            elapsed_ms = (time.monotonic() - start) * 1000
            response.headers[REQUEST_ID_HEADER] = request_id
            for header_name, header_value in SECURE_HEADERS.items():
                response.headers[header_name] = header_value

            logger.info(
                "%s %s -> %d (%.1f ms)",
                request.method,
                request.url.path,
                response.status_code,
                elapsed_ms,
            )
            return response
        finally:
            request_id_var.reset(token)
