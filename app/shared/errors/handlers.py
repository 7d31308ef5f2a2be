"""
Centralized error handlers for FastAPI.

Every failure leaves a route as an exception and is written here,
once, as a response envelope. Domain errors go through the classifier;
binding failures carry their own code. No stack traces are sent to clients.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.domain.lms.errors import LmsDomainError
from app.shared.envelope import envelope_response, failure
from app.shared.errors.classifier import HTTP_400, classify
from app.shared.errors.codes import INVALID_REQUEST
from app.shared.errors.exceptions import RequestBindingError, describe_errors

logger = logging.getLogger(__name__)

INVALID_REQUEST_PREFIX = "Invalid request data: "


def classified_response(request: Request, exc: Exception) -> JSONResponse:
    """Classify an error and render it as an envelope."""
    settings = getattr(request.app.state, "settings", None)
    expose = bool(settings and settings.expose_internal_errors)
    result = classify(exc, expose_detail=expose)

    if result.status_code >= 500:
        logger.error(
            "%s %s failed: %s", request.method, request.url.path, type(exc).__name__
        )
    else:
        logger.warning(
            "%s %s -> %d %s", request.method, request.url.path,
            result.status_code, result.code,
        )
    return envelope_response(
        result.status_code, failure(result.code, result.message, result.detail)
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register all error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(RequestBindingError)
    async def handle_binding(
        request: Request, exc: RequestBindingError
    ) -> JSONResponse:
        """Handle request bodies that failed decoding or validation."""
        logger.warning("Binding failed on %s: %s", request.url.path, exc.code)
        return envelope_response(HTTP_400, failure(exc.code, exc.message, exc.detail))

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle query or path parameters FastAPI rejected itself."""
        logger.warning("Parameter validation failed on %s", request.url.path)
        return envelope_response(
            HTTP_400,
            failure(
                INVALID_REQUEST,
                INVALID_REQUEST_PREFIX + describe_errors(exc.errors()),
            ),
        )

    @app.exception_handler(LmsDomainError)
    async def handle_lms_domain(request: Request, exc: LmsDomainError) -> JSONResponse:
        """Handle every LMS domain error through the classifier."""
        return classified_response(request, exc)

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals by default."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return classified_response(request, exc)
