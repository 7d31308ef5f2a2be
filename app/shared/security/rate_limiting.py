"""
Rate limiting configuration and setup.

Uses slowapi to enforce a default per-client limit on every route.
Rejections are rendered as response envelopes like every other outcome.
"""

from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.requests import Request
from starlette.responses import JSONResponse

from app.core.config import Settings
from app.shared.envelope import envelope_response, failure
from app.shared.errors.codes import RATE_LIMIT_EXCEEDED

HTTP_429 = 429


def build_limiter(settings: Settings) -> Limiter:
    """Create the limiter for one application instance.

    Args:
        settings: Supplies the default limit and the on/off switch.

    Returns:
        A limiter keyed on the client address, with in-memory counters.
    """
    return Limiter(
        key_func=get_remote_address,
        default_limits=[settings.rate_limit_default],
        enabled=settings.rate_limit_enabled,
    )


def rate_limit_exceeded_handler(
    _request: Request, exc: RateLimitExceeded
) -> JSONResponse:
    """Handle rate limit exceeded errors with an envelope.

    Kept synchronous: SlowAPIMiddleware calls it directly.

    Args:
        _request: The incoming HTTP request.
        exc: The rate limit exceeded exception.

    Returns:
        A 429 envelope naming the limit that was hit.
    """
    return envelope_response(
        HTTP_429, failure(RATE_LIMIT_EXCEEDED, "Rate limit exceeded", str(exc.detail))
    )
