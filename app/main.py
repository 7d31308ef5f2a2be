"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (health and the LMS context)
- Error handlers (centralized error-to-envelope mapping)
- Request context middleware and rate limiting
- Logging configuration

No business logic belongs here.
"""

from typing import Optional

from fastapi import FastAPI
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from app.core.config import Settings, settings
from app.interfaces.health import router as health_router
from app.interfaces.lms.router import router as lms_router
from app.shared.errors.handlers import register_error_handlers
from app.shared.logging import configure_logging
from app.shared.middleware import RequestContextMiddleware
from app.shared.security.rate_limiting import build_limiter, rate_limit_exceeded_handler

API_PREFIX = "/api/v1"


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers, error handlers, and middleware.
    This is the composition root of the application.

    Args:
        app_settings: Settings to build with. Defaults to the environment.

    Returns:
        A fully configured FastAPI application instance.
    """
    app_settings = app_settings or settings
    configure_logging(
        level=app_settings.log_level,
        http_client_level=app_settings.http_client_log_level,
    )

    app = FastAPI(
        title=app_settings.project_name,
        version=app_settings.version,
        docs_url="/docs" if app_settings.debug else None,
        redoc_url="/redoc" if app_settings.debug else None,
    )
    app.state.settings = app_settings

    # --- Rate Limiting ---
    app.state.limiter = build_limiter(app_settings)
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)

    # --- Request Context (outermost) ---
    app.add_middleware(RequestContextMiddleware)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router, prefix=API_PREFIX)
    app.include_router(lms_router, prefix=API_PREFIX)

    return app


app = create_app()
