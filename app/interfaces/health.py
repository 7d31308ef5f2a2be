"""
Health check router.

Provides a simple liveness endpoint. It does not call Moodle;
use POST /status for that. Returns the gateway status and version.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.core.config import Settings
from app.interfaces.lms.dependencies import get_settings
from app.shared.envelope import ApiResponse, envelope_response, success

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=ApiResponse,
    summary="Health check",
    description="Returns gateway health status and version.",
)
def health_check(settings: Settings = Depends(get_settings)) -> JSONResponse:
    """Return current gateway health status."""
    return envelope_response(
        200, success({"status": "ok", "version": settings.version})
    )
