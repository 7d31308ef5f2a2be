"""
Response envelope shared by every endpoint.

Every outcome, success or failure, is rendered as
``{"code": ..., "message": ..., "data": ...}``. There is no separate
error schema. The ``data`` key is omitted when there is nothing to carry.
"""

from typing import Any, Optional

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from app.shared.errors.codes import OK

OK_MESSAGE = "OK"


class ApiResponse(BaseModel):
    """The single response shape of the gateway.

    Attributes:
        code: Stable machine-readable outcome code.
        message: Human-readable text.
        data: Payload on success, or diagnostic detail on some failures.
    """

    code: str = Field(..., description="Stable machine-readable outcome code")
    message: str
    data: Optional[Any] = None


def success(data: Any = None, message: str = OK_MESSAGE) -> ApiResponse:
    """Build a success envelope."""
    return ApiResponse(code=OK, message=message, data=data)


def failure(code: str, message: str, data: Any = None) -> ApiResponse:
    """Build a failure envelope."""
    return ApiResponse(code=code, message=message, data=data)


def envelope_response(status_code: int, envelope: ApiResponse) -> JSONResponse:
    """Render an envelope as a JSON response.

    Only a missing top-level ``data`` is dropped; None values nested
    inside the payload are kept as null.
    """
    content: dict[str, Any] = {"code": envelope.code, "message": envelope.message}
    if envelope.data is not None:
        content["data"] = jsonable_encoder(envelope.data)
    return JSONResponse(status_code=status_code, content=content)
