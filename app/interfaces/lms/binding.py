"""
Request binding for LMS routes.

Decodes the raw body into its typed schema before any use case runs.
Each route declares a binding policy that fixes the code and message
shape of its binding failures; all of them answer 400.
"""

from dataclasses import dataclass
from typing import Any, Callable, Optional

from pydantic import TypeAdapter, ValidationError
from starlette.requests import Request

from app.shared.errors.codes import INVALID_PARAMS, INVALID_REQUEST, INVALID_REQUEST_BODY
from app.shared.errors.exceptions import RequestBindingError, describe_errors


@dataclass(frozen=True)
class BindingPolicy:
    """How a route reports a body it could not bind.

    Attributes:
        code: Response code of the failure.
        message_prefix: Prepended to the decode error text.
        fixed_message: Replaces the message; the error text moves to data.
    """

    code: str
    message_prefix: str = ""
    fixed_message: Optional[str] = None

    def error_for(self, detail: str) -> RequestBindingError:
        """Build the binding error for a decode failure."""
        if self.fixed_message is not None:
            return RequestBindingError(self.code, self.fixed_message, detail)
        return RequestBindingError(self.code, self.message_prefix + detail)


PARAMS_POLICY = BindingPolicy(code=INVALID_PARAMS)
BODY_POLICY = BindingPolicy(
    code=INVALID_REQUEST_BODY, fixed_message="Invalid request body format."
)
REQUEST_POLICY = BindingPolicy(
    code=INVALID_REQUEST, message_prefix="Invalid request data: "
)


def decode_payload(raw: bytes, adapter: TypeAdapter, policy: BindingPolicy) -> Any:
    """Decode and validate a JSON body.

    Args:
        raw: The request body as received.
        adapter: Validator for the target schema.
        policy: Failure reporting policy of the route.

    Returns:
        The fully validated model (or list of models).

    Raises:
        RequestBindingError: On malformed JSON, wrong types or missing fields.
    """
    try:
        return adapter.validate_json(raw)
    except ValidationError as exc:
        raise policy.error_for(describe_errors(exc.errors())) from exc


def bind_body(schema: Any, policy: BindingPolicy) -> Callable:
    """Build a FastAPI dependency that binds the request body to ``schema``."""
    adapter = TypeAdapter(schema)

    async def dependency(request: Request) -> Any:
        return decode_payload(await request.body(), adapter, policy)

    return dependency
