"""
Interface-level errors.

These never reach the application layer: a request that fails binding
is answered before any use case runs.
"""

from typing import Any, Optional, Sequence


class RequestBindingError(Exception):
    """Raised when a request body cannot be decoded into its typed model.

    Attributes:
        code: Response code chosen by the operation's binding policy.
        message: Text for the envelope message.
        detail: Optional diagnostic text for the envelope data.
    """

    def __init__(self, code: str, message: str, detail: Optional[str] = None) -> None:
        self.code = code
        self.message = message
        self.detail = detail
        super().__init__(message)


def describe_errors(errors: Sequence[dict[str, Any]]) -> str:
    """Flatten pydantic error dicts into ``"loc: msg; loc: msg"``."""
    parts = []
    for error in errors:
        location = ".".join(str(part) for part in error.get("loc", ()))
        message = error.get("msg", "invalid value")
        parts.append(f"{location}: {message}" if location else message)
    return "; ".join(parts)
