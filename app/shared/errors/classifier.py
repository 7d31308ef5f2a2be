"""
Error classifier.

Maps any failure surfaced while serving a request to an HTTP status,
a response code and a message. The first matching rule wins:

1. UserNotFoundError -> 404 DATA_NOT_FOUND with the error's message.
2. A structured error (MoodleServiceError, OperationFailedError)
   -> 400 with its error_code and message, verbatim, even if empty.
3. Anything else -> 500 INTERNAL_SERVER_ERROR with a generic message.

Classification is pure: the error is neither mutated nor logged here.
"""

from dataclasses import dataclass
from typing import Optional

from app.domain.lms.errors import (
    MoodleServiceError,
    OperationFailedError,
    UserNotFoundError,
)
from app.shared.errors.codes import DATA_NOT_FOUND, INTERNAL_SERVER_ERROR

HTTP_400 = 400
HTTP_404 = 404
HTTP_500 = 500

INTERNAL_ERROR_MESSAGE = "An internal error occurred"


@dataclass(frozen=True)
class ErrorClassification:
    """Outcome of classifying one error.

    Attributes:
        status_code: HTTP status to answer with.
        code: Response code for the envelope.
        message: Envelope message.
        detail: Diagnostic text for the envelope data, if any.
    """

    status_code: int
    code: str
    message: str
    detail: Optional[str] = None


def classify(error: BaseException, expose_detail: bool = False) -> ErrorClassification:
    """Classify an error raised while serving a request.

    Args:
        error: The failure to classify.
        expose_detail: Put the raw text of unclassified errors in ``detail``.

    Returns:
        The status, code and message to report.
    """
    match error:
        case UserNotFoundError():
            return ErrorClassification(HTTP_404, DATA_NOT_FOUND, error.message)
        case MoodleServiceError() | OperationFailedError():
            return ErrorClassification(HTTP_400, error.error_code, error.message)
        case _:
            return ErrorClassification(
                HTTP_500,
                INTERNAL_SERVER_ERROR,
                INTERNAL_ERROR_MESSAGE,
                str(error) if expose_detail else None,
            )
