"""
Domain-specific errors for the LMS bounded context.

Every failure surfaced by the downstream-calling layer is one of these
variants. They are mapped to response envelopes at the interface layer.
No framework imports allowed.

Variants:
    - UserNotFoundError: the queried user does not exist downstream.
    - MoodleServiceError: structured failure with a Moodle error code.
    - OperationFailedError: fixed-code failure of a whole operation.
    - DownstreamUnavailableError: opaque transport or decoding failure.
"""


class LmsDomainError(Exception):
    """Base error for all LMS domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class UserNotFoundError(LmsDomainError):
    """Raised when no Moodle user matches a lookup."""

    def __init__(self, field: str, value: str) -> None:
        super().__init__(f"User not found: {field}={value}")
        self.field = field
        self.value = value


class MoodleServiceError(LmsDomainError):
    """Raised when Moodle answers with a structured exception.

    The error code and message are carried verbatim so callers can
    discriminate on Moodle's own codes (invalidparameter, usernameexists...).
    """

    def __init__(self, error_code: str, message: str) -> None:
        super().__init__(message)
        self.error_code = error_code


class OperationFailedError(LmsDomainError):
    """Base for operations that report every failure under one fixed code."""

    error_code = "OPERATION_FAILED"

    def __init__(self, message: str) -> None:
        super().__init__(message)


class UserSyncFailedError(OperationFailedError):
    """Raised when a user sync fails for any reason."""

    error_code = "USER_SYNC_FAILED"


class RoleAssignFailedError(OperationFailedError):
    """Raised when a role assignment fails for any reason."""

    error_code = "USER_ASSIGN_FAILED"


class DownstreamUnavailableError(LmsDomainError):
    """Raised when Moodle cannot be reached or returns an unreadable answer."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Moodle request failed: {reason}")
        self.reason = reason
