"""
Tests for the LMS domain errors and the error classifier.

No external dependencies or IO required.
"""

import pytest

from app.domain.lms.errors import (
    DownstreamUnavailableError,
    LmsDomainError,
    MoodleServiceError,
    RoleAssignFailedError,
    UserNotFoundError,
    UserSyncFailedError,
)
from app.shared.errors.classifier import classify


class TestDomainErrors:
    """Tests for domain error classes."""

    def test_user_not_found_message(self) -> None:
        error = UserNotFoundError("email", "missing@x.com")
        assert error.message == "User not found: email=missing@x.com"
        assert str(error) == error.message

    def test_moodle_service_error_keeps_code_and_message(self) -> None:
        error = MoodleServiceError("usernameexists", "Username already exists")
        assert error.error_code == "usernameexists"
        assert error.message == "Username already exists"

    def test_fixed_codes(self) -> None:
        assert UserSyncFailedError("x").error_code == "USER_SYNC_FAILED"
        assert RoleAssignFailedError("x").error_code == "USER_ASSIGN_FAILED"

    def test_all_variants_share_the_base(self) -> None:
        for error in (
            UserNotFoundError("id", "1"),
            MoodleServiceError("c", "m"),
            UserSyncFailedError("m"),
            DownstreamUnavailableError("r"),
        ):
            assert isinstance(error, LmsDomainError)


class TestClassifier:
    """Tests for classification precedence and output."""

    def test_not_found(self) -> None:
        result = classify(UserNotFoundError("email", "missing@x.com"))
        assert (result.status_code, result.code, result.message) == (
            404,
            "DATA_NOT_FOUND",
            "User not found: email=missing@x.com",
        )

    def test_structured_error_verbatim(self) -> None:
        result = classify(MoodleServiceError("X", "Y"))
        assert (result.status_code, result.code, result.message) == (400, "X", "Y")

    def test_empty_code_not_replaced(self) -> None:
        result = classify(MoodleServiceError("", "no code"))
        assert result.status_code == 400
        assert result.code == ""

    def test_fixed_code_operation_failure(self) -> None:
        result = classify(RoleAssignFailedError("Invalid role"))
        assert (result.status_code, result.code) == (400, "USER_ASSIGN_FAILED")

    @pytest.mark.parametrize(
        "error",
        [DownstreamUnavailableError("refused"), ValueError("bad"), KeyError("id")],
    )
    def test_everything_else_is_internal(self, error) -> None:
        result = classify(error)
        assert (result.status_code, result.code) == (500, "INTERNAL_SERVER_ERROR")
        assert result.message == "An internal error occurred"
        assert result.detail is None

    def test_detail_only_when_exposed(self) -> None:
        result = classify(RuntimeError("pool exhausted"), expose_detail=True)
        assert result.detail == "pool exhausted"

    def test_error_left_untouched(self) -> None:
        error = MoodleServiceError("X", "Y")
        classify(error)
        classify(error)
        assert (error.error_code, error.message) == ("X", "Y")
