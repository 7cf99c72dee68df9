"""
Tests for the user-facing message catalog.
"""

import pytest

from AuthScreen.core.client.auth.messages import (
    CATALOGS,
    describe_error,
    error_message,
    text,
    validation_message,
)
from AuthScreen.core.client.models import AuthErrorCode, ValidationErrorKind
from AuthScreen.core.client.utils.exceptions import ProviderError


class TestErrorMessage:
    """Tests for provider error translation."""

    @pytest.mark.parametrize("code, expected", [
        (AuthErrorCode.INVALID_EMAIL, "이메일 형식이 올바르지 않습니다."),
        (AuthErrorCode.EMAIL_IN_USE, "이미 사용 중인 이메일입니다."),
        (AuthErrorCode.WEAK_PASSWORD, "비밀번호가 너무 약합니다. (최소 6자)"),
        (AuthErrorCode.WRONG_PASSWORD, "비밀번호가 올바르지 않습니다."),
        (AuthErrorCode.USER_NOT_FOUND, "등록되지 않은 이메일입니다."),
        (AuthErrorCode.TOO_MANY_REQUESTS, "너무 많은 요청이 발생했습니다. 잠시 후 다시 시도해주세요."),
        (AuthErrorCode.NETWORK_FAILURE, "네트워크 연결을 확인해주세요."),
    ])
    def test_known_codes(self, code, expected):
        assert error_message(code) == expected

    def test_unknown_enum_member_falls_back_with_name(self):
        assert error_message(AuthErrorCode.UNKNOWN) == "오류가 발생했습니다: UNKNOWN"

    @pytest.mark.parametrize("raw", ["OPERATION_NOT_ALLOWED", 17999, "USER_DISABLED"])
    def test_raw_codes_fall_back_with_code(self, raw):
        message = error_message(raw)
        assert message.startswith("오류가 발생했습니다:")
        assert str(raw) in message

    def test_every_code_has_a_message_in_every_locale(self):
        for locale in CATALOGS:
            for code in AuthErrorCode:
                assert error_message(code, locale)

    def test_english_catalog(self):
        assert error_message(AuthErrorCode.WRONG_PASSWORD, "en") == "The password is incorrect."
        assert error_message("QUOTA_EXCEEDED", "en") == "An error occurred: QUOTA_EXCEEDED"

    def test_unknown_locale_uses_default(self):
        assert error_message(AuthErrorCode.WRONG_PASSWORD, "fr") == "비밀번호가 올바르지 않습니다."
        assert text("login.success", None) == "로그인 성공!"


class TestDescribeError:
    """Tests for exception descriptions."""

    def test_provider_error_uses_code(self):
        exc = ProviderError(AuthErrorCode.USER_NOT_FOUND, "EMAIL_NOT_FOUND")
        assert describe_error(exc) == "등록되지 않은 이메일입니다."

    def test_unknown_provider_error_reports_raw_code(self):
        exc = ProviderError(AuthErrorCode.UNKNOWN, "USER_DISABLED")
        assert describe_error(exc) == "오류가 발생했습니다: USER_DISABLED"

    def test_other_exceptions_are_generic(self):
        assert describe_error(RuntimeError("boom")) == "알 수 없는 오류가 발생했습니다."
        assert describe_error(ValueError("x"), "en") == "An unknown error occurred."

    def test_provider_error_defaults_raw_code_to_name(self):
        exc = ProviderError(AuthErrorCode.NETWORK_FAILURE)
        assert exc.raw_code == "NETWORK_FAILURE"
        assert "NETWORK_FAILURE" in str(exc)


class TestValidationMessage:
    """Tests for form check messages."""

    @pytest.mark.parametrize("kind, expected", [
        (ValidationErrorKind.EMPTY_EMAIL, "이메일을 입력해주세요."),
        (ValidationErrorKind.EMPTY_PASSWORD, "비밀번호를 입력해주세요."),
        (ValidationErrorKind.MISMATCH, "비밀번호가 일치하지 않습니다."),
        (ValidationErrorKind.TOO_SHORT, "비밀번호는 최소 6자 이상이어야 합니다."),
    ])
    def test_korean_messages(self, kind, expected):
        assert validation_message(kind) == expected

    def test_minimum_length_is_interpolated(self):
        assert validation_message(ValidationErrorKind.TOO_SHORT, "en", min_length=8) == \
            "Password must be at least 8 characters."

    def test_missing_status_key_returns_key(self):
        assert text("no.such.key") == "no.such.key"
