"""
User-facing copy for the auth screen.

Every lookup is total: unknown locales fall back to Korean, unknown error
codes fall back to a generic string that carries the raw code.
"""

from typing import Dict, Union

from AuthScreen.core.client.models import AuthErrorCode, ValidationErrorKind
from AuthScreen.core.client.utils.constants import DEFAULT_LOCALE, MIN_PASSWORD_LENGTH
from AuthScreen.core.client.utils.exceptions import ProviderError

CATALOGS: Dict[str, Dict[str, str]] = {
    "ko": {
        # Provider errors
        "error.INVALID_EMAIL": "이메일 형식이 올바르지 않습니다.",
        "error.EMAIL_IN_USE": "이미 사용 중인 이메일입니다.",
        "error.WEAK_PASSWORD": "비밀번호가 너무 약합니다. (최소 6자)",
        "error.WRONG_PASSWORD": "비밀번호가 올바르지 않습니다.",
        "error.USER_NOT_FOUND": "등록되지 않은 이메일입니다.",
        "error.TOO_MANY_REQUESTS": "너무 많은 요청이 발생했습니다. 잠시 후 다시 시도해주세요.",
        "error.NETWORK_FAILURE": "네트워크 연결을 확인해주세요.",
        "error.fallback": "오류가 발생했습니다: {code}",
        "error.unexpected": "알 수 없는 오류가 발생했습니다.",
        # Validation
        "validation.EMPTY_EMAIL": "이메일을 입력해주세요.",
        "validation.EMPTY_PASSWORD": "비밀번호를 입력해주세요.",
        "validation.MISMATCH": "비밀번호가 일치하지 않습니다.",
        "validation.TOO_SHORT": "비밀번호는 최소 {min_length}자 이상이어야 합니다.",
        # Status
        "register.cancelled": "회원가입이 취소되었습니다.",
        "register.success": "회원가입이 완료되었습니다!",
        "login.cancelled": "로그인이 취소되었습니다.",
        "login.success": "로그인 성공!",
        "init.failed": "인증 서비스 초기화에 실패했습니다.",
        "init.pending": "인증 서비스를 준비하는 중입니다. 잠시 후 다시 시도해주세요.",
        "busy": "요청을 처리하는 중입니다.",
    },
    "en": {
        "error.INVALID_EMAIL": "The email address is badly formatted.",
        "error.EMAIL_IN_USE": "This email is already in use.",
        "error.WEAK_PASSWORD": "The password is too weak. (at least 6 characters)",
        "error.WRONG_PASSWORD": "The password is incorrect.",
        "error.USER_NOT_FOUND": "No account is registered with this email.",
        "error.TOO_MANY_REQUESTS": "Too many requests. Please try again later.",
        "error.NETWORK_FAILURE": "Please check your network connection.",
        "error.fallback": "An error occurred: {code}",
        "error.unexpected": "An unknown error occurred.",
        "validation.EMPTY_EMAIL": "Please enter your email.",
        "validation.EMPTY_PASSWORD": "Please enter your password.",
        "validation.MISMATCH": "Passwords do not match.",
        "validation.TOO_SHORT": "Password must be at least {min_length} characters.",
        "register.cancelled": "Registration was cancelled.",
        "register.success": "Registration complete!",
        "login.cancelled": "Login was cancelled.",
        "login.success": "Login successful!",
        "init.failed": "Failed to initialize the identity service.",
        "init.pending": "The identity service is still starting. Please try again shortly.",
        "busy": "A request is already in progress.",
    },
}


def _catalog(locale: str) -> Dict[str, str]:
    return CATALOGS.get((locale or "").lower(), CATALOGS[DEFAULT_LOCALE])


def text(key: str, locale: str = DEFAULT_LOCALE) -> str:
    """Look up a status string; missing keys return the key itself."""
    return _catalog(locale).get(key, key)


def error_message(code: Union[AuthErrorCode, str, int], locale: str = DEFAULT_LOCALE) -> str:
    """
    Translate a provider error code into display text.

    Args:
        code: An AuthErrorCode, or any raw provider code
        locale: Catalog to use

    Returns:
        The matching message, or the fallback message naming ``code``
    """
    catalog = _catalog(locale)
    if isinstance(code, AuthErrorCode):
        message = catalog.get(f"error.{code.name}")
        if message is not None:
            return message
        code = code.name
    return catalog["error.fallback"].format(code=code)


def describe_error(exc: BaseException, locale: str = DEFAULT_LOCALE) -> str:
    """Display text for an exception raised by a provider call."""
    if isinstance(exc, ProviderError):
        if exc.code is AuthErrorCode.UNKNOWN:
            return error_message(exc.raw_code, locale)
        return error_message(exc.code, locale)
    return _catalog(locale)["error.unexpected"]


def validation_message(kind: ValidationErrorKind, locale: str = DEFAULT_LOCALE,
                       min_length: int = MIN_PASSWORD_LENGTH) -> str:
    """Display text for a failed form check."""
    return _catalog(locale)[f"validation.{kind.name}"].format(min_length=min_length)


__all__ = ['CATALOGS', 'text', 'error_message', 'describe_error', 'validation_message']
