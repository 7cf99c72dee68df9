"""
Identity provider clients for the AuthScreen application.

The provider owns accounts, password checks and token issuance. This module
only forwards email/password requests to its REST endpoints and translates
the provider's error strings into AuthErrorCode values.
"""

import asyncio
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

import aiohttp

from AuthScreen.core.client.models import AuthErrorCode, Session
from AuthScreen.core.client.utils import API_TIMEOUT_SECONDS, DEFAULT_IDENTITY_BASE_URL
from AuthScreen.core.client.utils.constants import API_CONNECT_TIMEOUT_SECONDS
from AuthScreen.core.client.utils.exceptions import ProviderError
from AuthScreen.core.logging import get_logger

logger = get_logger(__name__)

# Provider error strings -> AuthErrorCode
PROVIDER_ERROR_CODES: Dict[str, AuthErrorCode] = {
    "INVALID_EMAIL": AuthErrorCode.INVALID_EMAIL,
    "MISSING_EMAIL": AuthErrorCode.INVALID_EMAIL,
    "EMAIL_EXISTS": AuthErrorCode.EMAIL_IN_USE,
    "WEAK_PASSWORD": AuthErrorCode.WEAK_PASSWORD,
    "INVALID_PASSWORD": AuthErrorCode.WRONG_PASSWORD,
    "INVALID_LOGIN_CREDENTIALS": AuthErrorCode.WRONG_PASSWORD,
    "EMAIL_NOT_FOUND": AuthErrorCode.USER_NOT_FOUND,
    "TOO_MANY_ATTEMPTS_TRY_LATER": AuthErrorCode.TOO_MANY_REQUESTS,
}


def parse_provider_error(payload: Any) -> ProviderError:
    """
    Build a ProviderError from an error response body.

    The provider reports errors as ``{"error": {"message": "CODE : detail"}}``.
    Unrecognised codes map to UNKNOWN and keep the raw string.
    """
    raw = ""
    if isinstance(payload, dict):
        error = payload.get("error")
        if isinstance(error, dict):
            raw = str(error.get("message") or "")
        elif error:
            raw = str(error)

    raw = raw.split(" : ", 1)[0].strip() or "UNKNOWN"
    code = PROVIDER_ERROR_CODES.get(raw, AuthErrorCode.UNKNOWN)
    return ProviderError(code, raw, {"response": payload})


class IdentityProvider(ABC):
    """Async email/password identity service used by the auth flow."""

    async def initialize(self) -> None:
        """Prepare the provider; raise ProviderError when unusable."""

    @abstractmethod
    async def create_account(self, email: str, password: str) -> Session:
        """Create an account and return its signed-in session."""

    @abstractmethod
    async def authenticate(self, email: str, password: str) -> Session:
        """Sign in with email and password."""

    @abstractmethod
    def sign_out(self) -> None:
        """Forget the provider's local credentials."""

    async def close(self) -> None:
        """Release network resources."""


class IdentityToolkitClient(IdentityProvider):
    """
    REST client for an Identity Toolkit compatible provider.

    Owns one aiohttp.ClientSession, created lazily on the event loop that
    runs the requests and released by close().
    """

    def __init__(self, api_key: str, base_url: str = DEFAULT_IDENTITY_BASE_URL,
                 timeout: float = API_TIMEOUT_SECONDS):
        """
        Initialize the client.

        Args:
            api_key: Provider project API key
            base_url: REST root, e.g. https://identitytoolkit.googleapis.com/v1
            timeout: Total request timeout in seconds
        """
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.current: Optional[Session] = None
        self._session: Optional[aiohttp.ClientSession] = None
        self._lock: Optional[asyncio.Lock] = None

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create the aiohttp session."""
        if self._lock is None:
            self._lock = asyncio.Lock()
        async with self._lock:
            if self._session is None or self._session.closed:
                timeout = aiohttp.ClientTimeout(
                    total=self.timeout,
                    connect=min(self.timeout, API_CONNECT_TIMEOUT_SECONDS),
                )
                self._session = aiohttp.ClientSession(timeout=timeout)
        return self._session

    async def _post(self, endpoint: str, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        POST to ``{base_url}/accounts:{endpoint}``.

        Returns:
            dict: Decoded success body

        Raises:
            ProviderError: On provider rejections and transport failures
        """
        url = f"{self.base_url}/accounts:{endpoint}"
        try:
            session = await self._get_session()
            async with session.post(url, params={"key": self.api_key}, json=data) as response:
                try:
                    body = await response.json(content_type=None)
                except ValueError:
                    body = None
                if response.status >= 400 or not isinstance(body, dict):
                    error = parse_provider_error(body)
                    if error.code is AuthErrorCode.UNKNOWN and body is None:
                        error = ProviderError(AuthErrorCode.UNKNOWN, f"HTTP_{response.status}")
                    raise error
                return body
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.warning("Identity request %s failed: %s", endpoint, e)
            raise ProviderError(AuthErrorCode.NETWORK_FAILURE, "NETWORK_REQUEST_FAILED",
                                {"error": str(e)}) from e

    @staticmethod
    def _session_from(body: Dict[str, Any], email: str) -> Session:
        return Session(
            user_id=body.get("localId", ""),
            email=body.get("email") or email,
            id_token=body.get("idToken", ""),
            refresh_token=body.get("refreshToken", ""),
        )

    async def initialize(self) -> None:
        if not self.api_key:
            raise ProviderError(AuthErrorCode.UNKNOWN, "MISSING_API_KEY")
        await self._get_session()
        logger.info("Identity provider ready at %s", self.base_url)

    async def create_account(self, email: str, password: str) -> Session:
        body = await self._post("signUp", {
            "email": email,
            "password": password,
            "returnSecureToken": True,
        })
        self.current = self._session_from(body, email)
        return self.current

    async def authenticate(self, email: str, password: str) -> Session:
        body = await self._post("signInWithPassword", {
            "email": email,
            "password": password,
            "returnSecureToken": True,
        })
        self.current = self._session_from(body, email)
        return self.current

    def sign_out(self) -> None:
        self.current = None

    async def close(self) -> None:
        """Close the aiohttp session."""
        if self._session and not self._session.closed:
            await self._session.close()
        self._session = None


__all__ = [
    "IdentityProvider",
    "IdentityToolkitClient",
    "PROVIDER_ERROR_CODES",
    "parse_provider_error",
]
