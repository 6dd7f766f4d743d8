"""
Session Service

Looks up the visitor's session on the identity service by forwarding the
inbound request's cookies to ``GET {base}/session``. Every failure mode
degrades to an anonymous visitor (None); nothing is raised to the caller.
"""

import logging

import httpx
from pydantic import ValidationError

from storefront.config import settings
from storefront.exceptions import IdentityServiceError
from storefront.schemas.session import SessionPayload

logger = logging.getLogger(__name__)

SESSION_PATH = "/session"
LOGIN_PATH = "/auth/github/login"


class SessionService:
    """Client for the identity service's session endpoint."""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = (settings.api_base_url if base_url is None else base_url).rstrip("/")
        self.timeout = settings.identity_timeout_seconds if timeout is None else timeout
        self.transport = transport

    @property
    def enabled(self) -> bool:
        return bool(self.base_url)

    @property
    def login_url(self) -> str:
        """Login entry point on the identity service (never called here)."""
        return f"{self.base_url}{LOGIN_PATH}"

    async def fetch_session(self, cookie_header: str | None = None) -> SessionPayload | None:
        """
        Fetch the current session, forwarding the visitor's cookies.

        Args:
            cookie_header: Raw ``Cookie`` header of the inbound request

        Returns:
            SessionPayload for a 2xx response, otherwise None
        """
        if not self.enabled:
            return None

        try:
            return await self._request_session(cookie_header)
        except IdentityServiceError as e:
            logger.warning(f"Failed to load session: {e.message}", extra=e.details)
            return None

    async def _request_session(self, cookie_header: str | None) -> SessionPayload | None:
        headers = {"Accept": "application/json"}
        if cookie_header:
            headers["Cookie"] = cookie_header

        try:
            async with httpx.AsyncClient(transport=self.transport, timeout=self.timeout) as client:
                response = await client.get(f"{self.base_url}{SESSION_PATH}", headers=headers)
        except httpx.TimeoutException as e:
            raise IdentityServiceError("Request timed out") from e
        except httpx.RequestError as e:
            raise IdentityServiceError(f"Request error: {str(e)}") from e

        if not response.is_success:
            # 401 is the normal answer for anonymous visitors
            logger.info(f"Identity service returned {response.status_code}, treating visitor as anonymous")
            return None

        try:
            body = response.json()
        except ValueError as e:
            # JSONDecodeError and UnicodeDecodeError
            raise IdentityServiceError("Malformed session body", status_code=response.status_code) from e

        try:
            return SessionPayload.model_validate(body)
        except ValidationError as e:
            raise IdentityServiceError(
                f"Unexpected session shape: {e.error_count()} errors", status_code=response.status_code
            ) from e
