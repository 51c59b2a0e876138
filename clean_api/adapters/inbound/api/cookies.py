# clean_api/adapters/inbound/api/cookies.py

"""
Refresh token cookies and the double-submit CSRF guard.

On every issuance the refresh token goes into an HttpOnly cookie and a
fresh CSRF token into a readable cookie with the same lifetime. Refresh
requests must echo the CSRF cookie value in a header.
"""

import logging
import secrets
from typing import Optional

from fastapi import Request, Response

from clean_api.adapters.configuration.config import settings
from clean_api.domain.exceptions import UnauthorizedException
from clean_api.shared.utils.duration import parse_duration

# Configure logger
logger = logging.getLogger(__name__)

INVALID_CSRF_TOKEN = "Invalid CSRF token"


class AuthCookieManager:
    """
    Session cookie manager.

    - Sets the HttpOnly refresh token cookie and the readable CSRF cookie
    - Clears both on logout
    - Verifies the CSRF header against the CSRF cookie
    """

    def __init__(self):
        self.refresh_cookie_name = settings.REFRESH_COOKIE_NAME
        self.csrf_cookie_name = settings.CSRF_COOKIE_NAME
        self.csrf_header_name = settings.CSRF_HEADER_NAME
        self.cookie_domain = settings.COOKIE_DOMAIN
        self.cookie_path = settings.COOKIE_PATH
        self.cookie_samesite = settings.COOKIE_SAMESITE
        self.cookie_secure = settings.cookie_secure
        self.max_age = int(parse_duration(settings.REFRESH_TOKEN_EXPIRES_IN, "7d").total_seconds())

    @staticmethod
    def create_csrf_token() -> str:
        """
        Create a random CSRF token.
        """
        return secrets.token_urlsafe(32)

    def set_auth_cookies(self, response: Response, refresh_token: str, csrf_token: str) -> None:
        """
        Set the refresh token and CSRF cookies on a response.

        Args:
            response: FastAPI Response object
            refresh_token: "<jti>.<secret>" refresh token
            csrf_token: Value the client must echo in the CSRF header
        """
        response.set_cookie(
            key=self.refresh_cookie_name,
            value=refresh_token,
            max_age=self.max_age,
            path=self.cookie_path,
            domain=self.cookie_domain,
            secure=self.cookie_secure,
            httponly=True,
            samesite=self.cookie_samesite,
        )

        # Readable by JavaScript so it can be echoed in the header
        response.set_cookie(
            key=self.csrf_cookie_name,
            value=csrf_token,
            max_age=self.max_age,
            path=self.cookie_path,
            domain=self.cookie_domain,
            secure=self.cookie_secure,
            httponly=False,
            samesite=self.cookie_samesite,
        )

    def clear_auth_cookies(self, response: Response) -> None:
        response.delete_cookie(
            key=self.refresh_cookie_name,
            path=self.cookie_path,
            domain=self.cookie_domain,
            secure=self.cookie_secure,
            httponly=True,
            samesite=self.cookie_samesite,
        )
        response.delete_cookie(
            key=self.csrf_cookie_name,
            path=self.cookie_path,
            domain=self.cookie_domain,
            secure=self.cookie_secure,
            httponly=False,
            samesite=self.cookie_samesite,
        )

    def get_refresh_token(self, request: Request) -> Optional[str]:
        return request.cookies.get(self.refresh_cookie_name)

    def verify_csrf_token(self, request: Request) -> bool:
        """
        Check that the CSRF header is present and equals the CSRF cookie.
        """
        csrf_header = request.headers.get(self.csrf_header_name)
        csrf_cookie = request.cookies.get(self.csrf_cookie_name)

        if not csrf_header or not csrf_cookie:
            return False

        return secrets.compare_digest(csrf_header.encode(), csrf_cookie.encode())


auth_cookie_manager = AuthCookieManager()


async def require_refresh_csrf(request: Request) -> None:
    """
    Dependency guarding the refresh endpoint. Runs before the refresh token is read.

    Raises:
        UnauthorizedException: Missing or mismatched CSRF header/cookie.
    """
    if not auth_cookie_manager.verify_csrf_token(request):
        logger.warning(f"CSRF validation failed on {request.url.path}")
        raise UnauthorizedException(message=INVALID_CSRF_TOKEN)
