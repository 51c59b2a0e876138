# clean_api/adapters/outbound/security/jwt_token_service.py

"""
Token issuer.

Mints a signed JWT access token and a two-part refresh token
("<jti>.<secret>") for a user. Only the argon2 hash of the secret half is
returned for storage; the plaintext refresh token leaves the process once,
in the response cookie.
"""

import logging
import secrets
from datetime import datetime, timedelta
from typing import Any, Dict, Optional, Tuple

from jose import jwt, JWTError

from clean_api.adapters.configuration.config import settings
from clean_api.application.ports.outbound import IPasswordHasher, ITokenService
from clean_api.domain.exceptions import UnauthorizedException
from clean_api.domain.models.refresh_token import GeneratedAuthTokens
from clean_api.domain.models.user_domain_model import User
from clean_api.shared.utils.datetime_utils import DateTimeUtil
from clean_api.shared.utils.duration import parse_duration

# Configure logger
logger = logging.getLogger(__name__)

ACCESS_TOKEN_TYPE = "access"
DEFAULT_ACCESS_TOKEN_TTL = "15m"
DEFAULT_REFRESH_TOKEN_TTL = "7d"

# token_urlsafe(n) yields ceil(n * 4 / 3) characters from [A-Za-z0-9_-]
JTI_BYTES = 24
SECRET_BYTES = 48


class JWTTokenService(ITokenService):
    """
    Issues and verifies tokens.

    - Access token: HS256 JWT with sub, email, jti, type, iss, aud, iat, exp
    - Refresh token: "<jti>.<secret>", fresh randomness for both halves on every call
    """

    def __init__(
            self,
            hasher: IPasswordHasher,
            secret_key: Optional[str] = None,
            algorithm: Optional[str] = None,
            issuer: Optional[str] = None,
            audience: Optional[str] = None,
            access_token_ttl: Optional[timedelta] = None,
            refresh_token_ttl: Optional[timedelta] = None,
    ):
        self.hasher = hasher
        self.secret_key = secret_key or settings.SECRET_KEY.get_secret_value()
        self.algorithm = algorithm or settings.ALGORITHM
        self.issuer = issuer or settings.JWT_ISSUER
        self.audience = audience if audience is not None else settings.JWT_AUDIENCE
        self.access_token_ttl = access_token_ttl or parse_duration(
            settings.ACCESS_TOKEN_EXPIRES_IN, DEFAULT_ACCESS_TOKEN_TTL
        )
        self.refresh_token_ttl = refresh_token_ttl or parse_duration(
            settings.REFRESH_TOKEN_EXPIRES_IN, DEFAULT_REFRESH_TOKEN_TTL
        )

    @staticmethod
    def generate_jti() -> str:
        return secrets.token_urlsafe(JTI_BYTES)

    @staticmethod
    def generate_secret() -> str:
        return secrets.token_urlsafe(SECRET_BYTES)

    def create_access_token(self, user: User, jti: str, now: datetime) -> Tuple[str, datetime]:
        """
        Create a signed access token.

        Returns:
            The encoded token and its expiry
        """
        expires_at = now + self.access_token_ttl
        payload: Dict[str, Any] = {
            "sub": str(user.id),
            "email": user.email,
            "jti": jti,
            "type": ACCESS_TOKEN_TYPE,
            "iss": self.issuer,
            "iat": int(now.timestamp()),
            "exp": int(expires_at.timestamp()),
        }
        if self.audience:
            payload["aud"] = self.audience

        token = jwt.encode(payload, self.secret_key, algorithm=self.algorithm)
        return token, expires_at

    async def generate_tokens(self, user: User, now: Optional[datetime] = None) -> GeneratedAuthTokens:
        """
        Produce one access/refresh token bundle for a user.

        Args:
            user: Owner of the new session
            now: Issuance time (defaults to the current UTC time)

        Returns:
            GeneratedAuthTokens with the plaintext refresh token and the hash of its secret
        """
        now = now or DateTimeUtil.utcnow()
        jti = self.generate_jti()
        secret = self.generate_secret()

        access_token, access_expires_at = self.create_access_token(user, jti, now)
        refresh_token_hash = await self.hasher.hash(secret)

        logger.debug(f"Tokens issued for user={user.id}")
        return GeneratedAuthTokens(
            access_token=access_token,
            access_token_expires_at=access_expires_at,
            refresh_token=f"{jti}.{secret}",
            refresh_token_expires_at=now + self.refresh_token_ttl,
            jti=jti,
            refresh_token_hash=refresh_token_hash,
        )

    def decode_access_token(self, token: str) -> Dict[str, Any]:
        """
        Verify signature, expiry, issuer, audience and token type.

        Raises:
            UnauthorizedException: The token is not a valid access token.
        """
        try:
            payload = jwt.decode(
                token,
                self.secret_key,
                algorithms=[self.algorithm],
                issuer=self.issuer,
                audience=self.audience,
            )
        except JWTError as e:
            logger.warning(f"Invalid access token: {e}")
            raise UnauthorizedException(message="Invalid access token")

        if payload.get("type") != ACCESS_TOKEN_TYPE:
            logger.warning("Token with incorrect type presented as access token.")
            raise UnauthorizedException(message="Invalid access token")

        if not payload.get("sub"):
            logger.warning("Access token without subject.")
            raise UnauthorizedException(message="Invalid access token")

        return payload
