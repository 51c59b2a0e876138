# clean_api/application/use_cases/auth_session.py

"""
Session orchestration shared by sign-up, sign-in, refresh and logout.

Issues token bundles, persists the matching refresh token rows, validates
presented refresh tokens and revokes them. The flows compose this service
instead of inheriting from it.
"""

import logging
from datetime import datetime
from typing import Callable, Optional, Tuple
from uuid import UUID

from clean_api.application.ports.outbound import (
    IPasswordHasher,
    IRefreshTokenRepository,
    ITokenService,
)
from clean_api.domain.exceptions import UnauthorizedException
from clean_api.domain.models.refresh_token import AuthenticatedUser, RefreshToken
from clean_api.domain.models.user_domain_model import User
from clean_api.shared.utils.datetime_utils import DateTimeUtil

logger = logging.getLogger(__name__)

INVALID_REFRESH_TOKEN = "Invalid refresh token"
REVOKED_REFRESH_TOKEN = "Refresh token has been revoked"
EXPIRED_REFRESH_TOKEN = "Refresh token has expired"


class AuthSessionService:
    """
    Shared session primitives.

    Not-found and secret-mismatch both fail with INVALID_REFRESH_TOKEN so
    callers cannot tell which one happened.
    """

    def __init__(
            self,
            refresh_tokens: IRefreshTokenRepository,
            token_service: ITokenService,
            hasher: IPasswordHasher,
            clock: Callable[[], datetime] = DateTimeUtil.utcnow,
    ):
        self.refresh_tokens = refresh_tokens
        self.token_service = token_service
        self.hasher = hasher
        self.clock = clock

    async def issue_and_persist(self, user: User) -> AuthenticatedUser:
        """Issue a token bundle, store its refresh token row and hide the password."""
        now = self.clock()
        tokens = await self.token_service.generate_tokens(user, now=now)

        await self.refresh_tokens.create(
            RefreshToken(
                user_id=user.id,
                jti=tokens.jti,
                token_hash=tokens.refresh_token_hash,
                expires_at=tokens.refresh_token_expires_at,
                created_at=now,
            )
        )

        return AuthenticatedUser(user=user.hide_password(), tokens=tokens)

    async def issue_with_full_revocation(self, user: User) -> AuthenticatedUser:
        """Revoke every active session of the user, then issue a new one."""
        revoked = await self.refresh_tokens.revoke_all_by_user_id(user.id, self.clock())
        if revoked:
            logger.info(f"Revoked {revoked} previous session(s) of user {user.id}")
        return await self.issue_and_persist(user)

    async def issue_without_revocation(self, user: User) -> AuthenticatedUser:
        return await self.issue_and_persist(user)

    @staticmethod
    def parse_refresh_token_format(plain: Optional[str]) -> str:
        """
        Check the "<jti>.<secret>" shape and return the jti.

        Raises:
            UnauthorizedException: Missing value, wrong number of parts or an empty part.
        """
        parts = (plain or "").split(".")
        if len(parts) != 2 or not parts[0] or not parts[1]:
            raise UnauthorizedException(message=INVALID_REFRESH_TOKEN)
        return parts[0]

    async def validate_and_fetch(self, plain: Optional[str]) -> Tuple[RefreshToken, str]:
        """
        Validate a presented refresh token against its stored row.

        Checks run in order: format, existence, revocation, expiry, secret.

        Returns:
            The stored token and its jti
        """
        jti = self.parse_refresh_token_format(plain)
        secret = plain.split(".", 1)[1]

        stored = await self.refresh_tokens.find_by_jti(jti)
        if stored is None:
            logger.warning("Refresh attempted with unknown token id")
            raise UnauthorizedException(message=INVALID_REFRESH_TOKEN)

        if stored.is_revoked:
            logger.warning(f"Revoked refresh token presented for user {stored.user_id}")
            raise UnauthorizedException(message=REVOKED_REFRESH_TOKEN)

        if stored.is_expired(self.clock()):
            logger.info(f"Expired refresh token presented for user {stored.user_id}")
            raise UnauthorizedException(message=EXPIRED_REFRESH_TOKEN)

        if not await self.hasher.verify(stored.token_hash, secret):
            logger.warning(f"Refresh token secret mismatch for user {stored.user_id}")
            raise UnauthorizedException(message=INVALID_REFRESH_TOKEN)

        return stored, jti

    async def revoke_by_jti(self, jti: str) -> bool:
        """Revoke one session. Returns False when it was already revoked or unknown."""
        return await self.refresh_tokens.revoke_by_jti(jti, self.clock())

    async def revoke_lineage(self, user_id: UUID) -> int:
        """Revoke every active session of a user (reuse response)."""
        return await self.refresh_tokens.revoke_all_by_user_id(user_id, self.clock())
