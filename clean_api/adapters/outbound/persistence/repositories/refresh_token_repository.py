# clean_api/adapters/outbound/persistence/repositories/refresh_token_repository.py

"""
Async repository for refresh token sessions.

Revocation is done with conditional UPDATE statements so that two
concurrent requests rotating the same token cannot both succeed.
"""

import logging
from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from clean_api.adapters.outbound.persistence.models import RefreshToken
from clean_api.application.ports.outbound import IRefreshTokenRepository
from clean_api.domain.exceptions import DatabaseOperationException
from clean_api.domain.models.refresh_token import RefreshToken as DomainRefreshToken


class AsyncRefreshTokenRepository(IRefreshTokenRepository):
    """Repository for managing refresh token sessions."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.logger = logging.getLogger(f"{__name__}.{RefreshToken.__name__}")

    async def create(self, token: DomainRefreshToken) -> DomainRefreshToken:
        """
        Persist a newly issued session.

        Args:
            token: Domain record built from the generated tokens

        Returns:
            The stored record
        """
        try:
            db_token = RefreshToken.from_domain(token)
            self.db.add(db_token)
            await self.db.commit()
            await self.db.refresh(db_token)
            return db_token.to_domain()
        except SQLAlchemyError as e:
            await self.db.rollback()
            self.logger.error(f"Error storing refresh token for user {token.user_id}: {e}")
            raise DatabaseOperationException(
                message="Error storing refresh token",
                original_error=e
            )

    async def find_by_jti(self, jti: str) -> Optional[DomainRefreshToken]:
        try:
            # revocations are bulk UPDATEs, so reload any instance already in the session
            stmt = (
                select(RefreshToken)
                .where(RefreshToken.jti == jti)
                .execution_options(populate_existing=True)
            )
            result = await self.db.execute(stmt)
            token = result.scalar_one_or_none()
            return token.to_domain() if token else None
        except SQLAlchemyError as e:
            self.logger.error(f"Error looking up refresh token: {e}")
            raise DatabaseOperationException(
                message="Error looking up refresh token",
                original_error=e
            )

    async def revoke_by_jti(self, jti: str, revoked_at: datetime) -> bool:
        """
        Revoke a single session if it is still active.

        Returns:
            True when this call revoked the row, False when it was already
            revoked or does not exist
        """
        try:
            stmt = (
                update(RefreshToken)
                .where(RefreshToken.jti == jti, RefreshToken.revoked_at.is_(None))
                .values(revoked_at=revoked_at)
                .execution_options(synchronize_session=False)
            )
            result = await self.db.execute(stmt)
            await self.db.commit()
            return result.rowcount == 1
        except SQLAlchemyError as e:
            await self.db.rollback()
            self.logger.error(f"Error revoking refresh token: {e}")
            raise DatabaseOperationException(
                message="Error revoking refresh token",
                original_error=e
            )

    async def revoke_all_by_user_id(self, user_id: UUID, revoked_at: datetime) -> int:
        """
        Revoke every still-active session of a user.

        Returns:
            Number of sessions revoked
        """
        try:
            stmt = (
                update(RefreshToken)
                .where(RefreshToken.user_id == user_id, RefreshToken.revoked_at.is_(None))
                .values(revoked_at=revoked_at)
                .execution_options(synchronize_session=False)
            )
            result = await self.db.execute(stmt)
            await self.db.commit()
            return result.rowcount or 0
        except SQLAlchemyError as e:
            await self.db.rollback()
            self.logger.error(f"Error revoking refresh tokens of user {user_id}: {e}")
            raise DatabaseOperationException(
                message="Error revoking refresh tokens",
                original_error=e
            )
