# clean_api/application/ports/outbound/refresh_token_repository_port.py

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional
from uuid import UUID

from clean_api.domain.models.refresh_token import RefreshToken


class IRefreshTokenRepository(ABC):
    """
    Storage contract for refresh token sessions. Every call is atomic on its own.
    """

    @abstractmethod
    async def create(self, token: RefreshToken) -> RefreshToken:
        pass

    @abstractmethod
    async def find_by_jti(self, jti: str) -> Optional[RefreshToken]:
        pass

    @abstractmethod
    async def revoke_by_jti(self, jti: str, revoked_at: datetime) -> bool:
        """Revoke iff still active. Returns True only for the call that performed the revocation."""
        pass

    @abstractmethod
    async def revoke_all_by_user_id(self, user_id: UUID, revoked_at: datetime) -> int:
        pass
