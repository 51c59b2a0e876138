# clean_api/domain/models/refresh_token.py

"""
Refresh token session records and the transient token bundles built around them.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from clean_api.domain.models.user_domain_model import User


@dataclass
class RefreshToken:
    """
    One issued session.

    A token is usable while `revoked_at` is unset and `expires_at` lies
    strictly in the future. Revocation is terminal.
    """
    user_id: UUID
    jti: str
    token_hash: str = field(repr=False)
    expires_at: datetime
    created_at: datetime
    revoked_at: Optional[datetime] = None
    id: UUID = field(default_factory=uuid4)

    @property
    def is_revoked(self) -> bool:
        return self.revoked_at is not None

    def is_expired(self, now: datetime) -> bool:
        # inclusive: a token expiring exactly now is already dead
        return self.expires_at <= now

    def is_usable(self, now: datetime) -> bool:
        return not self.is_revoked and not self.is_expired(now)

    def mark_revoked(self, revoked_at: datetime) -> None:
        if self.revoked_at is None:
            self.revoked_at = revoked_at


@dataclass(frozen=True)
class GeneratedAuthTokens:
    """Output of one issuance. Consumed immediately, never persisted as such."""
    access_token: str
    access_token_expires_at: datetime
    refresh_token: str = field(repr=False)
    refresh_token_expires_at: datetime
    jti: str
    refresh_token_hash: str = field(repr=False)


@dataclass(frozen=True)
class AuthenticatedUser:
    user: User
    tokens: GeneratedAuthTokens
