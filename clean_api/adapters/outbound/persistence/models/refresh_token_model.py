# clean_api/adapters/outbound/persistence/models/refresh_token_model.py

"""
Refresh token sessions.

One row per issued session. Rows are only ever updated to set revoked_at.
"""

import uuid

from sqlalchemy import Column, DateTime, ForeignKey, String, Uuid, func
from sqlalchemy.orm import relationship

from clean_api.adapters.outbound.persistence.models.base_model import Base
from clean_api.domain.models.refresh_token import RefreshToken as DomainRefreshToken
from clean_api.shared.utils.datetime_utils import DateTimeUtil


class RefreshToken(Base):
    """
    Attributes:
        id: Storage identifier
        user_id: Owning user
        jti: Public identifier half of the refresh token, unique
        token_hash: argon2 hash of the secret half
        expires_at: Absolute expiry
        created_at: Issuance time
        revoked_at: Set once the token is rotated or revoked
    """
    __tablename__ = "refresh_tokens"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(Uuid(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    jti = Column(String(128), nullable=False, unique=True)
    token_hash = Column(String(512), nullable=False)
    expires_at = Column(DateTime(timezone=True), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    revoked_at = Column(DateTime(timezone=True), nullable=True)

    user = relationship("User", back_populates="refresh_tokens")

    def __repr__(self) -> str:
        return f"<RefreshToken jti={self.jti} user_id={self.user_id} revoked={self.revoked_at is not None}>"

    def to_domain(self) -> DomainRefreshToken:
        return DomainRefreshToken(
            id=self.id,
            user_id=self.user_id,
            jti=self.jti,
            token_hash=self.token_hash,
            expires_at=DateTimeUtil.from_storage(self.expires_at),
            created_at=DateTimeUtil.from_storage(self.created_at),
            revoked_at=DateTimeUtil.from_storage(self.revoked_at),
        )

    @classmethod
    def from_domain(cls, token: DomainRefreshToken) -> "RefreshToken":
        return cls(
            id=token.id,
            user_id=token.user_id,
            jti=token.jti,
            token_hash=token.token_hash,
            expires_at=token.expires_at,
            created_at=token.created_at,
            revoked_at=token.revoked_at,
        )
