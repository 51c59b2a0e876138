# clean_api/adapters/outbound/persistence/models/user_model.py

"""
User table.
"""

import uuid

from sqlalchemy import Column, DateTime, String, Uuid, func
from sqlalchemy.orm import relationship

from clean_api.adapters.outbound.persistence.models.base_model import Base
from clean_api.domain.models.user_domain_model import User as DomainUser
from clean_api.shared.utils.datetime_utils import DateTimeUtil


class User(Base):
    """
    Account that can sign in.

    Attributes:
        id: Unique identifier (UUID)
        name: Display name
        email: Login email, unique
        password: argon2 hash of the password
        status: Account status ("active" by default)
        created_at: Creation timestamp
        updated_at: Last update timestamp
        refresh_tokens: Sessions issued to this user
    """
    __tablename__ = "users"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(String(100), nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    password = Column(String(255), nullable=False)
    status = Column(String(32), nullable=False, default="active", server_default="active")
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    refresh_tokens = relationship(
        "RefreshToken",
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"<User id={self.id} email={self.email}>"

    def to_domain(self) -> DomainUser:
        return DomainUser(
            id=self.id,
            name=self.name,
            email=self.email,
            password=self.password,
            status=self.status,
            created_at=DateTimeUtil.from_storage(self.created_at),
            updated_at=DateTimeUtil.from_storage(self.updated_at),
        )

    @classmethod
    def from_domain(cls, user: DomainUser) -> "User":
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            password=user.password,
            status=user.status,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
