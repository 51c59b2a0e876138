# clean_api/adapters/outbound/persistence/models/post_model.py

"""
Post table.
"""

import uuid

from sqlalchemy import Column, DateTime, String, Text, Uuid, func

from clean_api.adapters.outbound.persistence.models.base_model import Base
from clean_api.domain.models.post import Post as DomainPost
from clean_api.shared.utils.datetime_utils import DateTimeUtil


class Post(Base):
    """
    Attributes:
        id: Unique identifier (UUID)
        title: Post title, indexed for search
        content: Post body
        status: "active" or "inactive"
        created_at: Creation timestamp
        updated_at: Last update timestamp
    """
    __tablename__ = "posts"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    title = Column(String(255), nullable=False, index=True)
    content = Column(Text, nullable=False)
    status = Column(String(30), nullable=False, default="active", server_default="active", index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), onupdate=func.now())

    def __repr__(self) -> str:
        return f"<Post id={self.id} title={self.title!r}>"

    def to_domain(self) -> DomainPost:
        return DomainPost(
            id=self.id,
            title=self.title,
            content=self.content,
            status=self.status,
            created_at=DateTimeUtil.from_storage(self.created_at),
            updated_at=DateTimeUtil.from_storage(self.updated_at),
        )

    @classmethod
    def from_domain(cls, post: DomainPost) -> "Post":
        return cls(
            id=post.id,
            title=post.title,
            content=post.content,
            status=post.status,
            created_at=post.created_at,
            updated_at=post.updated_at,
        )
