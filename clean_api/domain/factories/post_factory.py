# clean_api/domain/factories/post_factory.py

from datetime import datetime, timezone
import uuid
from clean_api.application.dtos.post_dto import PostCreate
from clean_api.domain.models.post import Post


class PostFactory:
    """
    Factory for new Post domain objects.
    """

    @staticmethod
    def create_new_post(post_data: PostCreate) -> Post:
        now = datetime.now(timezone.utc)
        return Post(
            id=uuid.uuid4(),
            title=post_data.title,
            content=post_data.content,
            status="active",
            created_at=now,
            updated_at=now,
        )
