# clean_api/application/ports/outbound/post_repository_port.py

from abc import ABC, abstractmethod
from typing import List, Optional, Tuple
from uuid import UUID

from clean_api.domain.models.post import Post


class IPostRepository(ABC):
    """Post repository interface."""

    @abstractmethod
    async def create(self, post: Post) -> Post:
        pass

    @abstractmethod
    async def get_by_id(self, post_id: UUID) -> Optional[Post]:
        pass

    @abstractmethod
    async def list(
            self,
            offset: int,
            limit: int,
            search: Optional[str] = None,
            sort: str = "created_at",
            order: str = "desc",
    ) -> Tuple[List[Post], int]:
        """Return one page of posts and the total number of matches."""
        pass

    @abstractmethod
    async def update(self, post: Post) -> Post:
        pass

    @abstractmethod
    async def delete_by_id(self, post_id: UUID) -> bool:
        pass
