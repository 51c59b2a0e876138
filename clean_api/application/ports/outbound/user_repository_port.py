# clean_api/application/ports/outbound/user_repository_port.py

from abc import ABC, abstractmethod
from typing import List, Optional, Tuple
from uuid import UUID

from clean_api.domain.models.user_domain_model import User


class IUserRepository(ABC):
    """User repository interface."""

    @abstractmethod
    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        pass

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        pass

    @abstractmethod
    async def create(self, user: User) -> User:
        pass

    @abstractmethod
    async def list(
            self,
            offset: int,
            limit: int,
            search: Optional[str] = None,
            sort: str = "created_at",
            order: str = "desc",
    ) -> Tuple[List[User], int]:
        """Return one page of users and the total number of matches."""
        pass

    @abstractmethod
    async def update(self, user: User) -> User:
        pass

    @abstractmethod
    async def delete_by_id(self, user_id: UUID) -> bool:
        pass
