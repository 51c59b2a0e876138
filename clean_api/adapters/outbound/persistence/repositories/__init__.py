# clean_api/adapters/outbound/persistence/repositories/__init__.py

from clean_api.adapters.outbound.persistence.repositories.user_repository import AsyncUserRepository
from clean_api.adapters.outbound.persistence.repositories.refresh_token_repository import (
    AsyncRefreshTokenRepository,
)
from clean_api.adapters.outbound.persistence.repositories.post_repository import AsyncPostRepository

__all__ = ["AsyncUserRepository", "AsyncRefreshTokenRepository", "AsyncPostRepository"]
