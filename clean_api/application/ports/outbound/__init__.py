# clean_api/application/ports/outbound/__init__.py

from clean_api.application.ports.outbound.password_hasher_port import IPasswordHasher
from clean_api.application.ports.outbound.token_service_port import ITokenService
from clean_api.application.ports.outbound.refresh_token_repository_port import IRefreshTokenRepository
from clean_api.application.ports.outbound.user_repository_port import IUserRepository
from clean_api.application.ports.outbound.post_repository_port import IPostRepository

__all__ = [
    "IPasswordHasher",
    "ITokenService",
    "IRefreshTokenRepository",
    "IUserRepository",
    "IPostRepository",
]
