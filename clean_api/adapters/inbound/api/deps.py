# clean_api/adapters/inbound/api/deps.py

"""
Dependencies for injection into API endpoints.

This module wires repositories, security adapters and services via
FastAPI Depends(), and defines the bearer guard for protected endpoints.
"""

import logging
from functools import lru_cache
from typing import Optional
from uuid import UUID

from fastapi import Depends, Security
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession

from clean_api.adapters.outbound.persistence.database import get_db
from clean_api.adapters.outbound.persistence.repositories import (
    AsyncPostRepository,
    AsyncRefreshTokenRepository,
    AsyncUserRepository,
)
from clean_api.adapters.outbound.security.jwt_token_service import JWTTokenService
from clean_api.adapters.outbound.security.password_hasher import Argon2PasswordHasher
from clean_api.application.dtos.auth_dto import AccessTokenClaims
from clean_api.application.ports.outbound import (
    IPasswordHasher,
    IPostRepository,
    IRefreshTokenRepository,
    ITokenService,
    IUserRepository,
)
from clean_api.application.use_cases.auth_session import AuthSessionService
from clean_api.application.use_cases.auth_use_cases import AsyncAuthService
from clean_api.application.use_cases.post_use_cases import AsyncPostService
from clean_api.application.use_cases.user_use_cases import AsyncUserService
from clean_api.domain.exceptions import UnauthorizedException

# Configure logger
logger = logging.getLogger(__name__)

# Missing credentials are reported by the guard itself, not by HTTPBearer
bearer_scheme = HTTPBearer(auto_error=False)

BEARER_CHALLENGE = {"WWW-Authenticate": "Bearer"}


########################################################################
# Database Session Management
########################################################################

get_session = get_db


########################################################################
# Adapters
########################################################################


@lru_cache()
def get_password_hasher() -> IPasswordHasher:
    return Argon2PasswordHasher()


def get_token_service(hasher: IPasswordHasher = Depends(get_password_hasher)) -> ITokenService:
    return JWTTokenService(hasher)


def get_user_repository(db: AsyncSession = Depends(get_session)) -> IUserRepository:
    return AsyncUserRepository(db)


def get_refresh_token_repository(db: AsyncSession = Depends(get_session)) -> IRefreshTokenRepository:
    return AsyncRefreshTokenRepository(db)


def get_post_repository(db: AsyncSession = Depends(get_session)) -> IPostRepository:
    return AsyncPostRepository(db)


########################################################################
# Services
########################################################################


def get_auth_session_service(
        refresh_tokens: IRefreshTokenRepository = Depends(get_refresh_token_repository),
        token_service: ITokenService = Depends(get_token_service),
        hasher: IPasswordHasher = Depends(get_password_hasher),
) -> AuthSessionService:
    return AuthSessionService(refresh_tokens, token_service, hasher)


def get_auth_service(
        users: IUserRepository = Depends(get_user_repository),
        sessions: AuthSessionService = Depends(get_auth_session_service),
        hasher: IPasswordHasher = Depends(get_password_hasher),
) -> AsyncAuthService:
    return AsyncAuthService(users, sessions, hasher)


def get_user_service(
        users: IUserRepository = Depends(get_user_repository),
        hasher: IPasswordHasher = Depends(get_password_hasher),
) -> AsyncUserService:
    return AsyncUserService(users, hasher)


def get_post_service(posts: IPostRepository = Depends(get_post_repository)) -> AsyncPostService:
    return AsyncPostService(posts)


########################################################################
# Bearer Authentication
########################################################################


async def get_current_claims(
        credentials: Optional[HTTPAuthorizationCredentials] = Security(bearer_scheme),
        token_service: ITokenService = Depends(get_token_service),
) -> AccessTokenClaims:
    """
    Verify the bearer access token and return its claims.

    Never touches refresh token state.

    Raises:
        UnauthorizedException: Missing token, bad signature, expired, wrong
            type or missing subject.
    """
    if credentials is None or not credentials.credentials:
        raise UnauthorizedException(message="Missing access token", headers=BEARER_CHALLENGE)

    try:
        payload = token_service.decode_access_token(credentials.credentials)
    except UnauthorizedException as e:
        e.headers = BEARER_CHALLENGE
        raise

    return AccessTokenClaims(**payload)


async def get_current_user_id(claims: AccessTokenClaims = Depends(get_current_claims)) -> UUID:
    """
    Subject of the bearer access token as a user id.

    Raises:
        UnauthorizedException: The subject is not a UUID.
    """
    try:
        return UUID(claims.sub)
    except ValueError:
        logger.warning("Access token subject is not a valid user id")
        raise UnauthorizedException(message="Invalid access token", headers=BEARER_CHALLENGE)
