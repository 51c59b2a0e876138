# clean_api/test/conftest.py

import os

# Must be set before clean_api settings are imported
os.environ.setdefault("SECRET_KEY", "test-secret-key-not-for-production")
os.environ["ENVIRONMENT"] = "testing"
os.environ["ARGON2_MEMORY_COST"] = "1024"
os.environ["ARGON2_TIME_COST"] = "1"
os.environ["ARGON2_PARALLELISM"] = "1"
os.environ["REFRESH_REUSE_REVOKES_ALL"] = "false"

import dataclasses
from datetime import datetime, timezone
from http.cookies import Morsel, SimpleCookie
from typing import Dict, List, Optional, Tuple
from unittest.mock import AsyncMock, MagicMock
from uuid import UUID

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from clean_api.adapters.inbound.api import deps
from clean_api.adapters.outbound.security.jwt_token_service import JWTTokenService
from clean_api.adapters.outbound.security.password_hasher import Argon2PasswordHasher
from clean_api.application.ports.outbound import IPostRepository, IRefreshTokenRepository, IUserRepository
from clean_api.application.use_cases.auth_session import AuthSessionService
from clean_api.application.use_cases.auth_use_cases import AsyncAuthService
from clean_api.application.use_cases.post_use_cases import AsyncPostService
from clean_api.application.use_cases.user_use_cases import AsyncUserService
from clean_api.domain.exceptions import ResourceAlreadyExistsException, ResourceNotFoundException
from clean_api.domain.models.post import Post
from clean_api.domain.models.refresh_token import RefreshToken
from clean_api.domain.models.user_domain_model import User
from clean_api.main import app


def _sorted_page(rows, offset, limit, sort, order):
    """Mimic the SQL ORDER BY / OFFSET / LIMIT of the real repositories."""
    key = sort if sort in {"title", "name", "email", "status", "created_at", "updated_at"} else "created_at"
    ordered = sorted(rows, key=lambda row: getattr(row, key), reverse=order != "asc")
    return [dataclasses.replace(row) for row in ordered[offset:offset + limit]], len(rows)


class InMemoryUserRepository(IUserRepository):
    """Dict-backed user store. Returns copies so callers can't mutate stored rows."""

    def __init__(self):
        self.rows: Dict[UUID, User] = {}

    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        user = self.rows.get(user_id)
        return dataclasses.replace(user) if user else None

    async def get_by_email(self, email: str) -> Optional[User]:
        for user in self.rows.values():
            if user.email == email.lower():
                return dataclasses.replace(user)
        return None

    async def create(self, user: User) -> User:
        if any(existing.email == user.email for existing in self.rows.values()):
            raise ResourceAlreadyExistsException(message="Email is already registered")
        self.rows[user.id] = dataclasses.replace(user)
        return dataclasses.replace(user)

    async def list(self, offset, limit, search=None, sort="created_at", order="desc") -> Tuple[List[User], int]:
        matches = [
            user for user in self.rows.values()
            if not search or search.lower() in user.name.lower() or search.lower() in user.email.lower()
        ]
        return _sorted_page(matches, offset, limit, sort, order)

    async def update(self, user: User) -> User:
        if user.id not in self.rows:
            raise ResourceNotFoundException(message="User not found", resource_id=user.id)
        if any(other.email == user.email and other.id != user.id for other in self.rows.values()):
            raise ResourceAlreadyExistsException(message="Email is already registered")
        self.rows[user.id] = dataclasses.replace(user)
        return dataclasses.replace(user)

    async def delete_by_id(self, user_id: UUID) -> bool:
        return self.rows.pop(user_id, None) is not None


class InMemoryRefreshTokenRepository(IRefreshTokenRepository):
    """
    Dict-backed refresh token store.

    revoke_by_jti has no await between its check and its write, so it is
    atomic under asyncio just like the conditional UPDATE.
    """

    def __init__(self):
        self.rows: Dict[str, RefreshToken] = {}
        self.find_calls = 0
        self.mutations: List[str] = []

    def for_user(self, user_id: UUID) -> List[RefreshToken]:
        return [token for token in self.rows.values() if token.user_id == user_id]

    async def create(self, token: RefreshToken) -> RefreshToken:
        self.mutations.append("create")
        self.rows[token.jti] = dataclasses.replace(token)
        return dataclasses.replace(token)

    async def find_by_jti(self, jti: str) -> Optional[RefreshToken]:
        self.find_calls += 1
        token = self.rows.get(jti)
        return dataclasses.replace(token) if token else None

    async def revoke_by_jti(self, jti: str, revoked_at: datetime) -> bool:
        self.mutations.append("revoke")
        token = self.rows.get(jti)
        if token is None or token.revoked_at is not None:
            return False
        token.mark_revoked(revoked_at)
        return True

    async def revoke_all_by_user_id(self, user_id: UUID, revoked_at: datetime) -> int:
        self.mutations.append("revoke_all")
        count = 0
        for token in self.rows.values():
            if token.user_id == user_id and token.revoked_at is None:
                token.mark_revoked(revoked_at)
                count += 1
        return count


class InMemoryPostRepository(IPostRepository):
    """Dict-backed post store."""

    def __init__(self):
        self.rows: Dict[UUID, Post] = {}

    async def create(self, post: Post) -> Post:
        self.rows[post.id] = dataclasses.replace(post)
        return dataclasses.replace(post)

    async def get_by_id(self, post_id: UUID) -> Optional[Post]:
        post = self.rows.get(post_id)
        return dataclasses.replace(post) if post else None

    async def list(self, offset, limit, search=None, sort="created_at", order="desc") -> Tuple[List[Post], int]:
        matches = [
            post for post in self.rows.values()
            if not search or search.lower() in post.title.lower() or search.lower() in post.content.lower()
        ]
        return _sorted_page(matches, offset, limit, sort, order)

    async def update(self, post: Post) -> Post:
        if post.id not in self.rows:
            raise ResourceNotFoundException(message="Post not found", resource_id=post.id)
        self.rows[post.id] = dataclasses.replace(post)
        return dataclasses.replace(post)

    async def delete_by_id(self, post_id: UUID) -> bool:
        return self.rows.pop(post_id, None) is not None


class FrozenClock:
    """Callable clock that only moves when told to."""

    def __init__(self, now: Optional[datetime] = None):
        self.now = now or datetime(2025, 1, 1, 12, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now


def parse_set_cookies(response) -> Dict[str, Morsel]:
    """Map cookie name to its Morsel for every Set-Cookie header of a response."""
    morsels = {}
    for header in response.headers.get_list("set-cookie"):
        cookie = SimpleCookie()
        cookie.load(header)
        for name, morsel in cookie.items():
            morsels[name] = morsel
    return morsels


@pytest.fixture
def hasher() -> Argon2PasswordHasher:
    return Argon2PasswordHasher(memory_cost=1024, time_cost=1, parallelism=1)


@pytest.fixture
def token_service(hasher) -> JWTTokenService:
    return JWTTokenService(hasher)


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def refresh_token_repository() -> InMemoryRefreshTokenRepository:
    return InMemoryRefreshTokenRepository()


@pytest.fixture
def post_repository() -> InMemoryPostRepository:
    return InMemoryPostRepository()


@pytest.fixture
def session_service(refresh_token_repository, token_service, hasher) -> AuthSessionService:
    return AuthSessionService(refresh_token_repository, token_service, hasher)


@pytest.fixture
def auth_service(user_repository, session_service, hasher) -> AsyncAuthService:
    return AsyncAuthService(user_repository, session_service, hasher, reuse_revokes_all=False)


@pytest.fixture
def user_service(user_repository, hasher) -> AsyncUserService:
    return AsyncUserService(user_repository, hasher)


@pytest.fixture
def post_service(post_repository) -> AsyncPostService:
    return AsyncPostService(post_repository)


@pytest.fixture
def db_session_mock() -> MagicMock:
    session = MagicMock()
    session.execute = AsyncMock(return_value=MagicMock())
    return session


@pytest_asyncio.fixture
async def async_client(user_repository, refresh_token_repository, post_repository, hasher, token_service,
                       db_session_mock):
    """
    HTTP client against the real app with storage swapped for in-memory repositories.
    """
    app.dependency_overrides[deps.get_session] = lambda: db_session_mock
    app.dependency_overrides[deps.get_user_repository] = lambda: user_repository
    app.dependency_overrides[deps.get_refresh_token_repository] = lambda: refresh_token_repository
    app.dependency_overrides[deps.get_post_repository] = lambda: post_repository
    app.dependency_overrides[deps.get_password_hasher] = lambda: hasher
    app.dependency_overrides[deps.get_token_service] = lambda: token_service

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client

    app.dependency_overrides.clear()
