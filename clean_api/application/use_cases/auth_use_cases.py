# clean_api/application/use_cases/auth_use_cases.py

"""
Service for user authentication.

Sign-up, sign-in, refresh and logout, each a thin flow composed from the
AuthSessionService primitives.
"""

import logging

from clean_api.adapters.configuration.config import settings
from clean_api.application.dtos.auth_dto import SignInRequest, SignUpRequest
from clean_api.application.ports.outbound import IPasswordHasher, IUserRepository
from clean_api.application.use_cases.auth_session import AuthSessionService, REVOKED_REFRESH_TOKEN
from clean_api.domain.exceptions import (
    InvalidCredentialsException,
    ResourceAlreadyExistsException,
    UnauthorizedException,
)
from clean_api.domain.factories.user_factory import UserFactory
from clean_api.domain.models.refresh_token import AuthenticatedUser

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials"
EMAIL_ALREADY_REGISTERED = "Email is already registered"
ASSOCIATED_USER_NOT_FOUND = "Associated user not found"


class AsyncAuthService:
    """
    Application service for authentication-related operations.

    Responsibilities:
    - Register new users and open their first session
    - Authenticate users, replacing every earlier session
    - Rotate refresh tokens (single use)
    - Revoke a session on logout
    """

    def __init__(
            self,
            users: IUserRepository,
            sessions: AuthSessionService,
            hasher: IPasswordHasher,
            reuse_revokes_all: bool = None,
    ):
        self.users = users
        self.sessions = sessions
        self.hasher = hasher
        self.reuse_revokes_all = (
            settings.REFRESH_REUSE_REVOKES_ALL if reuse_revokes_all is None else reuse_revokes_all
        )

    async def sign_up(self, user_input: SignUpRequest) -> AuthenticatedUser:
        """
        Register a new user and issue its first session.

        Raises:
            ResourceAlreadyExistsException: Email already registered.
        """
        if await self.users.get_by_email(user_input.email):
            logger.warning(f"Registration failed - duplicate email: {user_input.email}")
            raise ResourceAlreadyExistsException(message=EMAIL_ALREADY_REGISTERED)

        hashed_password = await self.hasher.hash(user_input.password)
        user = await self.users.create(UserFactory.create_new_user(user_input, hashed_password))

        logger.info(f"User registered successfully: {user.email}")
        return await self.sessions.issue_with_full_revocation(user)

    async def sign_in(self, user_input: SignInRequest) -> AuthenticatedUser:
        """
        Authenticate a user and issue a new session, revoking all earlier ones.

        Raises:
            InvalidCredentialsException: Unknown email, inactive account or wrong
                password (same message).
        """
        user = await self.users.get_by_email(user_input.email)
        if not user or not user.is_active:
            logger.warning(f"Authentication failed for email: {user_input.email}")
            raise InvalidCredentialsException(message=INVALID_CREDENTIALS)

        if not await self.hasher.verify(user.password, user_input.password):
            logger.warning(f"Authentication failed for email: {user_input.email}")
            raise InvalidCredentialsException(message=INVALID_CREDENTIALS)

        logger.info(f"User logged in successfully: {user.email}")
        return await self.sessions.issue_with_full_revocation(user)

    async def refresh_session(self, refresh_token: str) -> AuthenticatedUser:
        """
        Rotate a refresh token: the presented token is revoked and a new one issued.

        Raises:
            UnauthorizedException: Invalid, revoked or expired token, a lost
                concurrent rotation, or a token whose user no longer exists.
        """
        stored, jti = await self.sessions.validate_and_fetch(refresh_token)

        if not await self.sessions.revoke_by_jti(jti):
            # another request rotated this token between validation and revocation
            logger.warning(f"Refresh token reuse detected for user {stored.user_id}")
            if self.reuse_revokes_all:
                revoked = await self.sessions.revoke_lineage(stored.user_id)
                logger.warning(f"Revoked {revoked} session(s) of user {stored.user_id} after token reuse")
            raise UnauthorizedException(message=REVOKED_REFRESH_TOKEN)

        user = await self.users.get_by_id(stored.user_id)
        if not user:
            logger.warning(f"User not found during refresh: {stored.user_id}")
            raise UnauthorizedException(message=ASSOCIATED_USER_NOT_FOUND)

        logger.info(f"Refresh token rotated for user {user.id}")
        return await self.sessions.issue_without_revocation(user)

    async def logout(self, refresh_token: str) -> None:
        """
        Revoke the presented session. Access tokens and sibling sessions are left alone.

        Raises:
            UnauthorizedException: Missing or malformed refresh token.
        """
        jti = self.sessions.parse_refresh_token_format(refresh_token)
        if await self.sessions.revoke_by_jti(jti):
            logger.info("Session revoked on logout")
