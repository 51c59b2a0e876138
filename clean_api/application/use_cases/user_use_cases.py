# clean_api/application/use_cases/user_use_cases.py

"""
Service for user management.

Any authenticated caller may list and read users. Updates and deletes are
limited to the caller's own account.
"""

import logging
from uuid import UUID

from fastapi_pagination import Page, Params

from clean_api.application.dtos.user_dto import UserOutput, UserUpdate
from clean_api.application.ports.outbound import IPasswordHasher, IUserRepository
from clean_api.domain.exceptions import (
    PermissionDeniedException,
    ResourceAlreadyExistsException,
    ResourceNotFoundException,
)
from clean_api.domain.models.user_domain_model import User
from clean_api.shared.utils.datetime_utils import DateTimeUtil
from clean_api.shared.utils.pagination import ListQuery, build_page, page_offset

logger = logging.getLogger(__name__)

USER_NOT_FOUND = "User not found."


class AsyncUserService:
    """Service layer (async) for managing **User** entities."""

    def __init__(self, users: IUserRepository, hasher: IPasswordHasher):
        self.users = users
        self.hasher = hasher

    async def _get_user_or_404(self, user_id: UUID) -> User:
        user = await self.users.get_by_id(user_id)
        if not user:
            logger.warning(f"User not found: {user_id}")
            raise ResourceNotFoundException(message=USER_NOT_FOUND, resource_id=user_id)
        return user

    @staticmethod
    def _ensure_self(current_user_id: UUID, user_id: UUID, action: str) -> None:
        if current_user_id != user_id:
            logger.warning(f"User {current_user_id} tried to {action} user {user_id}")
            raise PermissionDeniedException(message=f"You can only {action} your own account.")

    # ────────────────────────────────
    # Queries
    # ────────────────────────────────
    async def get_current_user(self, user_id: UUID) -> User:
        """
        Raises:
            ResourceNotFoundException: The subject of a valid access token no longer exists.
        """
        user = await self._get_user_or_404(user_id)
        return user.hide_password()

    async def get_user(self, user_id: UUID) -> User:
        user = await self._get_user_or_404(user_id)
        return user.hide_password()

    async def list_users(self, params: Params, query: ListQuery) -> Page[UserOutput]:
        users, total = await self.users.list(
            offset=page_offset(params),
            limit=params.size,
            search=query.search,
            sort=query.sort,
            order=query.order,
        )
        return build_page([UserOutput.model_validate(user) for user in users], total, params)

    # ────────────────────────────────
    # Self-service update / deletion
    # ────────────────────────────────
    async def update_user(self, current_user_id: UUID, user_id: UUID, data: UserUpdate) -> User:
        """
        Apply a partial update to the caller's own account.

        Raises:
            PermissionDeniedException: Target is another user.
            ResourceNotFoundException: The account no longer exists.
            ResourceAlreadyExistsException: The new email belongs to another user.
        """
        self._ensure_self(current_user_id, user_id, "update")
        user = await self._get_user_or_404(user_id)

        if data.email and data.email != user.email:
            existing = await self.users.get_by_email(data.email)
            if existing and existing.id != user.id:
                raise ResourceAlreadyExistsException(message="Email is already registered")
            user.email = data.email

        if data.password:
            user.password = await self.hasher.hash(data.password)
        if data.name is not None:
            user.name = data.name
        if data.status is not None:
            user.status = data.status
        user.updated_at = DateTimeUtil.utcnow()

        updated = await self.users.update(user)
        logger.info(f"User updated own profile: {user_id}")
        return updated.hide_password()

    async def delete_user(self, current_user_id: UUID, user_id: UUID) -> None:
        """
        Delete the caller's own account together with its sessions.

        Raises:
            PermissionDeniedException: Target is another user.
            ResourceNotFoundException: The account no longer exists.
        """
        self._ensure_self(current_user_id, user_id, "delete")
        await self._get_user_or_404(user_id)
        await self.users.delete_by_id(user_id)
        logger.info(f"User deleted: {user_id}")
