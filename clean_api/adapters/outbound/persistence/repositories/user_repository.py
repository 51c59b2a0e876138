# clean_api/adapters/outbound/persistence/repositories/user_repository.py

"""
Async repository for the User entity.

Implements IUserRepository on top of an AsyncSession. Each write commits
on its own; SQLAlchemy errors are rolled back and surfaced as domain
exceptions.
"""

import logging
from typing import List, Optional, Tuple
from uuid import UUID

from sqlalchemy import delete, func, or_, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from clean_api.adapters.outbound.persistence.models import User
from clean_api.application.ports.outbound import IUserRepository
from clean_api.domain.exceptions import (
    DatabaseOperationException,
    ResourceAlreadyExistsException,
    ResourceNotFoundException,
)
from clean_api.domain.models.user_domain_model import User as DomainUser

SORTABLE_COLUMNS = {
    "name": User.name,
    "email": User.email,
    "status": User.status,
    "created_at": User.created_at,
    "updated_at": User.updated_at,
}


class AsyncUserRepository(IUserRepository):
    """
    Concrete repository for User, fully async.
    """

    def __init__(self, db: AsyncSession):
        self.db = db
        self.logger = logging.getLogger(f"{__name__}.{User.__name__}")

    async def get_by_id(self, user_id: UUID) -> Optional[DomainUser]:
        try:
            user = await self.db.get(User, user_id)
            return user.to_domain() if user else None
        except SQLAlchemyError as e:
            self.logger.error(f"Error fetching user by id {user_id}: {e}")
            raise DatabaseOperationException(message="Error fetching user.", original_error=e)

    async def get_by_email(self, email: str) -> Optional[DomainUser]:
        try:
            result = await self.db.execute(select(User).where(User.email == email.lower()))
            user = result.scalar_one_or_none()
            return user.to_domain() if user else None
        except SQLAlchemyError as e:
            self.logger.error(f"Error fetching user by email: {e}")
            raise DatabaseOperationException(message="Error fetching user.", original_error=e)

    async def create(self, user: DomainUser) -> DomainUser:
        """
        Persist a new user.

        Raises:
            ResourceAlreadyExistsException: The email is already registered.
            DatabaseOperationException: Any other storage failure.
        """
        try:
            db_user = User.from_domain(user)
            self.db.add(db_user)
            await self.db.commit()
            await self.db.refresh(db_user)
            self.logger.info(f"User created: {db_user.id}")
            return db_user.to_domain()
        except IntegrityError as e:
            await self.db.rollback()
            self.logger.warning(f"Duplicate email on user creation: {user.email}")
            raise ResourceAlreadyExistsException(message="Email is already registered") from e
        except SQLAlchemyError as e:
            await self.db.rollback()
            self.logger.error(f"Error creating user: {e}")
            raise DatabaseOperationException(message="Error creating user.", original_error=e)

    async def list(
            self,
            offset: int,
            limit: int,
            search: Optional[str] = None,
            sort: str = "created_at",
            order: str = "desc",
    ) -> Tuple[List[DomainUser], int]:
        """
        Page through users, optionally filtered by a case-insensitive search
        on name and email. Unknown sort keys fall back to created_at.
        """
        try:
            stmt = select(User)
            count_stmt = select(func.count()).select_from(User)
            if search:
                pattern = f"%{search}%"
                condition = or_(User.name.ilike(pattern), User.email.ilike(pattern))
                stmt = stmt.where(condition)
                count_stmt = count_stmt.where(condition)

            column = SORTABLE_COLUMNS.get(sort, User.created_at)
            stmt = stmt.order_by(column.asc() if order == "asc" else column.desc(), User.id)

            total = (await self.db.execute(count_stmt)).scalar_one()
            rows = (await self.db.execute(stmt.offset(offset).limit(limit))).scalars().all()
            return [row.to_domain() for row in rows], total
        except SQLAlchemyError as e:
            self.logger.error(f"Error listing users: {e}")
            raise DatabaseOperationException(message="Error listing users.", original_error=e)

    async def update(self, user: DomainUser) -> DomainUser:
        """
        Write every mutable field of the domain user back to its row.

        Raises:
            ResourceNotFoundException: No row with that id.
            ResourceAlreadyExistsException: The new email belongs to another user.
        """
        try:
            db_user = await self.db.get(User, user.id)
            if db_user is None:
                raise ResourceNotFoundException(message="User not found", resource_id=user.id)

            db_user.name = user.name
            db_user.email = user.email
            db_user.password = user.password
            db_user.status = user.status
            db_user.updated_at = user.updated_at

            await self.db.commit()
            await self.db.refresh(db_user)
            self.logger.info(f"User updated: {db_user.id}")
            return db_user.to_domain()
        except IntegrityError as e:
            await self.db.rollback()
            self.logger.warning(f"Duplicate email on user update: {user.email}")
            raise ResourceAlreadyExistsException(message="Email is already registered") from e
        except SQLAlchemyError as e:
            await self.db.rollback()
            self.logger.error(f"Error updating user {user.id}: {e}")
            raise DatabaseOperationException(message="Error updating user.", original_error=e)

    async def delete_by_id(self, user_id: UUID) -> bool:
        """Delete a user. Its refresh token rows go with it (ON DELETE CASCADE)."""
        try:
            result = await self.db.execute(delete(User).where(User.id == user_id))
            await self.db.commit()
            return result.rowcount == 1
        except SQLAlchemyError as e:
            await self.db.rollback()
            self.logger.error(f"Error deleting user {user_id}: {e}")
            raise DatabaseOperationException(message="Error deleting user.", original_error=e)
