# clean_api/adapters/outbound/persistence/repositories/post_repository.py

"""
Async repository for the Post entity.
"""

import logging
from typing import List, Optional, Tuple
from uuid import UUID

from sqlalchemy import delete, func, or_, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from clean_api.adapters.outbound.persistence.models import Post
from clean_api.application.ports.outbound import IPostRepository
from clean_api.domain.exceptions import DatabaseOperationException, ResourceNotFoundException
from clean_api.domain.models.post import Post as DomainPost

SORTABLE_COLUMNS = {
    "id": Post.id,
    "title": Post.title,
    "status": Post.status,
    "created_at": Post.created_at,
    "updated_at": Post.updated_at,
}


class AsyncPostRepository(IPostRepository):
    """
    Concrete repository for Post, fully async.
    """

    def __init__(self, db: AsyncSession):
        self.db = db
        self.logger = logging.getLogger(f"{__name__}.{Post.__name__}")

    async def create(self, post: DomainPost) -> DomainPost:
        try:
            db_post = Post.from_domain(post)
            self.db.add(db_post)
            await self.db.commit()
            await self.db.refresh(db_post)
            self.logger.info(f"Post created: {db_post.id}")
            return db_post.to_domain()
        except SQLAlchemyError as e:
            await self.db.rollback()
            self.logger.error(f"Error creating post: {e}")
            raise DatabaseOperationException(message="Error creating post.", original_error=e)

    async def get_by_id(self, post_id: UUID) -> Optional[DomainPost]:
        try:
            post = await self.db.get(Post, post_id, populate_existing=True)
            return post.to_domain() if post else None
        except SQLAlchemyError as e:
            self.logger.error(f"Error fetching post {post_id}: {e}")
            raise DatabaseOperationException(message="Error fetching post.", original_error=e)

    async def list(
            self,
            offset: int,
            limit: int,
            search: Optional[str] = None,
            sort: str = "created_at",
            order: str = "desc",
    ) -> Tuple[List[DomainPost], int]:
        """
        Page through posts, optionally filtered by a case-insensitive search
        on title and content. Unknown sort keys fall back to created_at.
        """
        try:
            stmt = select(Post)
            count_stmt = select(func.count()).select_from(Post)
            if search:
                pattern = f"%{search}%"
                condition = or_(Post.title.ilike(pattern), Post.content.ilike(pattern))
                stmt = stmt.where(condition)
                count_stmt = count_stmt.where(condition)

            column = SORTABLE_COLUMNS.get(sort, Post.created_at)
            stmt = stmt.order_by(column.asc() if order == "asc" else column.desc(), Post.id)

            total = (await self.db.execute(count_stmt)).scalar_one()
            rows = (await self.db.execute(stmt.offset(offset).limit(limit))).scalars().all()
            return [row.to_domain() for row in rows], total
        except SQLAlchemyError as e:
            self.logger.error(f"Error listing posts: {e}")
            raise DatabaseOperationException(message="Error listing posts.", original_error=e)

    async def update(self, post: DomainPost) -> DomainPost:
        try:
            db_post = await self.db.get(Post, post.id)
            if db_post is None:
                raise ResourceNotFoundException(message="Post not found", resource_id=post.id)

            db_post.title = post.title
            db_post.content = post.content
            db_post.status = post.status
            db_post.updated_at = post.updated_at

            await self.db.commit()
            await self.db.refresh(db_post)
            self.logger.info(f"Post updated: {db_post.id}")
            return db_post.to_domain()
        except SQLAlchemyError as e:
            await self.db.rollback()
            self.logger.error(f"Error updating post {post.id}: {e}")
            raise DatabaseOperationException(message="Error updating post.", original_error=e)

    async def delete_by_id(self, post_id: UUID) -> bool:
        try:
            result = await self.db.execute(delete(Post).where(Post.id == post_id))
            await self.db.commit()
            return result.rowcount == 1
        except SQLAlchemyError as e:
            await self.db.rollback()
            self.logger.error(f"Error deleting post {post_id}: {e}")
            raise DatabaseOperationException(message="Error deleting post.", original_error=e)
