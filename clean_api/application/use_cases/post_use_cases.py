# clean_api/application/use_cases/post_use_cases.py

"""
Service for post management.

Create, list, read, update and delete posts. Every operation sits behind
the bearer guard at the HTTP layer; this service does not know who the
caller is.
"""

import logging
from uuid import UUID

from fastapi_pagination import Page, Params

from clean_api.application.dtos.post_dto import PostCreate, PostOutput, PostUpdate
from clean_api.application.ports.outbound import IPostRepository
from clean_api.domain.exceptions import ResourceNotFoundException
from clean_api.domain.factories.post_factory import PostFactory
from clean_api.domain.models.post import Post
from clean_api.shared.utils.datetime_utils import DateTimeUtil
from clean_api.shared.utils.pagination import ListQuery, build_page, page_offset

logger = logging.getLogger(__name__)

POST_NOT_FOUND = "Post not found"


class AsyncPostService:
    """Service layer (async) for managing **Post** entities."""

    def __init__(self, posts: IPostRepository):
        self.posts = posts

    async def _get_post_or_404(self, post_id: UUID) -> Post:
        post = await self.posts.get_by_id(post_id)
        if not post:
            logger.warning(f"Post not found: {post_id}")
            raise ResourceNotFoundException(message=POST_NOT_FOUND, resource_id=post_id)
        return post

    async def create_post(self, data: PostCreate) -> Post:
        post = await self.posts.create(PostFactory.create_new_post(data))
        logger.info(f"Post created: {post.id}")
        return post

    async def list_posts(self, params: Params, query: ListQuery) -> Page[PostOutput]:
        posts, total = await self.posts.list(
            offset=page_offset(params),
            limit=params.size,
            search=query.search,
            sort=query.sort,
            order=query.order,
        )
        logger.debug(f"Listed {len(posts)} of {total} posts")
        return build_page([PostOutput.model_validate(post) for post in posts], total, params)

    async def get_post(self, post_id: UUID) -> Post:
        return await self._get_post_or_404(post_id)

    async def update_post(self, post_id: UUID, data: PostUpdate) -> Post:
        """
        Apply a partial update.

        Raises:
            ResourceNotFoundException: No post with that id.
        """
        post = await self._get_post_or_404(post_id)

        if data.title is not None:
            post.title = data.title
        if data.content is not None:
            post.content = data.content
        if data.status is not None:
            post.status = data.status
        post.updated_at = DateTimeUtil.utcnow()

        updated = await self.posts.update(post)
        logger.info(f"Post updated: {post_id}")
        return updated

    async def delete_post(self, post_id: UUID) -> None:
        await self._get_post_or_404(post_id)
        await self.posts.delete_by_id(post_id)
        logger.info(f"Post deleted: {post_id}")
