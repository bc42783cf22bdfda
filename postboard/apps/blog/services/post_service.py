"""Post service."""

import logging
from typing import List, Optional

from postboard.apps.blog.models.post import Post
from postboard.apps.blog.repositories.post_repository import PostRepositoryInterface
from postboard.apps.blog.schemas.post import PostCreate

logger = logging.getLogger(__name__)


class PostService:
    """Business rules for posts. Storage errors pass through untouched."""

    def __init__(self, repository: PostRepositoryInterface):
        self.repository = repository

    async def _validate_create(self, post_in: PostCreate) -> None:
        """Validate data before creation."""
        # Business rules such as author existence go here.
        return None

    async def create_post(self, post_in: PostCreate) -> Post:
        logger.debug("create_post: %s", post_in)
        await self._validate_create(post_in)
        return await self.repository.create(post_in)

    async def get_all_posts(self) -> List[Post]:
        return await self.repository.find_all()

    async def get_post_by_id(self, post_id: int) -> Optional[Post]:
        """Return the post, or None when there is none with this id."""
        post = await self.repository.find_by_id(post_id)
        if post is None:
            logger.info("Post with id %s not found", post_id, extra={"post_id": post_id})
        return post
