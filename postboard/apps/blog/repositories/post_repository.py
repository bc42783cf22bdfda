"""Post repository."""

import logging
from datetime import datetime, timezone
from typing import Callable, List, Optional, Protocol

from sqlmodel.ext.asyncio.session import AsyncSession

from postboard.core.bases.base_repository import BaseRepository
from postboard.apps.blog.models.post import Post
from postboard.apps.blog.schemas.post import PostCreate

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class PostRepositoryInterface(Protocol):
    """Storage capabilities the post service depends on."""

    async def create(self, post_in: PostCreate) -> Post: ...

    async def find_all(self) -> List[Post]: ...

    async def find_by_id(self, post_id: int) -> Optional[Post]: ...


class PostRepository(BaseRepository[Post]):
    """Post repository class."""

    model = Post

    def __init__(
        self,
        get_session: Callable[..., AsyncSession],
        clock: Callable[[], datetime] = utc_now,
    ):
        super().__init__(get_session)
        self.clock = clock

    async def create(self, post_in: PostCreate) -> Post:  # type: ignore[override]
        data = post_in.model_dump()
        data["created_at"] = self.clock().isoformat()
        post = await super().create(data)
        logger.debug("Stored post %s by %s", post.id, post.author_id)
        return post
