"""Post handler: turns one request into one enveloped response."""

import logging
import re
from typing import Optional

from fastapi import status
from fastapi.responses import JSONResponse

from postboard.apps.blog.schemas.post import PostCreate, PostCreateRequest, PostRead
from postboard.apps.blog.services.post_service import PostService
from postboard.core.response.handlers import error_response, success_response

logger = logging.getLogger(__name__)

_ID_PREFIX = re.compile(r"\s*([+-]?\d+)", re.ASCII)

# SQLite and PostgreSQL integer keys are signed 64-bit.
MAX_POST_ID = 2**63 - 1


def parse_post_id(raw: str) -> Optional[int]:
    """Parse the leading integer of a path segment; None when there is none.

    Trailing text is ignored, so "12abc" is 12 and "1.5" is 1.
    """
    match = _ID_PREFIX.match(raw)
    if match is None:
        return None
    value = int(match.group(1))
    if abs(value) > MAX_POST_ID:
        return None
    return value


class PostHandler:
    """HTTP-facing adapter over PostService.

    Validation and not-found are answered here; every other exception is left
    to propagate to the central exception handler.
    """

    def __init__(self, service: PostService):
        self.service = service

    async def create_post(self, payload: PostCreateRequest) -> JSONResponse:
        if not (payload.title and payload.content and payload.author_id):
            logger.warning("Missing required fields in create_post")
            return error_response("Missing required fields", status.HTTP_400_BAD_REQUEST)

        post_in = PostCreate(
            title=payload.title, content=payload.content, author_id=payload.author_id
        )
        post = await self.service.create_post(post_in)
        logger.info("Created post %s", post.id, extra={"post_id": post.id})
        return success_response(
            data=PostRead.model_validate(post),
            message="Post created successfully",
            status_code=status.HTTP_201_CREATED,
        )

    async def get_all_posts(self) -> JSONResponse:
        posts = await self.service.get_all_posts()
        return success_response(
            data=[PostRead.model_validate(post) for post in posts],
            message="Posts retrieved successfully",
        )

    async def get_post_by_id(self, raw_id: str) -> JSONResponse:
        post_id = parse_post_id(raw_id)
        if post_id is None:
            logger.warning("Invalid post ID %r", raw_id)
            return error_response("Invalid post ID", status.HTTP_400_BAD_REQUEST)

        post = await self.service.get_post_by_id(post_id)
        if post is None:
            return error_response(
                f"Post with id {post_id} not found", status.HTTP_404_NOT_FOUND
            )

        return success_response(
            data=PostRead.model_validate(post),
            message="Post retrieved successfully",
        )
