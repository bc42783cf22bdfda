"""Post router."""

from datetime import datetime
from typing import Callable, Optional

from fastapi import APIRouter, status

from postboard.core.bases.base_router import BaseRouter
from postboard.core.database import Database
from postboard.apps.blog.handlers.post_handler import PostHandler
from postboard.apps.blog.repositories.post_repository import PostRepository, utc_now
from postboard.apps.blog.schemas.post import PostCreateRequest
from postboard.apps.blog.services.post_service import PostService


class PostRouter(BaseRouter):
    """Post router class."""

    def __init__(self, handler: PostHandler):
        super().__init__(handler=handler, prefix="/posts", tags=["Posts"])

    def _register_routes(self) -> None:
        self._register_create()
        self._register_list()
        self._register_get_by_id()

    def _register_create(self) -> None:
        """Register POST /posts."""
        @self.router.post(
            "",
            status_code=status.HTTP_201_CREATED,
            summary="Create a post",
            responses={
                201: {"description": "Post created successfully"},
                400: {"description": "Missing required fields"},
                500: {"description": "Internal server error"},
            },
        )
        async def create_post(payload: Optional[PostCreateRequest] = None):
            # An empty body is an empty payload; the handler reports the missing fields
            return await self.handler.create_post(
                payload if payload is not None else PostCreateRequest()
            )

    def _register_list(self) -> None:
        """Register GET /posts."""
        @self.router.get(
            "",
            summary="List posts",
            responses={
                200: {"description": "Posts retrieved successfully"},
                500: {"description": "Internal server error"},
            },
        )
        async def list_posts():
            return await self.handler.get_all_posts()

    def _register_get_by_id(self) -> None:
        """Register GET /posts/{post_id}."""
        @self.router.get(
            "/{post_id}",
            summary="Get post by ID",
            responses={
                200: {"description": "Post retrieved successfully"},
                400: {"description": "Invalid post ID"},
                404: {"description": "Post not found"},
                500: {"description": "Internal server error"},
            },
        )
        async def get_post(post_id: str):
            return await self.handler.get_post_by_id(post_id)


def build_post_router(
    database: Database, clock: Callable[[], datetime] = utc_now
) -> APIRouter:
    """Wire repository -> service -> handler and return the mounted routes."""
    repository = PostRepository(database.get_session, clock=clock)
    service = PostService(repository)
    handler = PostHandler(service)
    return PostRouter(handler).get_router()
