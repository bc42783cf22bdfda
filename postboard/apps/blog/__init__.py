"""Blog app."""

from .routers.post_router import build_post_router

__all__ = ["build_post_router"]
