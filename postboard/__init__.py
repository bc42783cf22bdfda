"""Postboard: a small posts API on FastAPI and SQLModel."""

__version__ = "1.0.0"
