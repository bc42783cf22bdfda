"""Shared fixtures: a throwaway SQLite database and an HTTP client bound to the app."""

import os

# Settings are read from the environment; keep tests out of development mode
os.environ.setdefault("ENVIRONMENT", "test")

import pytest
from httpx import ASGITransport, AsyncClient

from postboard.core.config import Settings
from postboard.core.database import Database
from postboard.main import create_app


@pytest.fixture
def database_url(tmp_path):
    return f"sqlite+aiosqlite:///{tmp_path / 'test.db'}"


@pytest.fixture
def settings(database_url):
    return Settings(_env_file=None, ENVIRONMENT="test", PORT=3000, DATABASE_URL=database_url)


@pytest.fixture
async def database(database_url):
    db = Database(database_url)
    await db.create_all()
    yield db
    await db.disconnect()


@pytest.fixture
def app(settings, database):
    return create_app(settings, database=database)


@pytest.fixture
async def client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
def new_post():
    return {
        "title": "Test Post",
        "content": "This is a test post content",
        "authorId": "test-author",
    }
