import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from postboard.core.database import Database
from postboard.core.exceptions import AppException, RepositoryError
from postboard.core.response.handlers import register_exception_handlers
from postboard.main import create_app


class Teapot(Exception):
    status_code = 418
    message = "I am a teapot"


class WeirdStatus(Exception):
    status_code = "broken"


@pytest.fixture
def error_app():
    app = FastAPI()
    register_exception_handlers(app)

    @app.get("/app-error")
    async def app_error():
        raise AppException("Author is banned", status_code=403)

    @app.get("/repository-error")
    async def repository_error():
        raise RepositoryError("Database error during create: locked")

    @app.get("/teapot")
    async def teapot():
        raise Teapot()

    @app.get("/weird")
    async def weird():
        raise WeirdStatus("internal detail")

    @app.get("/crash")
    async def crash():
        raise RuntimeError("secret internals")

    @app.get("/blank")
    async def blank():
        raise RuntimeError()

    return app


@pytest.fixture
async def error_client(error_app):
    # Starlette re-raises unhandled errors after responding; keep the response
    transport = ASGITransport(app=error_app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


async def test_app_exception_uses_its_status_and_message(error_client):
    response = await error_client.get("/app-error")

    assert response.status_code == 403
    assert response.json() == {
        "success": False,
        "message": "Author is banned",
        "data": None,
        "statusCode": 403,
    }


async def test_repository_error_is_500(error_client):
    response = await error_client.get("/repository-error")

    assert response.status_code == 500
    assert response.json()["message"] == "Database error during create: locked"


async def test_foreign_exception_with_status_attribute(error_client):
    response = await error_client.get("/teapot")

    assert response.status_code == 418
    assert response.json()["message"] == "I am a teapot"


async def test_invalid_status_attribute_falls_back_to_500(error_client):
    response = await error_client.get("/weird")

    assert response.status_code == 500
    assert response.json()["message"] == "internal detail"


async def test_unexpected_exception_reports_its_text(error_client):
    response = await error_client.get("/crash")

    assert response.status_code == 500
    assert response.json() == {
        "success": False,
        "message": "secret internals",
        "data": None,
        "statusCode": 500,
    }


async def test_unexpected_exception_without_text_is_generic(error_client):
    response = await error_client.get("/blank")

    assert response.status_code == 500
    assert response.json()["message"] == "An unexpected error occurred"


async def test_storage_failure_through_full_stack(settings, tmp_path):
    # Tables never created, so every query fails inside the repository
    database = Database(f"sqlite+aiosqlite:///{tmp_path / 'missing.db'}")
    app = create_app(settings, database=database)
    try:
        async with AsyncClient(
            transport=ASGITransport(app=app), base_url="http://test",
        ) as client:
            listing = await client.get("/api/posts")
            created = await client.post(
                "/api/posts", json={"title": "T", "content": "C", "authorId": "A"},
            )
    finally:
        await database.disconnect()

    assert listing.status_code == 500
    assert listing.json()["success"] is False
    assert listing.json()["message"].startswith("Database error during find_all")
    assert created.status_code == 500
    assert created.json()["statusCode"] == 500
