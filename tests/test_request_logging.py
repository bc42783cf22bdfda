import json
import logging

import pytest
from httpx import ASGITransport, AsyncClient

from postboard.core.observability import JSONFormatter
from postboard.main import create_app

LOGGER = "postboard.core.middlewares.request_logging"


@pytest.fixture
def request_logs(caplog):
    caplog.set_level(logging.INFO, logger=LOGGER)
    return caplog


def _records(caplog):
    return [r for r in caplog.records if r.name == LOGGER]


async def test_logs_entry_and_completion(client, request_logs):
    response = await client.get("/api/posts")

    assert response.status_code == 200
    entry, done = _records(request_logs)
    assert entry.method == "GET"
    assert entry.path == "/api/posts"
    assert "GET /api/posts" in entry.getMessage()
    assert done.status_code == 200
    assert done.duration_ms >= 0
    assert "- 200 -" in done.getMessage()


async def test_logs_error_status(client, request_logs):
    response = await client.get("/api/posts/abc")

    assert response.status_code == 400
    assert _records(request_logs)[-1].status_code == 400


async def test_logs_unhandled_exception_as_500(settings, database, request_logs):
    app = create_app(settings, database=database)

    @app.get("/boom")
    async def boom():
        raise RuntimeError("kaboom")

    # The server error handler re-raises after responding; keep the response
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        response = await c.get("/boom")

    assert response.status_code == 500
    assert response.json()["success"] is False
    done = _records(request_logs)[-1]
    assert done.levelno == logging.ERROR
    assert done.status_code == 500
    assert done.path == "/boom"
    assert "- 500 -" in done.getMessage()


async def test_logging_does_not_change_response(client, request_logs, new_post):
    response = await client.post("/api/posts", json=new_post)

    assert response.status_code == 201
    assert response.json()["data"]["title"] == new_post["title"]


def test_json_formatter_includes_request_fields():
    record = logging.LogRecord(LOGGER, logging.INFO, __file__, 1, "GET /x - 200", None, None)
    record.method = "GET"
    record.path = "/x"
    record.status_code = 200
    record.duration_ms = 1.5

    line = json.loads(JSONFormatter().format(record))

    assert line["level"] == "INFO"
    assert line["message"] == "GET /x - 200"
    assert line["status_code"] == 200
    assert line["duration_ms"] == 1.5
    assert "timestamp" in line
