"""Tests for application exception handlers."""

from __future__ import annotations

import pytest
from fastapi import FastAPI, Query
from httpx import ASGITransport, AsyncClient

from forum_service.app.exception_handlers import (
    INTERNAL_ERROR_MESSAGE,
    configure_exception_handlers,
)
from forum_service.app.middleware import configure_middleware
from forum_service.core.database.exceptions import NotFoundError
from forum_service.core.exceptions import BadRequestException, NotFoundException


@pytest.fixture
def app() -> FastAPI:
    application = FastAPI()
    configure_middleware(application)
    configure_exception_handlers(application)

    @application.get("/bad")
    async def bad():
        raise BadRequestException(detail="conflicting cursors", type="conflicting-cursors")

    @application.get("/missing")
    async def missing():
        raise NotFoundException(detail="Subreddit not found")

    @application.get("/repo-missing")
    async def repo_missing():
        raise NotFoundError("Post", {"id": "abc"})

    @application.get("/boom")
    async def boom():
        msg = "database exploded at host 10.0.0.1"
        raise RuntimeError(msg)

    @application.get("/typed")
    async def typed(count: int = Query()):
        return {"count": count}

    return application


@pytest.fixture
async def client(app: FastAPI):
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


async def test_app_exception_renders_problem_detail(client: AsyncClient) -> None:
    response = await client.get("/bad", headers={"X-Request-ID": "req-123"})

    assert response.status_code == 400
    body = response.json()
    assert body["error"] == "conflicting cursors"
    assert body["detail"] == "conflicting cursors"
    assert body["type"] == "conflicting-cursors"
    assert body["title"] == "Bad Request"
    assert body["instance"] == "/bad"
    assert body["request_id"] == "req-123"


async def test_not_found_exception(client: AsyncClient) -> None:
    response = await client.get("/missing")

    assert response.status_code == 404
    assert response.json()["error"] == "Subreddit not found"


async def test_repository_not_found_error_is_a_404(client: AsyncClient) -> None:
    response = await client.get("/repo-missing")

    assert response.status_code == 404
    assert response.json()["error"] == "Post not found"


async def test_unexpected_error_hides_internals(client: AsyncClient) -> None:
    response = await client.get("/boom")

    assert response.status_code == 500
    body = response.json()
    assert body["error"] == INTERNAL_ERROR_MESSAGE
    assert "10.0.0.1" not in response.text


async def test_validation_error_lists_fields(client: AsyncClient) -> None:
    response = await client.get("/typed", params={"count": "many"})

    assert response.status_code == 422
    body = response.json()
    assert body["type"] == "validation-error"
    assert body["errors"][0]["field"] == "query.count"
    assert body["error"].startswith("Request validation failed")
