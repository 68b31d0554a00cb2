"""Shared fixtures: raw Starlette requests and a test app with failing routes."""

import logging

import pytest
from fastapi import FastAPI, HTTPException, Request
from httpx import ASGITransport, AsyncClient
from starlette.requests import Request as StarletteRequest

from strataforge.errors import ForbiddenError, InternalError, NotFoundError, UnauthorizedError
from strataforge.main import create_app

ERROR_LOGGER = "strataforge.errors"


def make_request(
    method: str = "GET",
    path: str = "/test",
    headers: dict[str, str] | None = None,
    client: tuple[str, int] | None = ("203.0.113.7", 51000),
) -> StarletteRequest:
    scope = {
        "type": "http",
        "http_version": "1.1",
        "method": method,
        "scheme": "http",
        "server": ("testserver", 80),
        "root_path": "",
        "path": path,
        "raw_path": path.encode(),
        "query_string": b"",
        "headers": [(k.lower().encode(), v.encode()) for k, v in (headers or {}).items()],
        "client": client,
    }
    return StarletteRequest(scope)


def make_test_app(**kwargs) -> FastAPI:
    """Build the real app plus one route per failure classification."""
    app = create_app(**kwargs)

    @app.get("/forbidden")
    async def forbidden():
        raise ForbiddenError("You cannot see this project")

    @app.get("/unauthorized")
    async def unauthorized():
        raise UnauthorizedError()

    @app.get("/notfound")
    async def notfound():
        raise NotFoundError("No such page")

    @app.get("/error")
    async def error():
        raise InternalError("query failed", cause=TimeoutError("db timeout"))

    @app.get("/items/{item_id}")
    async def item(item_id: int):
        raise NotFoundError(f"Item {item_id} not found")

    @app.get("/maintenance")
    async def maintenance():
        raise HTTPException(503, "maintenance", headers={"Retry-After": "30"})

    @app.get("/crash")
    async def crash():
        raise RuntimeError("boom")

    @app.get("/direct/forbidden")
    async def direct_forbidden(request: Request):
        return request.app.state.error_responder.forbidden(request)

    return app


def client_for(app: FastAPI) -> AsyncClient:
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    return AsyncClient(transport=transport, base_url="http://test")


def error_records(caplog) -> list[logging.LogRecord]:
    return [r for r in caplog.records if r.name == ERROR_LOGGER]


@pytest.fixture
def error_caplog(caplog):
    caplog.set_level(logging.DEBUG, logger=ERROR_LOGGER)
    return caplog
