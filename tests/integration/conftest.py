"""In-process API under test for integration scenarios.

A small FastAPI app served through ``httpx.ASGITransport``: login issues a
session cookie, items are created and read back, and a couple of routes
return non-JSON bodies.
"""

from __future__ import annotations

import itertools
from typing import Dict

import httpx
import pytest
from fastapi import FastAPI, HTTPException, Request, Response
from fastapi.responses import PlainTextResponse

SERVICE_URL = "http://testserver"


def create_app() -> FastAPI:
    app = FastAPI()
    sessions: Dict[str, str] = {}
    items: Dict[str, dict] = {}
    ids = itertools.count(1)

    def _user(request: Request) -> str:
        token = request.cookies.get("session")
        if not token or token not in sessions:
            raise HTTPException(status_code=401, detail="not logged in")
        return sessions[token]

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    @app.get("/ping", response_class=PlainTextResponse)
    def ping() -> str:
        return "pong"

    @app.post("/login")
    async def login(request: Request, response: Response) -> dict:
        payload = await request.json()
        user = payload["user"]
        token = f"tok-{user}"
        sessions[token] = user
        response.set_cookie("theme", "dark")
        response.set_cookie("session", token, httponly=True)
        return {"user": user}

    @app.get("/me")
    def me(request: Request) -> dict:
        return {"user": _user(request)}

    @app.post("/items", status_code=201)
    async def create_item(request: Request) -> dict:
        owner = _user(request)
        payload = await request.json()
        item_id = f"item-{next(ids)}"
        items[item_id] = {"id": item_id, "owner": owner, **payload}
        return items[item_id]

    @app.get("/items/{item_id}")
    def read_item(item_id: str, request: Request) -> dict:
        _user(request)
        if item_id not in items:
            raise HTTPException(status_code=404, detail="no such item")
        return items[item_id]

    @app.get("/search")
    def search(request: Request) -> dict:
        return {"params": dict(request.query_params)}

    @app.delete("/items/{item_id}")
    def delete_item(item_id: str, request: Request) -> Response:
        _user(request)
        items.pop(item_id, None)
        return Response(status_code=204)

    return app


@pytest.fixture
def asgi_transport() -> httpx.ASGITransport:
    return httpx.ASGITransport(app=create_app())


@pytest.fixture
def service_url() -> str:
    return SERVICE_URL
