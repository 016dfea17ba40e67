"""Shared test fixtures for rfc7617 tests."""

import base64
import logging
from collections.abc import AsyncIterator

import httpx
import pytest_asyncio
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Route

from rfc7617.constants import SCOPE_BASIC_CREDENTIALS
from rfc7617.middleware.asgi import BasicAuthMiddleware, static_verifier

# Enable rfc7617 debug logging during tests
logging.getLogger("rfc7617").setLevel(logging.DEBUG)
logging.getLogger("rfc7617").addHandler(logging.StreamHandler())


# === Test Credentials ===

TEST_USER = "admin"
TEST_PASSWORD = "s3cret:with:colons"
TEST_REALM = "admin area"


def basic_header(user_pass: bytes) -> str:
    """Build an Authorization value from raw user-pass octets (bypasses validation)."""
    return "Basic " + base64.b64encode(user_pass).decode("ascii")


# === ASGI App Fixtures ===


async def _whoami(request: Request) -> JSONResponse:
    credentials = request.scope[SCOPE_BASIC_CREDENTIALS]
    return JSONResponse({"user": credentials.user_id})


async def _health(request: Request) -> JSONResponse:
    return JSONResponse({"status": "ok"})


def build_app(**middleware_kwargs: object) -> Starlette:
    """Starlette app protected by BasicAuthMiddleware."""
    app = Starlette(
        routes=[
            Route("/whoami", _whoami),
            Route("/health", _health),
        ]
    )
    app.add_middleware(
        BasicAuthMiddleware,
        verifier=static_verifier(TEST_USER, TEST_PASSWORD),
        realm=TEST_REALM,
        **middleware_kwargs,
    )
    return app


@pytest_asyncio.fixture
async def client() -> AsyncIterator[httpx.AsyncClient]:
    """httpx client talking to the protected app in-process."""
    app = build_app(charset="UTF-8", exclude_paths=["/health"])
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as c:
        yield c
