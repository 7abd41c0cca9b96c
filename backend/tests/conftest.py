from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from realip.config import get_settings
from tests.apps import TEST_CLIENT_HOST, TEST_CLIENT_PORT, app, bare_app


async def _client_for(asgi_app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    transport = ASGITransport(
        app=asgi_app, client=(TEST_CLIENT_HOST, TEST_CLIENT_PORT)
    )
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    """Client for the app with RealIPMiddleware installed."""
    async for ac in _client_for(app):
        yield ac


@pytest_asyncio.fixture
async def bare_client() -> AsyncGenerator[AsyncClient, None]:
    """Client for the app without the middleware."""
    async for ac in _client_for(bare_app):
        yield ac


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Drop cached settings so env overrides in one test don't leak."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
