"""Pytest fixtures for FAAS service tests."""

from collections.abc import AsyncIterator

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from faas_service.config import Settings
from faas_service.main import create_app
from faas_service.service import DataService


@pytest.fixture()
def settings() -> Settings:
    """Settings independent of the process environment."""
    return Settings(
        PORT=9090,
        HOST="127.0.0.1",
        INSTANCE_ID="test-instance",
        SERVICE_NAME="faas-service",
        SERVICE_VERSION="1.0.0",
        DEFAULT_PAGE_LIMIT=10,
        MAX_PAGE_LIMIT=None,
        LOG_LEVEL="WARNING",
    )


@pytest.fixture()
def app(settings: Settings) -> FastAPI:
    """Return a freshly built application with an empty store."""
    return create_app(settings)


@pytest.fixture()
def service(app: FastAPI) -> DataService:
    return app.state.data_service


@pytest_asyncio.fixture()
async def async_client(app: FastAPI) -> AsyncIterator[AsyncClient]:
    """Provide an `httpx.AsyncClient` wired directly to the ASGI app."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as client:
        yield client
