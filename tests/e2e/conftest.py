"""
E2E test fixtures with the FastAPI app and HTTP clients.

E2E tests drive the full request/response cycle through routing, request
validation, response serialization and exception handlers.
- async_client: translator service replaced by an AsyncMock override
- live_client: real lifespan and wiring, provider stubbed via MockTransport
"""

from unittest.mock import AsyncMock

import httpx
import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient

import main
from app.dependencies.translator_dependencies import get_translator_service
from app.interfaces.translator import ITranslatorService
from tests.fixtures import ProviderStub


@pytest.fixture
def mock_translator_service():
    """Translator service mock honoring the ITranslatorService interface."""
    return AsyncMock(spec=ITranslatorService)


@pytest_asyncio.fixture
async def async_client(mock_translator_service):
    """
    Async HTTP client for E2E testing with dependency override.
    """
    main.app.dependency_overrides[get_translator_service] = lambda: mock_translator_service

    async with AsyncClient(transport=ASGITransport(app=main.app), base_url="http://test") as client:
        yield client

    main.app.dependency_overrides.clear()


@pytest.fixture
def provider():
    """Stubbed translation provider behind the app's real HTTP client."""
    return ProviderStub()


@pytest.fixture
def live_client(provider, monkeypatch):
    """
    HTTP client running the real lifespan and dependency wiring.

    Only the outbound transport is replaced: the lifespan builds its shared
    client around the provider stub and closes it on shutdown.
    """
    monkeypatch.setattr(
        main,
        "create_http_client",
        lambda settings: httpx.AsyncClient(transport=httpx.MockTransport(provider)),
    )

    with TestClient(main.app) as client:
        yield client
