"""
Unit test fixtures for the translator gateway client.

The provider is replaced by httpx.MockTransport and the backoff sleep by
an AsyncMock, so retry tests run instantly and record their delays.
"""

from unittest.mock import AsyncMock

import httpx
import pytest
import pytest_asyncio
from pydantic import SecretStr

from app.schemas.translator_schemas import GatewayConfig
from app.services.translator_service import AzureTranslatorService
from tests.fixtures import ProviderStub


@pytest.fixture
def gateway_config():
    return GatewayConfig(endpoint="https://api.test.com", api_key=SecretStr("test-key"), region="test-region")


@pytest.fixture
def provider():
    """Empty provider stub; tests queue responses on provider.responses."""
    return ProviderStub()


@pytest.fixture
def mock_sleep():
    return AsyncMock()


@pytest_asyncio.fixture
async def translator_service(provider, gateway_config, mock_sleep):
    """Gateway client wired to the stubbed provider."""
    async with httpx.AsyncClient(transport=httpx.MockTransport(provider)) as client:
        yield AzureTranslatorService(http_client=client, config=gateway_config, sleep=mock_sleep)
