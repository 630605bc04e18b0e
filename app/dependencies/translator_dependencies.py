"""
Dependency injection for the translator gateway.

Provides factory functions wiring the shared HTTP client and the
immutable gateway configuration into the translator service.
"""

from functools import lru_cache

import httpx
from fastapi import Depends

from app.core.config import settings
from app.core.http_client import get_http_client
from app.interfaces.translator import ITranslatorService
from app.schemas.translator_schemas import GatewayConfig
from app.services.translator_service import AzureTranslatorService


@lru_cache
def get_gateway_config() -> GatewayConfig:
    """
    Build gateway configuration once from settings.
    :return: Frozen provider configuration
    """
    return GatewayConfig.from_settings(settings)


def get_translator_service(
    http_client: httpx.AsyncClient = Depends(get_http_client),
    config: GatewayConfig = Depends(get_gateway_config),
) -> ITranslatorService:
    """
    Create translator service with shared HTTP client and configuration.
    :param http_client: Shared outbound HTTP client
    :param config: Provider configuration
    :return: Translator service implementing ITranslatorService
    """
    return AzureTranslatorService(http_client=http_client, config=config)
