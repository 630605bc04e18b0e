import httpx
from fastapi import Request

from app.core.config import Settings


def create_http_client(settings: Settings) -> httpx.AsyncClient:
    """
    Create the shared outbound client for the translation provider.
    Request URLs are built from GatewayConfig, so the client has no base_url.
    :param settings: Application settings
    :return: Async HTTP client
    """
    return httpx.AsyncClient(timeout=settings.translator_timeout_seconds)


def get_http_client(request: Request) -> httpx.AsyncClient:
    """HTTP client dependency, created in the application lifespan."""
    return request.app.state.http_client
