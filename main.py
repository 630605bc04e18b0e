from contextlib import asynccontextmanager
from datetime import datetime, timezone

import structlog
import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api.endpoints.translator_router import router as translator_router
from app.core.config import settings
from app.core.exceptions import (
    DomainException,
    GatewayException,
    InvalidArgumentException,
    MalformedResponseException,
    RateLimitedException,
    TransportFailureException,
)
from app.core.http_client import create_http_client
from app.core.logging_config import configure_logging

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan event handler for startup and shutdown.
    """
    configure_logging(settings.log_level)
    app.state.http_client = create_http_client(settings)
    logger.info(
        "translator_gateway_started",
        endpoint=settings.translator_endpoint,
        region=settings.translator_region,
    )
    yield
    await app.state.http_client.aclose()
    logger.info("translator_gateway_stopped")


app = FastAPI(
    title=settings.app_name,
    description="Language detection and translation proxy for Azure Translator",
    docs_url="/docs" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ============================================================================
# Exception Handlers (Convert Domain Exceptions → HTTP Responses)
# ============================================================================


def _error_response(status_code: int, exc: DomainException) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "detail": exc.message,
            "error_code": exc.error_code,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        },
    )


@app.exception_handler(InvalidArgumentException)
async def invalid_argument_exception_handler(request: Request, exc: InvalidArgumentException) -> JSONResponse:
    """Handle empty or whitespace-only input."""
    return _error_response(status.HTTP_400_BAD_REQUEST, exc)


@app.exception_handler(RateLimitedException)
async def rate_limited_exception_handler(request: Request, exc: RateLimitedException) -> JSONResponse:
    """Handle provider rate limiting that outlasted all retries."""
    return _error_response(status.HTTP_429_TOO_MANY_REQUESTS, exc)


@app.exception_handler(GatewayException)
async def gateway_exception_handler(request: Request, exc: GatewayException) -> JSONResponse:
    """Handle non-success responses from the provider."""
    return _error_response(status.HTTP_502_BAD_GATEWAY, exc)


@app.exception_handler(MalformedResponseException)
async def malformed_response_exception_handler(request: Request, exc: MalformedResponseException) -> JSONResponse:
    """Handle provider bodies that do not match the expected shape."""
    return _error_response(status.HTTP_502_BAD_GATEWAY, exc)


@app.exception_handler(TransportFailureException)
async def transport_failure_exception_handler(request: Request, exc: TransportFailureException) -> JSONResponse:
    """Handle network failures reaching the provider."""
    return _error_response(status.HTTP_504_GATEWAY_TIMEOUT, exc)


@app.exception_handler(DomainException)
async def domain_exception_handler(request: Request, exc: DomainException) -> JSONResponse:
    """Fallback handler for all other domain exceptions."""
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, exc)


# ============================================================================
# Router Registration
# ============================================================================

API_PREFIX = "/api"

app.include_router(translator_router, prefix=API_PREFIX)


@app.get("/")
def root():
    return {
        "message": f"Welcome to {settings.app_name}",
        "status": "running",
        "version": "1.0.0",
        "endpoints": {
            "detect": f"{API_PREFIX}/translator/detect",
            "translate": f"{API_PREFIX}/translator/translate",
        },
    }


@app.get("/health")
async def health_check():
    return {"status": "healthy"}


if __name__ == "__main__":
    print("Detect Endpoint: http://localhost:8000/api/translator/detect")
    print("Translate Endpoint: http://localhost:8000/api/translator/translate?targetLanguage=es")

    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=settings.debug)
