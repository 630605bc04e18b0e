"""
Azure Translator gateway client.

Sends single-item detect/translate batches to the provider, retries on
rate limiting with exponential backoff and normalizes the responses into
DetectedLanguage and TranslationResult.
"""

import asyncio
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

import httpx
import structlog
from pydantic import TypeAdapter, ValidationError
from tenacity import AsyncRetrying, RetryCallState, retry_if_exception_type, stop_after_attempt, wait_exponential

from app.core.constants import (
    API_KEY_PREFIX_LENGTH,
    BACKOFF_MULTIPLIER,
    DETECT_ROUTE,
    INITIAL_BACKOFF_SECONDS,
    MAX_ATTEMPTS,
    RATE_LIMIT_STATUS_CODE,
    SUBSCRIPTION_KEY_HEADER,
    SUBSCRIPTION_REGION_HEADER,
    TEXT_PREVIEW_LENGTH,
    TRANSLATE_ROUTE,
    TRANSLATOR_API_VERSION,
    UNKNOWN_LANGUAGE,
)
from app.core.exceptions import (
    GatewayException,
    InvalidArgumentException,
    MalformedResponseException,
    RateLimitedException,
    TransportFailureException,
)
from app.interfaces.translator import ITranslatorService
from app.schemas.translator_schemas import (
    DetectedLanguage,
    DetectResponseItem,
    GatewayConfig,
    TranslateResponseItem,
    TranslationResult,
)

logger = structlog.get_logger(__name__)

T = TypeVar("T")

_detect_adapter = TypeAdapter(list[DetectResponseItem])
_translate_adapter = TypeAdapter(list[TranslateResponseItem])


def text_preview(text: str) -> str:
    """Shorten text for log output."""
    if len(text) > TEXT_PREVIEW_LENGTH:
        return text[:TEXT_PREVIEW_LENGTH] + "..."
    return text


class AzureTranslatorService(ITranslatorService):
    """Gateway client for the Azure Translator v3.0 REST API."""

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        config: GatewayConfig,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        """
        Initialize translator gateway client.

        Args:
            http_client: Shared async HTTP client
            config: Provider endpoint, subscription key and region
            sleep: Coroutine used to wait between rate-limited attempts
        """
        self.http_client = http_client
        self.config = config
        self._sleep = sleep

        api_key = config.api_key.get_secret_value()
        logger.debug(
            "translator_client_initialized",
            endpoint=config.endpoint,
            region=config.region,
            key_prefix=api_key[:API_KEY_PREFIX_LENGTH],
        )

    async def detect_language(self, text: str) -> DetectedLanguage:
        if not text or not text.strip():
            raise InvalidArgumentException("Text cannot be empty", argument_name="text")

        try:
            items = await self._send_request(DETECT_ROUTE, {}, text, _detect_adapter)
        except Exception as e:
            logger.error("language_detection_failed", text_preview=text_preview(text), error=str(e))
            raise

        detection = items[0] if items else None
        logger.info("language_detected", detection=detection)

        if detection is None:
            return DetectedLanguage(language=UNKNOWN_LANGUAGE, score=0.0)

        return DetectedLanguage(language=detection.language or UNKNOWN_LANGUAGE, score=detection.score)

    async def translate_text(
        self,
        text: str,
        target_language: str,
        source_language: str | None = None,
    ) -> TranslationResult:
        if not text or not text.strip():
            raise InvalidArgumentException("Text cannot be empty", argument_name="text")
        if not target_language or not target_language.strip():
            raise InvalidArgumentException("Target language cannot be empty", argument_name="target_language")

        if source_language is not None and not source_language.strip():
            source_language = None

        params = {"to": target_language}
        if source_language:
            params["from"] = source_language

        try:
            items = await self._send_request(TRANSLATE_ROUTE, params, text, _translate_adapter)
        except Exception as e:
            logger.error(
                "translation_failed",
                text_preview=text_preview(text),
                target_language=target_language,
                error=str(e),
            )
            raise

        first = items[0] if items else None

        translated_text = None
        detected_source = None
        if first is not None:
            if first.translations:
                translated_text = first.translations[0].text
            if first.detected_language is not None:
                detected_source = first.detected_language.language

        return TranslationResult(
            translated_text=translated_text or text,
            source_language=detected_source or source_language or UNKNOWN_LANGUAGE,
            target_language=target_language,
        )

    async def _send_request(
        self,
        route: str,
        params: dict[str, str],
        text: str,
        adapter: TypeAdapter[T],
    ) -> T:
        """
        Send a single-item batch, retrying on 429, and parse the response body.
        :param route: Provider route, e.g. '/detect'
        :param params: Query parameters in addition to the API version
        :param text: Text to send as the only batch item
        :param adapter: Type adapter for the expected response shape
        :return: Parsed response
        """
        retrying = AsyncRetrying(
            stop=stop_after_attempt(MAX_ATTEMPTS),
            wait=wait_exponential(multiplier=INITIAL_BACKOFF_SECONDS, exp_base=BACKOFF_MULTIPLIER),
            retry=retry_if_exception_type(RateLimitedException),
            before_sleep=self._log_rate_limited,
            sleep=self._sleep,
            reraise=True,
        )

        response = await retrying(self._send_once, route, params, text)
        return self._parse_response(response, adapter)

    async def _send_once(self, route: str, params: dict[str, str], text: str) -> httpx.Response:
        """One outbound attempt. Raises typed errors for any non-2xx status."""
        headers = {
            SUBSCRIPTION_KEY_HEADER: self.config.api_key.get_secret_value(),
            SUBSCRIPTION_REGION_HEADER: self.config.region,
            "Content-Type": "application/json",
        }
        query = {"api-version": TRANSLATOR_API_VERSION, **params}

        logger.debug("translator_request", route=route, params=query)

        try:
            response = await self.http_client.post(
                self._url_for(route), params=query, headers=headers, json=[{"Text": text}]
            )
        except httpx.TransportError as e:
            raise TransportFailureException(f"Could not reach translation API: {e}", original_error=e) from e

        logger.debug("translator_response", route=route, status_code=response.status_code)

        if response.is_success:
            return response

        body = response.text
        if response.status_code == RATE_LIMIT_STATUS_CODE:
            raise RateLimitedException(response.status_code, body)

        logger.error("translator_api_error", route=route, status_code=response.status_code, body=body)
        raise GatewayException(response.status_code, body)

    def _url_for(self, route: str) -> str:
        return f"{self.config.endpoint.rstrip('/')}{route}"

    @staticmethod
    def _parse_response(response: httpx.Response, adapter: TypeAdapter[T]) -> T:
        try:
            payload: Any = response.json()
        except ValueError as e:
            raise MalformedResponseException(
                "Translation API returned a non-JSON body", body=response.text, original_error=e
            ) from e

        try:
            return adapter.validate_python(payload)
        except ValidationError as e:
            raise MalformedResponseException(
                f"Translation API response has unexpected shape: {e.error_count()} error(s)",
                body=response.text,
                original_error=e,
            ) from e

    @staticmethod
    def _log_rate_limited(retry_state: RetryCallState) -> None:
        delay = retry_state.next_action.sleep if retry_state.next_action else 0.0
        logger.warning(
            "translator_rate_limited",
            delay_seconds=delay,
            attempt=retry_state.attempt_number,
            max_attempts=MAX_ATTEMPTS,
        )
