"""
Translator interface for language detection and text translation.

The request handler depends on this interface only, so tests and
alternative deployments can swap the gateway client through FastAPI
dependency overrides.
"""

from abc import ABC, abstractmethod

from app.schemas.translator_schemas import DetectedLanguage, TranslationResult


class ITranslatorService(ABC):
    """Abstract interface for the translation gateway client."""

    @abstractmethod
    async def detect_language(self, text: str) -> DetectedLanguage:
        """
        Detect the language of given text.

        Args:
            text: Text to analyze

        Returns:
            Detected language code and confidence score

        Raises:
            InvalidArgumentException: If text is empty
            TranslatorGatewayException: If the provider rejects the request
        """
        pass

    @abstractmethod
    async def translate_text(
        self,
        text: str,
        target_language: str,
        source_language: str | None = None,
    ) -> TranslationResult:
        """
        Translate text to target language.

        Args:
            text: Text to translate
            target_language: Target language code (e.g., 'de', 'fr')
            source_language: Source language code (auto-detect if None)

        Returns:
            Translated text with source and target language

        Raises:
            InvalidArgumentException: If text or target language is empty
            TranslatorGatewayException: If the provider rejects the request
        """
        pass
