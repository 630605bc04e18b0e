"""
Translator API endpoints.

Thin boundary over the translator service: detect the language of a text
or translate it. Service errors are not caught here; the exception
handlers registered in main.py turn them into HTTP responses.
"""

from fastapi import APIRouter, Body, Depends, Query

from app.dependencies.translator_dependencies import get_translator_service
from app.interfaces.translator import ITranslatorService
from app.schemas.translator_schemas import DetectedLanguage, TranslationResult

router = APIRouter(prefix="/translator", tags=["translator"])


@router.post("/detect", response_model=DetectedLanguage)
async def detect_language(
    text: str = Body(..., description="Text to analyze"),
    translator: ITranslatorService = Depends(get_translator_service),
) -> DetectedLanguage:
    """
    Detect the language of a text.

    Args:
        text: Raw text sent as a JSON string body
        translator: Translator service instance

    Returns:
        Detected language code and confidence score
    """
    return await translator.detect_language(text)


@router.post("/translate", response_model=TranslationResult)
async def translate(
    text: str = Body(..., description="Text to translate"),
    target_language: str = Query(..., alias="targetLanguage", description="Target language code"),
    source_language: str | None = Query(None, alias="sourceLanguage", description="Source language code"),
    translator: ITranslatorService = Depends(get_translator_service),
) -> TranslationResult:
    """
    Translate a text into the target language.

    Args:
        text: Raw text sent as a JSON string body
        target_language: Target language code
        source_language: Source language code (provider auto-detects if omitted)
        translator: Translator service instance

    Returns:
        Translated text with source and target language
    """
    return await translator.translate_text(text, target_language, source_language)
