from typing import Any

from pydantic import BaseModel, ConfigDict, Field, SecretStr, model_validator
from pydantic.alias_generators import to_camel

from app.core.config import Settings


class DetectedLanguage(BaseModel):
    """
    Detected language response.
    """

    language: str = Field(description="BCP-47 language code or 'unknown'")
    score: float = Field(ge=0.0, le=1.0, description="Detection confidence")

    model_config = ConfigDict(frozen=True)


class TranslationResult(BaseModel):
    """
    Translation response.
    """

    translated_text: str = Field(description="Translated text")
    source_language: str = Field(description="Detected or supplied source language, or 'unknown'")
    target_language: str = Field(description="Target language as requested by the caller")

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class GatewayConfig(BaseModel):
    """
    Connection settings for the translation provider, fixed for the process lifetime.
    """

    endpoint: str
    api_key: SecretStr
    region: str

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_settings(cls, settings: Settings) -> "GatewayConfig":
        return cls(
            endpoint=settings.translator_endpoint,
            api_key=settings.translator_api_key,
            region=settings.translator_region,
        )


# ============================================================================
# Provider wire models
# ============================================================================


class ProviderModel(BaseModel):
    """Base for provider payloads: camelCase keys, matched case-insensitively."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore", frozen=True)

    @model_validator(mode="before")
    @classmethod
    def match_keys_case_insensitively(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data

        aliases = {}
        for name, field in cls.model_fields.items():
            alias = field.alias or name
            aliases[alias.lower()] = alias

        return {aliases.get(key.lower(), key) if isinstance(key, str) else key: value for key, value in data.items()}


class DetectResponseItem(ProviderModel):
    language: str | None = None
    score: float = Field(0.0, ge=0.0, le=1.0)
    is_translation_supported: bool = False
    is_transliteration_supported: bool = False


class ProviderDetectedLanguage(ProviderModel):
    language: str | None = None
    score: float | None = None


class ProviderTranslation(ProviderModel):
    text: str | None = None
    to: str | None = None


class TranslateResponseItem(ProviderModel):
    detected_language: ProviderDetectedLanguage | None = None
    translations: list[ProviderTranslation] | None = None
