from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from app.core.constants import DEFAULT_CORS_ORIGINS, DEFAULT_TRANSLATOR_TIMEOUT_SECONDS


class Settings(BaseSettings):
    """Application settings"""

    translator_endpoint: str
    translator_api_key: SecretStr = SecretStr("")
    translator_region: str = ""
    translator_timeout_seconds: float = DEFAULT_TRANSLATOR_TIMEOUT_SECONDS

    app_name: str = "Translator Gateway"
    debug: bool = False
    log_level: str = "INFO"

    cors_origins: list[str] = DEFAULT_CORS_ORIGINS

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore")

    @field_validator("translator_endpoint")
    @classmethod
    def endpoint_must_not_be_blank(cls, value: str) -> str:
        """Refuse to start without a provider endpoint."""
        if not value.strip():
            raise ValueError("Translator endpoint not configured")
        return value.strip()


settings = Settings()
