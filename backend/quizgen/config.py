"""Application configuration settings."""

import logging

from pydantic import BaseModel
from pydantic_settings import BaseSettings

from quizgen.errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_PROVIDER = "deepseek"
KNOWN_PROVIDERS = ("deepseek", "openai")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_name: str = "AI Quiz Generator"
    debug: bool = False

    # AI provider
    ai_provider: str = DEFAULT_PROVIDER  # deepseek | openai
    deepseek_api_key: str | None = None
    openai_api_key: str | None = None
    deepseek_base_url: str | None = None
    openai_base_url: str | None = None
    ai_timeout_ms: int = 60000  # generation calls are slow

    # Quiz persistence backend
    quiz_api_url: str = "https://api.example.com"
    quiz_api_timeout_ms: int = 30000

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


class AIClientConfig(BaseModel):
    """Explicit configuration for an AIClient."""

    provider: str = DEFAULT_PROVIDER
    credential: str | None = None
    base_url: str | None = None
    timeout_ms: int = 60000

    @classmethod
    def from_settings(cls, settings: Settings, provider: str | None = None) -> "AIClientConfig":
        """Pick the credential and base URL for a provider from settings.

        Raises ConfigError if the provider's API key is not set.
        """
        provider = (provider or settings.ai_provider or DEFAULT_PROVIDER).lower()
        if provider not in KNOWN_PROVIDERS:
            logger.warning(f"Unknown AI provider '{provider}', falling back to {DEFAULT_PROVIDER}")
            provider = DEFAULT_PROVIDER
        if provider == "openai":
            credential, base_url, env_name = settings.openai_api_key, settings.openai_base_url, "OPENAI_API_KEY"
        else:
            credential, base_url, env_name = settings.deepseek_api_key, settings.deepseek_base_url, "DEEPSEEK_API_KEY"

        if not credential:
            raise ConfigError(f"{env_name} is not set; cannot use the '{provider}' provider")

        return cls(
            provider=provider,
            credential=credential,
            base_url=base_url,
            timeout_ms=settings.ai_timeout_ms,
        )


settings = Settings()
