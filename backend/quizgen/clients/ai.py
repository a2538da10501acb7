"""Chat-completion client for the supported AI providers."""

import logging
from dataclasses import dataclass
from typing import Any

import httpx

from quizgen.config import DEFAULT_PROVIDER, AIClientConfig
from quizgen.errors import ApiError, ConfigError, ShapeError, TransportError

from .base import ApiClient

logger = logging.getLogger(__name__)

QUIZ_EXPERT_SYSTEM_PROMPT = (
    "You are a helpful assistant, You are an expert in creating test questions "
    "for multiple choice questions."
)


@dataclass(frozen=True)
class ProviderSpec:
    """Request shape for one provider."""

    name: str
    base_url: str
    model: str
    system_prompt: str | None = None
    json_mode: bool = False


PROVIDERS: dict[str, ProviderSpec] = {
    "deepseek": ProviderSpec(
        name="deepseek",
        base_url="https://api.deepseek.com/v1",
        model="deepseek-chat",
        system_prompt=QUIZ_EXPERT_SYSTEM_PROMPT,
        json_mode=True,
    ),
    "openai": ProviderSpec(
        name="openai",
        base_url="https://api.openai.com/v1",
        model="gpt-3.5-turbo",
    ),
}


def _log_api_error(error: ApiError) -> None:
    """on_error hook: log the failure and let it propagate."""
    if error.has_response:
        logger.error(f"AI API Error: {error.status} {error.body}")
    elif isinstance(error, TransportError):
        logger.error(f"AI API Request Error: {error.message}")
    else:
        logger.error(f"AI API General Error: {error.message}")
    raise error


class AIClient:
    """Generates text with a chat-completion provider (DeepSeek or OpenAI)."""

    ENDPOINT = "/chat/completions"

    def __init__(self, config: AIClientConfig, transport: httpx.AsyncBaseTransport | None = None):
        provider = (config.provider or DEFAULT_PROVIDER).lower()
        if provider not in PROVIDERS:
            logger.warning(f"Unknown AI provider '{config.provider}', falling back to {DEFAULT_PROVIDER}")
            provider = DEFAULT_PROVIDER
        if not config.credential:
            raise ConfigError(f"No API key configured for the '{provider}' provider")

        self.provider = provider
        self.spec = PROVIDERS[provider]
        self.http = ApiClient(
            base_url=config.base_url or self.spec.base_url,
            headers={
                "Content-Type": "application/json",
                "Authorization": f"Bearer {config.credential}",
            },
            timeout_ms=config.timeout_ms,
            on_error=_log_api_error,
            transport=transport,
        )

    def build_payload(self, prompt: str, max_tokens: int = 1000, temperature: float = 0.7) -> dict[str, Any]:
        """Build the chat-completion request body for this provider."""
        messages = []
        if self.spec.system_prompt:
            messages.append({"role": "system", "content": self.spec.system_prompt})
        messages.append({"role": "user", "content": prompt})

        payload: dict[str, Any] = {
            "model": self.spec.model,
            "messages": messages,
            "max_tokens": max_tokens,
            "temperature": temperature,
        }
        if self.spec.json_mode:
            payload["response_format"] = {"type": "json_object"}
        return payload

    @staticmethod
    def extract_text(data: Any) -> str:
        """Return choices[0].message.content from a completion body.

        Raises ShapeError if the body does not have that structure.
        """
        try:
            content = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as e:
            raise ShapeError("Unexpected response shape from provider: no choices[0].message.content") from e
        if not isinstance(content, str):
            raise ShapeError(f"Unexpected response shape from provider: content is {type(content).__name__}")
        return content

    async def generate_text(self, prompt: str, max_tokens: int = 1000, temperature: float = 0.7) -> str:
        """Send one prompt and return the raw text of the first completion."""
        payload = self.build_payload(prompt, max_tokens=max_tokens, temperature=temperature)
        response = await self.http.post(self.ENDPOINT, payload)
        return self.extract_text(response.data)

    async def aclose(self) -> None:
        await self.http.aclose()

    async def __aenter__(self) -> "AIClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
