"""REST client for the quiz persistence backend."""

import logging
from typing import Any

import httpx
from pydantic import BaseModel

from quizgen.errors import ApiError

from .base import ApiClient, ApiResponse, RequestConfig

logger = logging.getLogger(__name__)


def _log_request(config: RequestConfig) -> RequestConfig:
    logger.debug(f"Request being sent: {config.method} {config.url}")
    return config


def _log_response(response: ApiResponse) -> ApiResponse:
    logger.debug(f"Response received: {response.status}")
    return response


def _log_error(error: ApiError) -> None:
    logger.error(f"Quiz API Error: {error.message}")
    raise error


def _as_body(quiz: BaseModel | dict[str, Any]) -> dict[str, Any]:
    if isinstance(quiz, BaseModel):
        return quiz.model_dump(by_alias=True, exclude_none=True)
    return quiz


class QuizAPIClient:
    """CRUD operations on saved quizzes. Every method returns the response body."""

    def __init__(
        self,
        base_url: str,
        timeout_ms: int = 30000,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.http = ApiClient(
            base_url=base_url,
            headers={
                "Content-Type": "application/json",
                "Accept": "application/json",
            },
            timeout_ms=timeout_ms,
            on_request=_log_request,
            on_response=_log_response,
            on_error=_log_error,
            transport=transport,
        )

    def set_auth_token(self, token: str | None, scheme: str = "Bearer") -> None:
        self.http.set_auth_token(token, scheme)

    async def generate_quiz(self, prompt: str) -> Any:
        """Ask the backend to generate a quiz from a prompt."""
        response = await self.http.post("/quiz/generate", {"prompt": prompt})
        return response.data

    async def get_user_quizzes(self) -> Any:
        response = await self.http.get("/quiz/user")
        return response.data

    async def get_quiz(self, quiz_id: str) -> Any:
        response = await self.http.get(f"/quiz/{quiz_id}")
        return response.data

    async def save_quiz(self, quiz: BaseModel | dict[str, Any]) -> Any:
        response = await self.http.post("/quiz", _as_body(quiz))
        return response.data

    async def update_quiz(self, quiz_id: str, quiz: BaseModel | dict[str, Any]) -> Any:
        response = await self.http.put(f"/quiz/{quiz_id}", _as_body(quiz))
        return response.data

    async def delete_quiz(self, quiz_id: str) -> Any:
        response = await self.http.delete(f"/quiz/{quiz_id}")
        return response.data

    async def aclose(self) -> None:
        await self.http.aclose()

    async def __aenter__(self) -> "QuizAPIClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
