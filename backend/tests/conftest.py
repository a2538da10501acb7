"""Shared fixtures: fake provider transports and sample model replies."""

import json

import httpx
import pytest

from quizgen.clients.ai import AIClient
from quizgen.config import AIClientConfig


def completion(content) -> dict:
    """A chat-completion response body with a single choice."""
    return {"choices": [{"message": {"role": "assistant", "content": content}}]}


def make_quiz(count: int, title: str = "Sample quiz") -> dict:
    return {
        "title": title,
        "description": f"{count} questions",
        "questions": [
            {
                "question": f"Question {i + 1}?",
                "options": ["A", "B", "C", "D"],
                "correctAnswer": i % 4,
                "explanation": f"Because {i + 1}.",
            }
            for i in range(count)
        ],
    }


class ScriptedProvider:
    """Mock transport handler that replays one reply per request and records requests.

    A reply is either a string (returned as the completion content) or an
    httpx.Response (returned as-is).
    """

    def __init__(self, *replies):
        self.replies = list(replies)
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        reply = self.replies.pop(0)
        if isinstance(reply, httpx.Response):
            return reply
        return httpx.Response(200, json=completion(reply))

    def payload(self, index: int) -> dict:
        return json.loads(self.requests[index].content)

    def user_message(self, index: int) -> str:
        return self.payload(index)["messages"][-1]["content"]


@pytest.fixture
async def make_ai_client():
    """Build AIClients backed by a mock transport; closes them afterwards."""
    clients = []

    def _make(handler, provider: str = "deepseek", **config) -> AIClient:
        client = AIClient(
            AIClientConfig(provider=provider, credential="test-key", **config),
            transport=httpx.MockTransport(handler),
        )
        clients.append(client)
        return client

    yield _make

    for client in clients:
        await client.aclose()
