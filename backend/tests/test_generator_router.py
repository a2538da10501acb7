"""Tests for the quiz generation endpoint."""

import logging

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from quizgen.errors import ProviderError, QuizGenerationError
from quizgen.models.quiz import Quiz
from quizgen.routers import generator_router
from quizgen.services.quiz_generator import USER_FACING_ERROR

from conftest import make_quiz


class StubGenerator:
    def __init__(self, quiz: Quiz | None = None, error: Exception | None = None):
        self.quiz = quiz
        self.error = error
        self.prompts: list[str] = []

    async def generate_quiz(self, prompt_text: str) -> Quiz:
        self.prompts.append(prompt_text)
        if self.error:
            raise self.error
        return self.quiz


def make_app(generator) -> TestClient:
    app = FastAPI()
    app.include_router(generator_router)
    app.state.quiz_generator = generator
    return TestClient(app)


def test_returns_quiz_in_camel_case():
    generator = StubGenerator(quiz=Quiz.model_validate(make_quiz(3, title="Birds")))
    client = make_app(generator)

    response = client.post("/api/generator/quiz", json={"prompt": "3 questions about birds"})

    assert response.status_code == 200
    body = response.json()
    assert body["title"] == "Birds"
    assert len(body["questions"]) == 3
    assert body["questions"][1]["correctAnswer"] == 1
    assert generator.prompts == ["3 questions about birds"]


def test_generation_failure_is_502_with_generic_message():
    error = QuizGenerationError(USER_FACING_ERROR, stage="analyzing")
    error.__cause__ = ProviderError("Request failed with status code 500", status=500, body={"secret": "x"})
    client = make_app(StubGenerator(error=error))

    response = client.post("/api/generator/quiz", json={"prompt": "anything"})

    assert response.status_code == 502
    assert response.json() == {"detail": USER_FACING_ERROR}


def test_missing_generator_is_503():
    client = make_app(None)
    response = client.post("/api/generator/quiz", json={"prompt": "anything"})
    assert response.status_code == 503


@pytest.mark.parametrize("body", [{}, {"prompt": ""}])
def test_invalid_body_is_422(body):
    client = make_app(StubGenerator(quiz=Quiz.model_validate(make_quiz(1))))
    response = client.post("/api/generator/quiz", json=body)
    assert response.status_code == 422


def test_inconsistent_quiz_is_returned_and_logged(caplog):
    data = make_quiz(1, title="Odd")
    data["questions"][0]["correctAnswer"] = 7
    client = make_app(StubGenerator(quiz=Quiz.model_validate(data)))

    with caplog.at_level(logging.WARNING, logger="quizgen.routers.generator"):
        response = client.post("/api/generator/quiz", json={"prompt": "odd"})

    assert response.status_code == 200
    assert "correctAnswer 7 is out of range" in caplog.text


def test_root_and_health():
    from quizgen.main import app

    client = TestClient(app)
    assert client.get("/health").json() == {"status": "healthy"}
    assert client.get("/").json()["docs"] == "/docs"


def test_lifespan_without_key_leaves_generator_unset(monkeypatch):
    from quizgen import main
    from quizgen.config import Settings

    monkeypatch.setattr(main, "settings", Settings(_env_file=None, deepseek_api_key=None, openai_api_key=None))

    with TestClient(main.app) as client:
        assert main.app.state.quiz_generator is None
        response = client.post("/api/generator/quiz", json={"prompt": "anything"})

    assert response.status_code == 503


def test_lifespan_builds_generator(monkeypatch):
    from quizgen import main
    from quizgen.config import Settings
    from quizgen.services.quiz_generator import QuizGenerator

    monkeypatch.setattr(main, "settings", Settings(_env_file=None, ai_provider="openai", openai_api_key="k"))

    with TestClient(main.app):
        generator = main.app.state.quiz_generator
        assert isinstance(generator, QuizGenerator)
        assert generator.ai.provider == "openai"
