"""Two-step quiz generation: analyze the user's prompt, then generate the quiz."""

import json
import logging
import math
import re
from enum import Enum
from typing import Any

from pydantic import ValidationError

from quizgen.clients.ai import AIClient
from quizgen.errors import ParseError, QuizGenerationError, QuizGenError
from quizgen.models.quiz import DEFAULT_QUESTIONS, MAX_QUESTIONS, AnalysisResult, Quiz

from .prompts import get_analysis_prompt, get_quiz_prompt

logger = logging.getLogger(__name__)

USER_FACING_ERROR = "Could not generate quiz. Please try again."
INVALID_FORMAT_ERROR = "Failed to generate quiz: Invalid response format"

# Greedy: first "{" to last "}". Replies with several JSON objects are not supported.
_JSON_OBJECT_RE = re.compile(r"\{[\s\S]*\}")
_LEADING_INT_RE = re.compile(r"\s*([+-]?\d+)")


class GenerationStage(str, Enum):
    """Progress of a single generation request."""

    IDLE = "idle"
    ANALYZING = "analyzing"
    GENERATING = "generating"
    DONE = "done"
    FAILED = "failed"


def resolve_question_count(value: Any) -> int:
    """Turn the model's questionCount into the number of questions to request.

    Positive integers are capped at MAX_QUESTIONS. Anything absent, zero,
    negative or non-numeric gives DEFAULT_QUESTIONS. Floats and strings
    like "7 questions" are truncated to their leading integer first.
    """
    if value is None or isinstance(value, bool):
        return DEFAULT_QUESTIONS

    if isinstance(value, int):
        count = value
    elif isinstance(value, float):
        if not math.isfinite(value):
            return DEFAULT_QUESTIONS
        count = int(value)
    elif isinstance(value, str):
        match = _LEADING_INT_RE.match(value)
        if not match:
            return DEFAULT_QUESTIONS
        count = int(match.group(1))
    else:
        return DEFAULT_QUESTIONS

    if count <= 0:
        return DEFAULT_QUESTIONS
    return min(count, MAX_QUESTIONS)


def extract_json_object(text: str) -> dict[str, Any]:
    """Extract and parse the JSON object embedded in free-form model text.

    Takes the span from the first "{" to the last "}". Raises ParseError if
    there is no such span or it is not valid JSON.
    """
    match = _JSON_OBJECT_RE.search(text or "")
    if not match:
        raise ParseError("No valid JSON found in response")
    try:
        return json.loads(match.group(0))
    except json.JSONDecodeError as e:
        raise ParseError(f"Invalid JSON in response: {e}") from e


def parse_analysis(raw: str, fallback_topic: str) -> AnalysisResult:
    """Parse the analysis reply, which must be a bare JSON object."""
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ParseError(f"Analysis response is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise ParseError("Analysis response is not a JSON object")

    topic = data.get("topic")
    if not isinstance(topic, str) or not topic.strip():
        logger.warning("Analysis response has no topic, using the prompt text")
        topic = fallback_topic

    return AnalysisResult(
        topic=topic.strip(),
        question_count=resolve_question_count(data.get("questionCount")),
    )


class QuizGenerator:
    """Turns a free-text prompt into a Quiz with two model calls."""

    ANALYSIS_MAX_TOKENS = 1000
    QUIZ_MAX_TOKENS = 2000
    TEMPERATURE = 0.7

    def __init__(self, ai_client: AIClient):
        self.ai = ai_client

    async def analyze(self, text: str) -> AnalysisResult:
        """Extract the quiz topic and question count from user text."""
        raw = await self.ai.generate_text(
            get_analysis_prompt(text),
            max_tokens=self.ANALYSIS_MAX_TOKENS,
            temperature=self.TEMPERATURE,
        )
        return parse_analysis(raw, fallback_topic=text)

    async def generate(self, analysis: AnalysisResult) -> Quiz:
        """Generate the quiz for an analyzed prompt."""
        raw = await self.ai.generate_text(
            get_quiz_prompt(analysis.topic, analysis.question_count),
            max_tokens=self.QUIZ_MAX_TOKENS,
            temperature=self.TEMPERATURE,
        )
        try:
            return Quiz.model_validate(extract_json_object(raw))
        except (ParseError, ValidationError) as e:
            logger.error(f"Failed to parse AI response: {e}")
            raise ParseError(INVALID_FORMAT_ERROR) from e

    async def generate_quiz(self, prompt_text: str) -> Quiz:
        """Generate a quiz from free text.

        Any failure is logged in detail and re-raised as a
        QuizGenerationError with a generic message.
        """
        stage = GenerationStage.IDLE
        try:
            stage = self._enter(GenerationStage.ANALYZING)
            analysis = await self.analyze(prompt_text)
            logger.info(f"Analysis: topic={analysis.topic!r} questions={analysis.question_count}")

            stage = self._enter(GenerationStage.GENERATING)
            quiz = await self.generate(analysis)
        except QuizGenError as e:
            self._enter(GenerationStage.FAILED)
            logger.error(f"Quiz generation failed while {stage.value}: {type(e).__name__}: {e}", exc_info=True)
            raise QuizGenerationError(USER_FACING_ERROR, stage=stage.value) from e

        self._enter(GenerationStage.DONE)
        return quiz

    @staticmethod
    def _enter(stage: GenerationStage) -> GenerationStage:
        logger.info(f"Quiz generation: {stage.value}")
        return stage
