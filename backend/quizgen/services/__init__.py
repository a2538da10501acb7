"""Business logic services."""

from .quiz_generator import (
    GenerationStage,
    QuizGenerator,
    extract_json_object,
    resolve_question_count,
)

__all__ = [
    "GenerationStage",
    "QuizGenerator",
    "extract_json_object",
    "resolve_question_count",
]
