"""Pydantic models for the quiz generator."""

from .quiz import (
    DEFAULT_QUESTIONS,
    MAX_QUESTIONS,
    AnalysisResult,
    GenerateQuizRequest,
    Question,
    Quiz,
)

__all__ = [
    "AnalysisResult",
    "GenerateQuizRequest",
    "Question",
    "Quiz",
    "DEFAULT_QUESTIONS",
    "MAX_QUESTIONS",
]
