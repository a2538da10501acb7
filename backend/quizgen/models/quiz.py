"""Quiz-related Pydantic models."""

from pydantic import BaseModel, ConfigDict, Field

MIN_QUESTIONS = 1
MAX_QUESTIONS = 15
DEFAULT_QUESTIONS = 5
OPTIONS_PER_QUESTION = 4


class Question(BaseModel):
    """A multiple-choice question as produced by the model."""

    model_config = ConfigDict(populate_by_name=True)

    question: str
    options: list[str]
    correct_answer: int = Field(alias="correctAnswer")  # index into options
    explanation: str | None = None


class Quiz(BaseModel):
    """A generated quiz.

    Nothing here guarantees that correct_answer is in range or that the
    question count matches the request; use consistency_problems() before
    trusting the content.
    """

    title: str
    description: str
    questions: list[Question]

    def consistency_problems(self, expected_count: int | None = None) -> list[str]:
        """Return human-readable problems with this quiz (empty if none)."""
        problems = []
        if expected_count is not None and len(self.questions) != expected_count:
            problems.append(f"expected {expected_count} questions, got {len(self.questions)}")
        for i, q in enumerate(self.questions, 1):
            if len(q.options) != OPTIONS_PER_QUESTION:
                problems.append(f"question {i}: expected {OPTIONS_PER_QUESTION} options, got {len(q.options)}")
            if not 0 <= q.correct_answer < len(q.options):
                problems.append(f"question {i}: correctAnswer {q.correct_answer} is out of range")
        return problems


class AnalysisResult(BaseModel):
    """Topic and question count extracted from the user's prompt."""

    model_config = ConfigDict(populate_by_name=True)

    topic: str
    question_count: int = Field(
        DEFAULT_QUESTIONS, alias="questionCount", ge=MIN_QUESTIONS, le=MAX_QUESTIONS
    )


class GenerateQuizRequest(BaseModel):
    """Request body for quiz generation."""

    prompt: str = Field(..., min_length=1)
