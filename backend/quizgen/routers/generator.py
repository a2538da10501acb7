"""Quiz generation API endpoints."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request

from quizgen.errors import QuizGenerationError
from quizgen.models.quiz import GenerateQuizRequest, Quiz
from quizgen.services.quiz_generator import QuizGenerator

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/generator", tags=["generator"])


def get_quiz_generator(request: Request) -> QuizGenerator:
    """Return the generator built at startup."""
    generator = getattr(request.app.state, "quiz_generator", None)
    if generator is None:
        raise HTTPException(status_code=503, detail="AI provider is not configured")
    return generator


@router.post("/quiz", response_model=Quiz)
async def generate_quiz(
    req: GenerateQuizRequest,
    generator: QuizGenerator = Depends(get_quiz_generator),
):
    """Generate a multiple-choice quiz from a free-text prompt."""
    try:
        quiz = await generator.generate_quiz(req.prompt)
    except QuizGenerationError as e:
        raise HTTPException(status_code=502, detail=str(e))

    for problem in quiz.consistency_problems():
        logger.warning(f"Generated quiz '{quiz.title}': {problem}")
    return quiz
