"""AI Quiz Generator - FastAPI Application."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from quizgen.clients.ai import AIClient
from quizgen.config import AIClientConfig, settings
from quizgen.errors import ConfigError
from quizgen.routers import generator_router
from quizgen.services.quiz_generator import QuizGenerator

logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the AI client and quiz generator once for the whole app."""
    # Startup
    ai_client = None
    app.state.quiz_generator = None
    try:
        ai_client = AIClient(AIClientConfig.from_settings(settings))
        app.state.quiz_generator = QuizGenerator(ai_client)
        logger.info(f"Using AI provider: {ai_client.provider}")
    except ConfigError as e:
        logger.error(f"AI provider not configured: {e}")

    logger.info("Startup complete.")
    yield

    # Shutdown
    logger.info("Shutting down...")
    if ai_client is not None:
        await ai_client.aclose()


app = FastAPI(
    title=settings.app_name,
    description="Generate multiple-choice quizzes from a free-text prompt",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(generator_router)


@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "name": settings.app_name,
        "version": "0.1.0",
        "provider": settings.ai_provider,
        "docs": "/docs",
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
