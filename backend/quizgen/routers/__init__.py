"""API routers for the quiz generator."""

from .generator import router as generator_router

__all__ = [
    "generator_router",
]
