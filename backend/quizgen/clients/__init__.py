"""HTTP clients for AI providers and the quiz backend."""

from .ai import PROVIDERS, AIClient, ProviderSpec
from .base import ApiClient, ApiResponse, RequestConfig
from .quiz_api import QuizAPIClient

__all__ = [
    "ApiClient",
    "ApiResponse",
    "RequestConfig",
    "AIClient",
    "ProviderSpec",
    "PROVIDERS",
    "QuizAPIClient",
]
