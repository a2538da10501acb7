"""Exception hierarchy for the quiz generator."""

from typing import Any


class QuizGenError(Exception):
    """Base class for all quiz generator errors."""

    pass


class ConfigError(QuizGenError):
    """Configuration is missing or invalid (e.g. no API key for the provider)."""

    pass


class ApiError(QuizGenError):
    """An HTTP request failed.

    Subclasses tell apart the three failure modes:
    - RequestSetupError: the request never left the client
    - TransportError: the request was sent but no response arrived
    - ProviderError: the server answered with a non-2xx status
    """

    def __init__(self, message: str, status: int | None = None, body: Any = None):
        super().__init__(message)
        self.message = message
        self.status = status
        self.body = body

    @property
    def has_response(self) -> bool:
        return self.status is not None


class RequestSetupError(ApiError):
    """The request could not be built or was rejected by a request hook."""

    pass


class TransportError(ApiError):
    """Network failure or timeout; no response was received."""

    def __init__(self, message: str, timed_out: bool = False):
        super().__init__(message)
        self.timed_out = timed_out


class ProviderError(ApiError):
    """The server returned a non-2xx response."""

    pass


class ShapeError(QuizGenError):
    """A successful response did not have the expected structure."""

    pass


class ParseError(QuizGenError):
    """Model output could not be parsed as the expected JSON."""

    pass


class QuizGenerationError(QuizGenError):
    """User-facing failure of a quiz generation request.

    The message is generic; the underlying cause is chained as __cause__.
    """

    def __init__(self, message: str, stage: str | None = None):
        super().__init__(message)
        self.stage = stage
