from typing import Any, Optional


class MatchCardError(Exception):
    """Base error for match card generation. `message` is safe to return to clients."""

    message = "internal failure"

    def __init__(self, message: Optional[str] = None, details: Any = None):
        super().__init__(message or self.message)
        if message:
            self.message = message
        self.details = details


class InvalidRequestError(MatchCardError):
    """The request body does not describe a match card."""

    message = "invalid request body"


class RenderingError(MatchCardError):
    """The browser could not turn the card markup into a PDF."""

    message = "internal failure"
