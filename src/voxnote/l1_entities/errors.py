"""Domain error types."""

from __future__ import annotations


class TranscriptionError(Exception):
    """Base class for every failure raised while producing a transcription."""


class AudioNotFoundError(TranscriptionError, FileNotFoundError):
    """Raised when the audio attachment does not exist on disk."""


class ModelResolutionError(TranscriptionError):
    """Raised when the local whisper model cannot be resolved to an existing file."""


class EngineNotReadyError(TranscriptionError):
    """Raised when the local engine is used before it has been initialized."""


class TransportError(TranscriptionError):
    """Raised on connection failure or an HTTP error status other than 429.

    ``status`` is None when no response was received at all.
    """

    def __init__(self, message: str, status: int | None = None, body: str = '') -> None:
        super().__init__(message)
        self.status = status
        self.body = body


class RateLimitedError(TransportError):
    """Raised when the remote API answers 429 Too Many Requests."""


class ResponseParseError(TranscriptionError):
    """Raised when a response body is not JSON or lacks a string ``text`` field."""


class MultipartEncodingError(ValueError):
    """Raised when a multipart body cannot be encoded safely."""
