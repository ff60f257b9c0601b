"""Transcription outcome -- the single terminal result of a request."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class OutcomeKind(str, Enum):
    SUCCESS = 'success'
    EMPTY = 'empty'
    FAILED = 'failed'
    RATE_LIMITED = 'rate_limited'


class TranscriptionOutcome(BaseModel):
    """Tagged result. ``text`` is set only for SUCCESS, ``detail`` only for FAILED."""

    model_config = ConfigDict(frozen=True)

    kind: OutcomeKind
    text: str = ''
    detail: str = ''

    @classmethod
    def success(cls, text: str) -> TranscriptionOutcome:
        return cls(kind=OutcomeKind.SUCCESS, text=text)

    @classmethod
    def empty(cls) -> TranscriptionOutcome:
        return cls(kind=OutcomeKind.EMPTY)

    @classmethod
    def failed(cls, detail: str) -> TranscriptionOutcome:
        return cls(kind=OutcomeKind.FAILED, detail=detail)

    @classmethod
    def rate_limited(cls) -> TranscriptionOutcome:
        return cls(kind=OutcomeKind.RATE_LIMITED)

    @classmethod
    def from_text(cls, text: str | None) -> TranscriptionOutcome:
        """Map raw provider text: blank becomes EMPTY, anything else SUCCESS (trimmed)."""
        if text is None or not text.strip():
            return cls.empty()
        return cls.success(text.strip())
