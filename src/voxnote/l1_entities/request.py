"""Transcription request entity."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class TranscriptionRequest(BaseModel):
    """An audio attachment to transcribe. Owned by the caller, read-only to the core."""

    model_config = ConfigDict(frozen=True)

    file_path: str
    mime_type: str = ''
    prompt_hint: str = Field(default='', description='Vocabulary/style hint forwarded to the cloud API')
    system_context: str = Field(default='', description='Caller context; not used by the whisper providers')
