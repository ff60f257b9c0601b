"""Port: transcription provider backend."""

from __future__ import annotations

from typing import Protocol

from voxnote.l1_entities.config import ProviderConfig
from voxnote.l1_entities.request import TranscriptionRequest


class SpeechProvider(Protocol):
    """A transcription backend (remote API or on-device engine)."""

    def is_available(self, config: ProviderConfig) -> bool:
        """Check the provider's preconditions. Must not open files or sockets."""
        ...

    def transcribe(self, request: TranscriptionRequest, config: ProviderConfig) -> str:
        """Return the raw transcription text. Raises on failure."""
        ...
