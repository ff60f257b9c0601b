"""MIME type resolution for audio attachments."""

from __future__ import annotations

from pathlib import PurePath

DEFAULT_AUDIO_MIME = 'audio/ogg'  # chat voice notes are ogg/opus

AUDIO_MIME_BY_SUFFIX = {
    '.ogg': 'audio/ogg',
    '.mp3': 'audio/mpeg',
    '.wav': 'audio/wav',
    '.m4a': 'audio/mp4',
}


def resolve_mime_type(file_name: str, explicit: str | None = None) -> str:
    """Return *explicit* when given, else infer from the file extension."""
    if explicit:
        return explicit
    suffix = PurePath(file_name).suffix.lower()
    return AUDIO_MIME_BY_SUFFIX.get(suffix, DEFAULT_AUDIO_MIME)
