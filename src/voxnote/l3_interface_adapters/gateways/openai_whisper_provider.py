"""Gateway: OpenAI Whisper transcription API -- implements SpeechProvider port."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from voxnote.l1_entities.config import ProviderConfig
from voxnote.l1_entities.errors import ResponseParseError
from voxnote.l1_entities.request import TranscriptionRequest
from voxnote.l2_use_cases.ports.http_transport import HttpTransport
from voxnote.l2_use_cases.utils.mime_types import resolve_mime_type
from voxnote.l3_interface_adapters.gateways.multipart_encoder import MultipartEncoder
from voxnote.l3_interface_adapters.gateways.pcm_audio_loader import read_audio_bytes

log = logging.getLogger('vxn.cloud')

WHISPER_API_URL = 'https://api.openai.com/v1/audio/transcriptions'


class OpenAIWhisperProvider:
    """Uploads the attachment as multipart/form-data and reads ``text`` from the JSON reply."""

    def __init__(self, transport: HttpTransport, url: str = WHISPER_API_URL) -> None:
        self._transport = transport
        self._url = url

    def is_available(self, config: ProviderConfig) -> bool:
        return config.cloud.enabled and bool(config.cloud.bearer_token)

    def transcribe(self, request: TranscriptionRequest, config: ProviderConfig) -> str:
        path = Path(request.file_path)
        try:
            audio = read_audio_bytes(path)
        except FileNotFoundError:
            log.error('Audio file does not exist: %s', path)
            raise

        encoder = build_upload(request, path.name, audio, config.cloud.model)
        headers = {'Authorization': f'Bearer {config.cloud.bearer_token}'}
        response = self._transport.send(self._url, headers, encoder)
        return parse_transcription(response.body)


def build_upload(request: TranscriptionRequest, file_name: str, audio: bytes, model: str) -> MultipartEncoder:
    """Assemble the ``file``/``model``/``prompt`` form for the transcriptions endpoint."""
    encoder = MultipartEncoder()
    encoder.add_field('model', model)
    if request.prompt_hint:
        encoder.add_field('prompt', request.prompt_hint)
    encoder.add_file('file', file_name, resolve_mime_type(file_name, request.mime_type), audio)
    return encoder


def parse_transcription(body: bytes) -> str:
    """Extract the ``text`` field. Raises ResponseParseError when it is missing."""
    raw = body.decode('utf-8', errors='replace')
    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as exc:
        log.error('Whisper API returned non-JSON body: %s', raw)
        raise ResponseParseError(f'Response is not JSON: {exc}') from exc

    text = payload.get('text') if isinstance(payload, dict) else None
    if not isinstance(text, str):
        log.error('No text field in Whisper API response: %s', raw)
        raise ResponseParseError('No text field in Whisper API response')
    return text
