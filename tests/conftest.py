"""Shared test fixtures and protocol-conforming fakes."""

from __future__ import annotations

import threading
from pathlib import Path

import numpy as np
import pytest

from voxnote.l1_entities.config import ProviderConfig, ProviderKind
from voxnote.l1_entities.request import TranscriptionRequest
from voxnote.l2_use_cases.ports.http_transport import HttpResponse, MultipartPayload
from voxnote.l4_frameworks_and_drivers.config import build_app_config

# --- Protocol-conforming Fakes ---


class FakeTransport:
    """Fake HTTP transport -- records calls, returns a canned body or raises."""

    def __init__(self, body: bytes = b'{"text": "hello"}', status: int = 200, error: Exception | None = None):
        self._body = body
        self._status = status
        self._error = error
        self.calls: list[tuple[str, dict[str, str], str, bytes]] = []

    def send(self, url: str, headers: dict[str, str], body: MultipartPayload) -> HttpResponse:
        self.calls.append((url, dict(headers), body.content_type, body.encode()))
        if self._error is not None:
            raise self._error
        return HttpResponse(status=self._status, body=self._body)


class FakeProvider:
    """Fake speech provider for dispatcher tests."""

    def __init__(self, text: str = 'hello', available: bool = True, error: Exception | None = None):
        self._text = text
        self._available = available
        self._error = error
        self.transcribe_calls: list[TranscriptionRequest] = []
        self.release = threading.Event()
        self.release.set()

    def is_available(self, config: ProviderConfig) -> bool:
        return self._available

    def transcribe(self, request: TranscriptionRequest, config: ProviderConfig) -> str:
        self.transcribe_calls.append(request)
        self.release.wait(timeout=5)
        if self._error is not None:
            raise self._error
        return self._text


class FakeEngine:
    """Fake local engine -- counts constructions across all instances."""

    constructions = 0
    _count_lock = threading.Lock()

    def __init__(self, model_path: str, text: str = 'local text'):
        with FakeEngine._count_lock:
            FakeEngine.constructions += 1
        self.model_path = model_path
        self._text = text
        self.transcribe_calls: list[np.ndarray] = []

    def transcribe(self, samples: np.ndarray) -> str:
        self.transcribe_calls.append(samples)
        return self._text


class RecordingCallback:
    """Records every notification; ``done`` is set on the first one."""

    def __init__(self) -> None:
        self.events: list[tuple[str, str | None]] = []
        self.threads: list[str] = []
        self.done = threading.Event()

    def _record(self, name: str, arg: str | None = None) -> None:
        self.events.append((name, arg))
        self.threads.append(threading.current_thread().name)
        self.done.set()

    def on_success(self, text: str) -> None:
        self._record('success', text)

    def on_empty(self) -> None:
        self._record('empty')

    def on_failed(self, detail: str) -> None:
        self._record('failed', detail)

    def on_too_many_requests(self) -> None:
        self._record('too_many_requests')


# --- Standard Fixtures ---


@pytest.fixture(autouse=True)
def reset_engine_counter():
    FakeEngine.constructions = 0
    yield


@pytest.fixture
def cloud_config() -> ProviderConfig:
    return build_app_config(
        {'providers': {'provider': 'cloud', 'cloud': {'enabled': True, 'api_key': 'sk-test'}}}
    ).providers


@pytest.fixture
def local_config(tmp_path: Path) -> ProviderConfig:
    model = tmp_path / 'whisper_base.tflite'
    model.write_bytes(b'model')
    return build_app_config(
        {
            'providers': {
                'provider': ProviderKind.LOCAL.value,
                'local': {'enabled': True, 'model_path': str(model), 'model_downloaded': True},
            }
        }
    ).providers


@pytest.fixture
def voice_note(tmp_path: Path) -> Path:
    p = tmp_path / 'voice.ogg'
    p.write_bytes(b'OggS\x00\x02fake-opus-payload')
    return p


@pytest.fixture
def pcm_file(tmp_path: Path) -> Path:
    samples = np.array([0, 16384, -16384, 32767, -32768] * 300, dtype='<i2')
    p = tmp_path / 'voice.wav'
    p.write_bytes(samples.tobytes())
    return p


@pytest.fixture
def recording_callback() -> RecordingCallback:
    return RecordingCallback()
