"""Use case: dispatch a transcription request to the configured provider."""

from __future__ import annotations

import logging
import threading
from collections.abc import Mapping
from concurrent.futures import Future, ThreadPoolExecutor

from voxnote.l1_entities.config import ProviderConfig, ProviderKind
from voxnote.l1_entities.errors import RateLimitedError
from voxnote.l1_entities.outcome import OutcomeKind, TranscriptionOutcome
from voxnote.l1_entities.request import TranscriptionRequest
from voxnote.l2_use_cases.ports.speech_provider import SpeechProvider
from voxnote.l2_use_cases.ports.transcription_callback import TranscriptionCallback

log = logging.getLogger('vxn.dispatch')

MSG_UNAVAILABLE = 'provider unavailable'
MSG_NO_FILE = 'request has no audio file'
MSG_AT_CAPACITY = 'dispatcher at capacity'
MSG_SHUT_DOWN = 'dispatcher shut down'


class ProviderDispatcher:
    """Single entry point for transcription requests.

    Requests that carry no file path, fail the availability gate, find no free
    slot, or arrive after shutdown are rejected on the calling thread. Everything
    else runs on a bounded worker pool; at most ``max_workers`` run while
    ``max_pending`` more may wait in the queue.

    The outcome is delivered exactly once through the callback and also
    resolves the returned future.
    """

    def __init__(
        self,
        providers: Mapping[ProviderKind, SpeechProvider],
        max_workers: int = 4,
        max_pending: int = 16,
    ) -> None:
        self._providers = dict(providers)
        self._executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix='vxn-transcribe')
        self._slots = threading.BoundedSemaphore(max_workers + max_pending)

    def __enter__(self) -> ProviderDispatcher:
        return self

    def __exit__(self, *args) -> None:
        self.shutdown()

    def shutdown(self, wait: bool = True) -> None:
        self._executor.shutdown(wait=wait)

    def is_available(self, request: TranscriptionRequest, config: ProviderConfig) -> bool:
        if not request.file_path:
            return False
        provider = self._providers.get(config.provider)
        if provider is None:
            return False
        return provider.is_available(config)

    def prompt(
        self,
        request: TranscriptionRequest,
        config: ProviderConfig,
        callback: TranscriptionCallback,
    ) -> Future[TranscriptionOutcome]:
        """Start transcribing *request* and return a future for its outcome."""
        if not request.file_path:
            return self._finish_now(callback, TranscriptionOutcome.failed(MSG_NO_FILE))

        if not self.is_available(request, config):
            log.info('Provider %s unavailable, rejecting request', config.provider.value)
            return self._finish_now(callback, TranscriptionOutcome.failed(MSG_UNAVAILABLE))

        if not self._slots.acquire(blocking=False):
            log.warning('Dispatcher at capacity, rejecting %s', request.file_path)
            return self._finish_now(callback, TranscriptionOutcome.failed(MSG_AT_CAPACITY))

        provider = self._providers[config.provider]
        try:
            future = self._executor.submit(self._run, provider, request, config, callback)
        except RuntimeError:
            self._slots.release()
            log.warning('Dispatcher shut down, rejecting %s', request.file_path)
            return self._finish_now(callback, TranscriptionOutcome.failed(MSG_SHUT_DOWN))
        future.add_done_callback(lambda _f: self._slots.release())
        return future

    def _run(
        self,
        provider: SpeechProvider,
        request: TranscriptionRequest,
        config: ProviderConfig,
        callback: TranscriptionCallback,
    ) -> TranscriptionOutcome:
        outcome = run_provider(provider, request, config)
        deliver(callback, outcome)
        return outcome

    @staticmethod
    def _finish_now(callback: TranscriptionCallback, outcome: TranscriptionOutcome) -> Future[TranscriptionOutcome]:
        deliver(callback, outcome)
        future: Future[TranscriptionOutcome] = Future()
        future.set_result(outcome)
        return future


def run_provider(
    provider: SpeechProvider,
    request: TranscriptionRequest,
    config: ProviderConfig,
) -> TranscriptionOutcome:
    """Run one transcription and map every result or exception to an outcome."""
    try:
        text = provider.transcribe(request, config)
    except RateLimitedError as exc:
        log.warning('Rate limited while transcribing %s: %s', request.file_path, exc)
        return TranscriptionOutcome.rate_limited()
    except Exception as exc:
        log.error('Transcription failed for %s: %s', request.file_path, exc, exc_info=True)
        return TranscriptionOutcome.failed(str(exc) or type(exc).__name__)
    return TranscriptionOutcome.from_text(text)


def deliver(callback: TranscriptionCallback, outcome: TranscriptionOutcome) -> None:
    """Invoke the callback method matching *outcome*. Callback errors are logged, not raised."""
    try:
        if outcome.kind is OutcomeKind.SUCCESS:
            callback.on_success(outcome.text)
        elif outcome.kind is OutcomeKind.EMPTY:
            callback.on_empty()
        elif outcome.kind is OutcomeKind.RATE_LIMITED:
            callback.on_too_many_requests()
        else:
            callback.on_failed(outcome.detail)
    except Exception:
        log.exception('Result callback raised while handling %s outcome', outcome.kind.value)
