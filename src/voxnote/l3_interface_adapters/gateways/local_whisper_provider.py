"""Gateway: on-device whisper transcription -- implements SpeechProvider port."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from voxnote.l1_entities.config import ProviderConfig
from voxnote.l1_entities.request import TranscriptionRequest
from voxnote.l2_use_cases.ports.local_engine import LocalEngine
from voxnote.l2_use_cases.ports.model_resolver import ModelResolver
from voxnote.l3_interface_adapters.gateways.engine_handle import DEFAULT_ENGINE_HANDLE, EngineHandle
from voxnote.l3_interface_adapters.gateways.pcm_audio_loader import load_pcm_file
from voxnote.l3_interface_adapters.gateways.placeholder_whisper_engine import PlaceholderWhisperEngine

log = logging.getLogger('vxn.local')


class LocalWhisperProvider:
    """Runs the shared on-device engine, creating it on first use.

    The engine is built once per handle from the model path resolved at that
    moment; later config changes to the path do not rebuild it. Inference is
    serialized by the handle, so providers sharing one handle never overlap.
    """

    def __init__(
        self,
        resolver: ModelResolver,
        handle: EngineHandle = DEFAULT_ENGINE_HANDLE,
        engine_factory: Callable[[str], LocalEngine] = PlaceholderWhisperEngine,
    ) -> None:
        self._resolver = resolver
        self._handle = handle
        self._engine_factory = engine_factory

    @property
    def handle(self) -> EngineHandle:
        return self._handle

    def is_available(self, config: ProviderConfig) -> bool:
        local = config.local
        if not (local.enabled and local.model_downloaded):
            return False
        path = self._resolver.resolve(local)
        return path is not None and Path(path).exists()

    def transcribe(self, request: TranscriptionRequest, config: ProviderConfig) -> str:
        self._handle.get_or_create(lambda: self._create_engine(config))

        path = Path(request.file_path)
        try:
            samples = load_pcm_file(path)
        except FileNotFoundError:
            log.error('Audio file does not exist: %s', path)
            raise

        return self._handle.transcribe(samples)

    def _create_engine(self, config: ProviderConfig) -> LocalEngine:
        model_path = self._resolver.require(config.local)
        log.info('Loading local whisper model from %s', model_path)
        return self._engine_factory(model_path)
