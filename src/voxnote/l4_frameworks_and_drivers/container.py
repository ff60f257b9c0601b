"""Dependency container -- composition root for wiring all layers together."""

from __future__ import annotations

from voxnote.l1_entities.config import AppConfig, ProviderKind
from voxnote.l2_use_cases.ports.http_transport import HttpTransport
from voxnote.l2_use_cases.ports.model_resolver import ModelResolver
from voxnote.l2_use_cases.ports.speech_provider import SpeechProvider
from voxnote.l2_use_cases.provider_dispatcher import ProviderDispatcher
from voxnote.l3_interface_adapters.gateways.engine_handle import DEFAULT_ENGINE_HANDLE, EngineHandle
from voxnote.l3_interface_adapters.gateways.local_model_resolver import LocalModelResolver
from voxnote.l3_interface_adapters.gateways.local_whisper_provider import LocalWhisperProvider
from voxnote.l3_interface_adapters.gateways.openai_whisper_provider import OpenAIWhisperProvider
from voxnote.l3_interface_adapters.gateways.urllib_http_transport import UrllibHttpTransport


class DependencyContainer:
    """Creates and wires all concrete instances. Easy to override for testing."""

    def __init__(
        self,
        config: AppConfig,
        transport: HttpTransport | None = None,
        model_resolver: ModelResolver | None = None,
        engine_handle: EngineHandle = DEFAULT_ENGINE_HANDLE,
    ) -> None:
        self.config = config
        self.transport: HttpTransport = transport or UrllibHttpTransport()
        self.model_resolver: ModelResolver = model_resolver or LocalModelResolver()

        self.providers: dict[ProviderKind, SpeechProvider] = {
            ProviderKind.CLOUD: OpenAIWhisperProvider(self.transport),
            ProviderKind.LOCAL: LocalWhisperProvider(self.model_resolver, handle=engine_handle),
        }
        self.dispatcher = ProviderDispatcher(
            self.providers,
            max_workers=config.dispatch.max_workers,
            max_pending=config.dispatch.max_pending,
        )
