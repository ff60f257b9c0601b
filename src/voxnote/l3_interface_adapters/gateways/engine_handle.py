"""Once-initialized holder for the process-wide local engine."""

from __future__ import annotations

import threading
from collections.abc import Callable
from enum import Enum

import numpy as np

from voxnote.l1_entities.errors import EngineNotReadyError
from voxnote.l2_use_cases.ports.local_engine import LocalEngine


class EngineState(Enum):
    NOT_READY = 'not_ready'
    READY = 'ready'


class EngineHandle:
    """Holds at most one engine for its lifetime.

    ``get_or_create`` runs the factory at most once, even when many threads race
    on the first call. A factory that raises leaves the handle NOT_READY so a
    later call can try again. ``transcribe`` serializes inference across every
    caller that shares the handle.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._infer_lock = threading.Lock()
        self._engine: LocalEngine | None = None

    @property
    def state(self) -> EngineState:
        return EngineState.READY if self._engine is not None else EngineState.NOT_READY

    def get(self) -> LocalEngine:
        engine = self._engine
        if engine is None:
            raise EngineNotReadyError('Local engine has not been initialized')
        return engine

    def get_or_create(self, factory: Callable[[], LocalEngine]) -> LocalEngine:
        engine = self._engine
        if engine is not None:
            return engine
        with self._lock:
            if self._engine is None:
                self._engine = factory()
            return self._engine

    def transcribe(self, samples: np.ndarray) -> str:
        engine = self.get()
        with self._infer_lock:
            return engine.transcribe(samples)


DEFAULT_ENGINE_HANDLE = EngineHandle()
