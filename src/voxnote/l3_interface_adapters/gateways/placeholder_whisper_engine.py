"""Gateway: placeholder on-device whisper engine -- implements LocalEngine port.

Stands in for a real on-device runtime: it remembers the model path and
returns a fixed string instead of running inference.
"""

from __future__ import annotations

import logging

import numpy as np

log = logging.getLogger('vxn.engine')

PLACEHOLDER_TRANSCRIPTION = 'Transcription pending - on-device inference not available'


class PlaceholderWhisperEngine:
    def __init__(self, model_path: str) -> None:
        self._model_path = model_path
        log.debug('Initialized whisper engine from: %s', model_path)

    @property
    def model_path(self) -> str:
        return self._model_path

    def transcribe(self, samples: np.ndarray) -> str:
        log.warning('Using placeholder transcription for %d samples -- inference not available', len(samples))
        return PLACEHOLDER_TRANSCRIPTION
