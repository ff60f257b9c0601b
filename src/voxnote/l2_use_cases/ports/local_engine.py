"""Port: on-device speech-to-text engine."""

from __future__ import annotations

from typing import Protocol

import numpy as np


class LocalEngine(Protocol):
    """Abstract on-device engine, constructed once from a model file path."""

    def transcribe(self, samples: np.ndarray) -> str:
        """Transcribe a fixed-length float32 mono buffer at 16 kHz."""
        ...
