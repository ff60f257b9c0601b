"""Gateway: raw PCM audio loader -- fixed-length float32 buffers for the local engine.

The input is taken as little-endian signed 16-bit mono PCM. No container
demuxing happens here: OGG/MP3/M4A attachments are read as if they were PCM.
"""

from __future__ import annotations

from pathlib import Path

import numpy as np

from voxnote.l1_entities.audio_constants import N_SAMPLES
from voxnote.l1_entities.errors import AudioNotFoundError

_PCM16_SCALE = 32768.0


def read_audio_bytes(path: Path) -> bytes:
    """Read the whole attachment. Raises AudioNotFoundError or OSError."""
    if not path.exists():
        raise AudioNotFoundError(f'Audio file does not exist: {path}')
    return path.read_bytes()


def normalize_pcm(raw: bytes, n_samples: int = N_SAMPLES) -> np.ndarray:
    """Convert PCM16 bytes to exactly *n_samples* floats in [-1.0, 1.0].

    Short input is zero-padded; long input is truncated. A trailing odd byte is ignored.
    """
    usable = len(raw) - (len(raw) % 2)
    samples = np.frombuffer(raw[:usable], dtype='<i2')[:n_samples]
    out = np.zeros(n_samples, dtype=np.float32)
    out[: len(samples)] = samples.astype(np.float32) / _PCM16_SCALE
    return out


def load_pcm_file(path: Path, n_samples: int = N_SAMPLES) -> np.ndarray:
    return normalize_pcm(read_audio_bytes(path), n_samples)
