"""Gateway: local model resolver -- implements ModelResolver port."""

from __future__ import annotations

import logging
from pathlib import Path

from voxnote.l1_entities.config import LocalProviderConfig
from voxnote.l1_entities.errors import ModelResolutionError
from voxnote.l3_interface_adapters.gateways.paths import LOCAL_MODEL_FILENAME, MODELS_DIR

log = logging.getLogger('vxn.local')


class LocalModelResolver:
    """Resolves the on-device model: configured path first, then the per-user models dir."""

    def __init__(self, models_dir: Path = MODELS_DIR, filename: str = LOCAL_MODEL_FILENAME) -> None:
        self._default_path = models_dir / filename

    @property
    def default_path(self) -> Path:
        return self._default_path

    def resolve(self, config: LocalProviderConfig) -> str | None:
        if config.model_path:
            return config.model_path
        if self._default_path.exists():
            log.debug('Using installed model at %s', self._default_path)
            return str(self._default_path)
        return None

    def require(self, config: LocalProviderConfig) -> str:
        path = self.resolve(config)
        if path is None:
            raise ModelResolutionError(
                f'Whisper model not found. Place {self._default_path.name} in {self._default_path.parent}'
            )
        if not Path(path).exists():
            raise ModelResolutionError(f'Model file not found: {path}')
        return path
