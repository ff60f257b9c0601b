"""Port: local model resolution."""

from __future__ import annotations

from typing import Protocol

from voxnote.l1_entities.config import LocalProviderConfig


class ModelResolver(Protocol):
    """Abstract model resolver -- maps local provider settings to a model file path."""

    def resolve(self, config: LocalProviderConfig) -> str | None:
        """Return the model path to use, or None when nothing is configured or installed."""
        ...

    def require(self, config: LocalProviderConfig) -> str:
        """Return an existing model path. Raises ModelResolutionError otherwise."""
        ...
