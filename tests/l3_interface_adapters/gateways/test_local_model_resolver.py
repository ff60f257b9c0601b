"""Tests for the local model resolver gateway."""

from __future__ import annotations

from pathlib import Path

import pytest

from voxnote.l1_entities.config import LocalProviderConfig
from voxnote.l1_entities.errors import ModelResolutionError
from voxnote.l3_interface_adapters.gateways.local_model_resolver import LocalModelResolver
from voxnote.l3_interface_adapters.gateways.paths import LOCAL_MODEL_FILENAME, MODELS_DIR


def _cfg(path: str = '') -> LocalProviderConfig:
    return LocalProviderConfig(enabled=True, model_path=path, model_downloaded=True)


class TestLocalModelResolver:
    def test_default_location(self):
        resolver = LocalModelResolver()
        assert resolver.default_path == MODELS_DIR / LOCAL_MODEL_FILENAME
        assert resolver.default_path.name == 'whisper_base.tflite'

    def test_configured_path_takes_precedence(self, tmp_path: Path):
        installed = tmp_path / 'models' / LOCAL_MODEL_FILENAME
        installed.parent.mkdir()
        installed.touch()
        custom = tmp_path / 'custom.tflite'
        custom.touch()

        resolver = LocalModelResolver(models_dir=tmp_path / 'models')
        assert resolver.resolve(_cfg(str(custom))) == str(custom)

    def test_configured_path_returned_even_if_missing(self, tmp_path: Path):
        resolver = LocalModelResolver(models_dir=tmp_path)
        assert resolver.resolve(_cfg('/nowhere/model.tflite')) == '/nowhere/model.tflite'

    def test_installed_model_used_when_unconfigured(self, tmp_path: Path):
        (tmp_path / LOCAL_MODEL_FILENAME).touch()
        resolver = LocalModelResolver(models_dir=tmp_path)
        assert resolver.resolve(_cfg()) == str(tmp_path / LOCAL_MODEL_FILENAME)

    def test_none_when_nothing_found(self, tmp_path: Path):
        assert LocalModelResolver(models_dir=tmp_path).resolve(_cfg()) is None

    def test_require_raises_when_nothing_found(self, tmp_path: Path):
        with pytest.raises(ModelResolutionError, match='Whisper model not found'):
            LocalModelResolver(models_dir=tmp_path).require(_cfg())

    def test_require_raises_when_configured_missing(self, tmp_path: Path):
        with pytest.raises(ModelResolutionError, match='Model file not found'):
            LocalModelResolver(models_dir=tmp_path).require(_cfg(str(tmp_path / 'x.tflite')))

    def test_require_returns_existing(self, tmp_path: Path):
        model = tmp_path / 'm.tflite'
        model.touch()
        assert LocalModelResolver(models_dir=tmp_path).require(_cfg(str(model))) == str(model)
