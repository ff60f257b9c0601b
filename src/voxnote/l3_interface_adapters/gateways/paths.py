"""Shared path constants for configuration and local models."""

from __future__ import annotations

from platformdirs import user_config_path, user_data_path

APP_NAME = 'voxnote'

CONFIG_DIR = user_config_path(APP_NAME)
DATA_DIR = user_data_path(APP_NAME)
MODELS_DIR = DATA_DIR / 'whisper_models'

LOCAL_MODEL_FILENAME = 'whisper_base.tflite'

DEFAULT_CONFIG_PATHS = [
    CONFIG_DIR / 'config.yaml',
    CONFIG_DIR / 'config.yml',
]
