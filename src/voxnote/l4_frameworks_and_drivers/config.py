"""Application config defaults -- lives in L4, not domain."""

from __future__ import annotations

import copy

from voxnote.l1_entities.config import AppConfig
from voxnote.l3_interface_adapters.gateways.yaml_config_loader import deep_merge

APP_CONFIG_DEFAULTS: dict = {
    'providers': {
        'provider': 'cloud',
        'cloud': {
            'enabled': False,
            'api_key': '',
            'model': 'whisper-1',
        },
        'local': {
            'enabled': False,
            'model_path': '',
            'model_downloaded': False,
        },
    },
    'dispatch': {
        'max_workers': 4,
        'max_pending': 16,
    },
}


def build_app_config(raw: dict) -> AppConfig:
    """Merge *raw* user overrides on top of defaults, then validate."""
    merged = copy.deepcopy(APP_CONFIG_DEFAULTS)
    deep_merge(merged, raw)
    return AppConfig.model_validate(merged)
