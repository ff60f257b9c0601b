"""File-based debug logging setup."""

from __future__ import annotations

import logging
from pathlib import Path


def setup_file_logging(output_dir: Path) -> Path:
    """Configure file-based debug logging into *output_dir*. Returns the log file path."""
    output_dir.mkdir(parents=True, exist_ok=True)
    log_path = output_dir / 'vxn_debug.log'
    handler = logging.FileHandler(log_path, encoding='utf-8')
    handler.setFormatter(logging.Formatter('%(asctime)s %(levelname)s %(name)s %(threadName)s %(message)s'))
    root = logging.getLogger('vxn')
    root.setLevel(logging.DEBUG)
    root.addHandler(handler)
    root.info('Debug logging started → %s', log_path)
    return log_path
