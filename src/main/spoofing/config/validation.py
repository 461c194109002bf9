"""Validation for spoofing detector configuration (strict mode)."""
from __future__ import annotations
from typing import Dict, Any
import logging
from ...utils.config import InvalidConfigError, ensure_keys
from ...texture.histogram import HISTOGRAM_BINS

def validate_detector_config(cfg: Dict[str, Any]) -> None:
    ensure_keys(cfg, ['cell_size', 'threshold_levels', 'attack_bin', 'attack_percent'], 'detector')
    if not 0 <= int(cfg['attack_bin']) < HISTOGRAM_BINS:
        raise InvalidConfigError(f"attack_bin must be in [0, {HISTOGRAM_BINS - 1}], got {cfg['attack_bin']}")
    if int(cfg['threshold_levels']) < 2:
        raise InvalidConfigError(f"threshold_levels must be >= 2, got {cfg['threshold_levels']}")
    level = cfg.get('log_level', 'INFO')
    if not isinstance(logging.getLevelName(str(level).upper()), int):
        raise InvalidConfigError(f"Unknown log_level: {level!r}")
    if cfg.get('save_debug_images'):
        ensure_keys(cfg, ['debug_output_dir'], 'detector')

__all__ = ['validate_detector_config']
