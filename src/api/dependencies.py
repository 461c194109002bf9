from __future__ import annotations
from functools import lru_cache
from typing import Any, Dict
import os

from src.main.spoofing.detector import SpoofingDetector, load_detector_config


def get_config_paths() -> list[str]:
    # Optional override merged over the packaged defaults
    override = os.environ.get('SPOOFING_CONFIG_PATH')
    return [override] if override else []


@lru_cache(maxsize=1)
def get_detector_config() -> Dict[str, Any]:
    return load_detector_config(get_config_paths())


def get_detector() -> SpoofingDetector:
    return SpoofingDetector(dict(get_detector_config()))

__all__ = ["get_detector", "get_detector_config"]
