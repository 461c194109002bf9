"""Layered YAML configuration.

A packaged defaults file is read first; user files are merged over it in the
order given, nested sections merged key by key.
"""
from __future__ import annotations
import yaml
from typing import Any, Dict, Iterable, List, Optional
import os

from .config import InvalidConfigError


def load_yaml_file(path: str) -> Dict[str, Any]:
    if not os.path.isfile(path):
        raise FileNotFoundError(f"Config file not found: {path}")
    with open(path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise InvalidConfigError(f"Config file must hold a mapping at top level: {path}")
    return data


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = dict(base)
    for k, v in override.items():
        if isinstance(v, dict) and isinstance(merged.get(k), dict):
            merged[k] = deep_merge(merged[k], v)
        else:
            merged[k] = v
    return merged


def load_configs(paths: Iterable[str]) -> Dict[str, Any]:
    cfg: Dict[str, Any] = {}
    for p in paths:
        cfg = deep_merge(cfg, load_yaml_file(p))
    return cfg


def load_layered_config(default_path: str, overrides: Optional[List[str]] = None) -> Dict[str, Any]:
    """Defaults file plus user overrides; empty override entries are ignored."""
    return load_configs([default_path] + [p for p in (overrides or []) if p])

__all__ = ["load_configs", "load_layered_config", "load_yaml_file", "deep_merge"]
