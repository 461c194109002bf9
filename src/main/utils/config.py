"""Central config helpers for strict YAML-driven settings."""
from __future__ import annotations
from typing import Any, Dict, Iterable

class ConfigError(RuntimeError):
    pass

class MissingConfigError(ConfigError):
    pass

class InvalidConfigError(ConfigError):
    pass

def require(cfg: Dict[str, Any], key: str) -> Any:
    if key not in cfg or cfg[key] is None:
        raise MissingConfigError(f"Missing required config key: '{key}'")
    return cfg[key]

def ensure_keys(section: Dict[str, Any], required: Iterable[str], section_name: str):
    for k in required:
        if k not in section or section[k] is None:
            raise MissingConfigError(f"Missing required key '{k}' in section '{section_name}'")

__all__ = [
    "ConfigError", "MissingConfigError", "InvalidConfigError", "require", "ensure_keys"
]
