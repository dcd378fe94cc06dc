"""YAML configuration loader with dot-notation access."""

from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml

_SENTINEL = object()

_PROJECT_ROOT = Path(__file__).resolve().parents[3]
DEFAULT_CONFIG_PATH = _PROJECT_ROOT / "config" / "default.yaml"


def load_config(path: str) -> dict:
    """Load YAML config file. Raises FileNotFoundError if missing."""
    file_path = Path(path)
    if not file_path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with open(file_path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


@lru_cache(maxsize=1)
def load_default_config() -> dict:
    """Load config/default.yaml once; empty dict when it is not shipped."""
    if not DEFAULT_CONFIG_PATH.exists():
        return {}
    return load_config(str(DEFAULT_CONFIG_PATH))


def get_setting(config: dict, key: str, default: Any = _SENTINEL) -> Any:
    """Access nested config with dot notation: 'formats.schedule_date'.

    Args:
        config: Loaded config dict.
        key: Dot-separated key path.
        default: Default value if key missing. Raises KeyError if not provided.
    """
    parts = key.split(".")
    current = config
    for part in parts:
        if isinstance(current, dict) and part in current:
            current = current[part]
        elif default is not _SENTINEL:
            return default
        else:
            raise KeyError(f"Config key not found: {key}")
    return current
