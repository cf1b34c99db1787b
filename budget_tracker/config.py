from __future__ import annotations

import os
from pathlib import Path
from typing import Dict

import yaml

from budget_tracker.core.accounts import DEFAULT_ACCOUNT_TYPES

LOG_LEVEL_ENV = "BUDGET_TRACKER_LOG_LEVEL"

DEFAULT_CONFIG: Dict[str, object] = {
    "date_format": "%Y-%m-%d",
    "log_level": "WARNING",
    "account_types": dict(DEFAULT_ACCOUNT_TYPES),
}


def _merge_defaults(current: Dict[str, object], defaults: Dict[str, object]) -> Dict[str, object]:
    """Merge missing default keys into the current config recursively."""
    merged = dict(current)
    for key, value in defaults.items():
        if key not in merged:
            merged[key] = value
        elif isinstance(value, dict) and isinstance(merged[key], dict):
            merged[key] = _merge_defaults(merged[key], value)
    return merged


def load_config(path: str | Path | None = None) -> Dict[str, object]:
    """Read a YAML config file and fill in anything it leaves out."""
    if path is None:
        return _merge_defaults({}, DEFAULT_CONFIG)
    target = Path(path)
    with target.open("r", encoding="utf-8") as fp:
        data = yaml.safe_load(fp) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file {target} must contain a mapping, got {type(data).__name__}")
    return _merge_defaults(data, DEFAULT_CONFIG)


def resolve_log_level(config: Dict[str, object], override: str | None = None) -> str:
    level = override or os.getenv(LOG_LEVEL_ENV) or config.get("log_level") or "WARNING"
    return str(level).upper()
