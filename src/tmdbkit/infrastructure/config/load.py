from __future__ import annotations

from copy import deepcopy
from pathlib import Path
from typing import Any, Mapping

import yaml
from dotenv import load_dotenv

from .defaults import DEFAULT_CONFIG
from .schema import EnvOverrides, TmdbSettings

_SECTION_KEYS: set[str] = {"http", "logging"}


def _deep_merge(base: dict[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """
    Recursively merge `override` into `base` and return `base`.

    Rules:
    - dict + dict => deep merge
    - otherwise => override wins
    """
    for key, value in override.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, Mapping):
            _deep_merge(base[key], value)
        else:
            base[key] = value
    return base


def _normalize_layer(data: Mapping[str, Any]) -> dict[str, Any]:
    """
    Normalize a layer (defaults/YAML/ENV/overrides) into the canonical *sectioned* shape.

    Canonical keys:
    - api_key, debug
    - http.base_url, http.timeout_seconds, http.user_agent
    - logging.level, logging.format
    """
    out: dict[str, Any] = {}

    for section in _SECTION_KEYS:
        if section in data and isinstance(data[section], Mapping):
            out[section] = dict(data[section])

    for key in ("api_key", "debug"):
        if key in data:
            out[key] = data[key]

    flat_map: dict[str, tuple[str, str]] = {
        "base_url": ("http", "base_url"),
        "timeout_seconds": ("http", "timeout_seconds"),
        "user_agent": ("http", "user_agent"),
        "log_level": ("logging", "level"),
        "log_format": ("logging", "format"),
    }

    for flat_key, (section, section_key) in flat_map.items():
        if flat_key in data:
            out.setdefault(section, {})
            out[section][section_key] = data[flat_key]

    return out


def _read_yaml_config(config_path: Path) -> dict[str, Any]:
    raw = config_path.read_text(encoding="utf-8")
    parsed = yaml.safe_load(raw)
    if parsed is None:
        return {}
    if not isinstance(parsed, dict):
        raise ValueError(f"Config YAML must be a mapping, got: {type(parsed)!r}")
    return parsed


def load_settings(
    *,
    config_path: Path | None = None,
    dotenv_path: Path | None = None,
    overrides: dict[str, Any] | None = None,
) -> TmdbSettings:
    """
    Load configuration with strict precedence:
    defaults < YAML file < env vars < explicit overrides
    """
    overrides = overrides or {}

    # .env participates as part of the "env vars" layer.
    if dotenv_path is not None:
        if not dotenv_path.exists():
            raise FileNotFoundError(dotenv_path)
        load_dotenv(dotenv_path, override=False)

    base = _normalize_layer(deepcopy(DEFAULT_CONFIG))

    if config_path is not None:
        if not config_path.exists():
            raise FileNotFoundError(config_path)
        _deep_merge(base, _normalize_layer(_read_yaml_config(config_path)))

    _deep_merge(base, _normalize_layer(EnvOverrides().to_update_dict()))
    _deep_merge(base, _normalize_layer(overrides))

    return TmdbSettings.model_validate(base)
