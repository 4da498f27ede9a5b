from __future__ import annotations

from .load import load_settings
from .schema import EnvOverrides, TmdbSettings

__all__ = ["EnvOverrides", "TmdbSettings", "load_settings"]
