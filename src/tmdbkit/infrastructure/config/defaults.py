"""Hardcoded default configuration values."""

from __future__ import annotations

from typing import Any

API_URL = "https://api.themoviedb.org/3/"

DEFAULT_CONFIG: dict[str, Any] = {
    "api_key": None,
    "debug": False,
    "http": {
        "base_url": API_URL,
        "timeout_seconds": 30.0,
        "user_agent": "tmdbkit/0.1.0",
    },
    "logging": {
        "level": "INFO",
        "format": "console",
    },
}
