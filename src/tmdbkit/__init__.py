"""Async client for the TMDB v3 API."""

from __future__ import annotations

from .entities import AppendToResponse, AppendToResponseItem, ExternalSource
from .exceptions import (
    TmdbDecodeError,
    TmdbError,
    TmdbHttpError,
    TmdbTransportError,
)
from .infrastructure.config import TmdbSettings, load_settings
from .services import ApiResponse
from .tmdb import API_URL, PARAM_API_KEY, Tmdb

__all__ = [
    "API_URL",
    "PARAM_API_KEY",
    "ApiResponse",
    "AppendToResponse",
    "AppendToResponseItem",
    "ExternalSource",
    "Tmdb",
    "TmdbDecodeError",
    "TmdbError",
    "TmdbHttpError",
    "TmdbSettings",
    "TmdbTransportError",
    "load_settings",
]
