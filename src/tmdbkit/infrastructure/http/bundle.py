"""Immutable client bundle used by all service accessors."""

from __future__ import annotations

from dataclasses import dataclass

import httpx

from .codec import JsonCodec


@dataclass(frozen=True)
class ClientBundle:
    """Base URL, configured ``httpx.AsyncClient`` and JSON codec.

    Built once per configuration epoch by ``Tmdb.get_client()`` and never
    mutated afterwards.
    """

    base_url: str
    http: httpx.AsyncClient
    codec: JsonCodec
