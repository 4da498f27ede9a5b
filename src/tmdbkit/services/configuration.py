"""``/configuration`` endpoint."""

from __future__ import annotations

from tmdbkit.entities import Configuration

from .base import ApiResponse, Endpoint, TmdbService

CONFIGURATION = Endpoint("GET", "configuration", Configuration)


class ConfigurationService(TmdbService):
    async def configuration(self) -> ApiResponse[Configuration]:
        """Get the image base URLs and sizes needed to build image URLs."""
        return await self._call(CONFIGURATION)
