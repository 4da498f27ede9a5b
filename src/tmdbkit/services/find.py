"""``/find/{external_id}`` endpoint."""

from __future__ import annotations

from tmdbkit.entities import ExternalSource, FindResults

from .base import ApiResponse, Endpoint, TmdbService

FIND = Endpoint("GET", "find/{external_id}", FindResults)


class FindService(TmdbService):
    async def find(
        self,
        external_id: str,
        external_source: ExternalSource,
        language: str | None = None,
    ) -> ApiResponse[FindResults]:
        """Look up movies, shows, seasons, episodes or people by an external id.

        Args:
            external_id: e.g. an IMDb id like ``"tt0137523"``.
            external_source: Which id namespace *external_id* belongs to.
            language: ISO 639-1 code.
        """
        return await self._call(
            FIND,
            path_params={"external_id": external_id},
            query={"external_source": external_source, "language": language},
        )
