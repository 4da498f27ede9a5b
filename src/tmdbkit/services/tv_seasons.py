"""``/tv/{tv_id}/season/{season_number}`` endpoints."""

from __future__ import annotations

from tmdbkit.entities import (
    AppendToResponse,
    Credits,
    ExternalIds,
    Images,
    TvSeason,
    Videos,
)

from .base import ApiResponse, Endpoint, TmdbService

_SEASON = "tv/{tv_id}/season/{season_number}"

SEASON = Endpoint("GET", _SEASON, TvSeason)
CREDITS = Endpoint("GET", f"{_SEASON}/credits", Credits)
EXTERNAL_IDS = Endpoint("GET", f"{_SEASON}/external_ids", ExternalIds)
IMAGES = Endpoint("GET", f"{_SEASON}/images", Images)
VIDEOS = Endpoint("GET", f"{_SEASON}/videos", Videos)


class TvSeasonsService(TmdbService):
    async def season(
        self,
        tv_id: int,
        season_number: int,
        language: str | None = None,
        append_to_response: AppendToResponse | None = None,
    ) -> ApiResponse[TvSeason]:
        """Get the season details including its episodes."""
        return await self._call(
            SEASON,
            path_params={"tv_id": tv_id, "season_number": season_number},
            query={"language": language, "append_to_response": append_to_response},
        )

    async def credits(self, tv_id: int, season_number: int) -> ApiResponse[Credits]:
        return await self._call(
            CREDITS, path_params={"tv_id": tv_id, "season_number": season_number}
        )

    async def external_ids(
        self, tv_id: int, season_number: int
    ) -> ApiResponse[ExternalIds]:
        return await self._call(
            EXTERNAL_IDS, path_params={"tv_id": tv_id, "season_number": season_number}
        )

    async def images(
        self,
        tv_id: int,
        season_number: int,
        language: str | None = None,
        include_image_language: str | None = None,
    ) -> ApiResponse[Images]:
        return await self._call(
            IMAGES,
            path_params={"tv_id": tv_id, "season_number": season_number},
            query={
                "language": language,
                "include_image_language": include_image_language,
            },
        )

    async def videos(
        self, tv_id: int, season_number: int, language: str | None = None
    ) -> ApiResponse[Videos]:
        return await self._call(
            VIDEOS,
            path_params={"tv_id": tv_id, "season_number": season_number},
            query={"language": language},
        )
