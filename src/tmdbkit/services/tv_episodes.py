"""``/tv/{tv_id}/season/{season_number}/episode/{episode_number}`` endpoints."""

from __future__ import annotations

from typing import Any

from tmdbkit.entities import (
    AppendToResponse,
    Credits,
    ExternalIds,
    Images,
    TvEpisode,
    Videos,
)

from .base import ApiResponse, Endpoint, TmdbService

_EPISODE = "tv/{tv_id}/season/{season_number}/episode/{episode_number}"

EPISODE = Endpoint("GET", _EPISODE, TvEpisode)
CREDITS = Endpoint("GET", f"{_EPISODE}/credits", Credits)
EXTERNAL_IDS = Endpoint("GET", f"{_EPISODE}/external_ids", ExternalIds)
IMAGES = Endpoint("GET", f"{_EPISODE}/images", Images)
VIDEOS = Endpoint("GET", f"{_EPISODE}/videos", Videos)


def _path(tv_id: int, season_number: int, episode_number: int) -> dict[str, Any]:
    return {
        "tv_id": tv_id,
        "season_number": season_number,
        "episode_number": episode_number,
    }


class TvEpisodesService(TmdbService):
    async def episode(
        self,
        tv_id: int,
        season_number: int,
        episode_number: int,
        language: str | None = None,
        append_to_response: AppendToResponse | None = None,
    ) -> ApiResponse[TvEpisode]:
        return await self._call(
            EPISODE,
            path_params=_path(tv_id, season_number, episode_number),
            query={"language": language, "append_to_response": append_to_response},
        )

    async def credits(
        self, tv_id: int, season_number: int, episode_number: int
    ) -> ApiResponse[Credits]:
        return await self._call(
            CREDITS, path_params=_path(tv_id, season_number, episode_number)
        )

    async def external_ids(
        self, tv_id: int, season_number: int, episode_number: int
    ) -> ApiResponse[ExternalIds]:
        return await self._call(
            EXTERNAL_IDS, path_params=_path(tv_id, season_number, episode_number)
        )

    async def images(
        self,
        tv_id: int,
        season_number: int,
        episode_number: int,
        language: str | None = None,
        include_image_language: str | None = None,
    ) -> ApiResponse[Images]:
        return await self._call(
            IMAGES,
            path_params=_path(tv_id, season_number, episode_number),
            query={
                "language": language,
                "include_image_language": include_image_language,
            },
        )

    async def videos(
        self,
        tv_id: int,
        season_number: int,
        episode_number: int,
        language: str | None = None,
    ) -> ApiResponse[Videos]:
        return await self._call(
            VIDEOS,
            path_params=_path(tv_id, season_number, episode_number),
            query={"language": language},
        )
