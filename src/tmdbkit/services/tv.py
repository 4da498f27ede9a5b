"""``/tv/*`` endpoints."""

from __future__ import annotations

from tmdbkit.entities import (
    AlternativeTitles,
    AppendToResponse,
    Credits,
    ExternalIds,
    Images,
    Keywords,
    Translations,
    TvResultsPage,
    TvShow,
    Videos,
)

from .base import ApiResponse, Endpoint, TmdbService

SUMMARY = Endpoint("GET", "tv/{tv_id}", TvShow)
ALTERNATIVE_TITLES = Endpoint("GET", "tv/{tv_id}/alternative_titles", AlternativeTitles)
CREDITS = Endpoint("GET", "tv/{tv_id}/credits", Credits)
EXTERNAL_IDS = Endpoint("GET", "tv/{tv_id}/external_ids", ExternalIds)
IMAGES = Endpoint("GET", "tv/{tv_id}/images", Images)
KEYWORDS = Endpoint("GET", "tv/{tv_id}/keywords", Keywords)
SIMILAR = Endpoint("GET", "tv/{tv_id}/similar", TvResultsPage)
RECOMMENDATIONS = Endpoint("GET", "tv/{tv_id}/recommendations", TvResultsPage)
TRANSLATIONS = Endpoint("GET", "tv/{tv_id}/translations", Translations)
VIDEOS = Endpoint("GET", "tv/{tv_id}/videos", Videos)
LATEST = Endpoint("GET", "tv/latest", TvShow)
AIRING_TODAY = Endpoint("GET", "tv/airing_today", TvResultsPage)
ON_THE_AIR = Endpoint("GET", "tv/on_the_air", TvResultsPage)
POPULAR = Endpoint("GET", "tv/popular", TvResultsPage)
TOP_RATED = Endpoint("GET", "tv/top_rated", TvResultsPage)


class TvService(TmdbService):
    async def summary(
        self,
        tv_id: int,
        language: str | None = None,
        append_to_response: AppendToResponse | None = None,
    ) -> ApiResponse[TvShow]:
        """Get the primary information about a TV show."""
        return await self._call(
            SUMMARY,
            path_params={"tv_id": tv_id},
            query={"language": language, "append_to_response": append_to_response},
        )

    async def alternative_titles(self, tv_id: int) -> ApiResponse[AlternativeTitles]:
        return await self._call(ALTERNATIVE_TITLES, path_params={"tv_id": tv_id})

    async def credits(
        self, tv_id: int, language: str | None = None
    ) -> ApiResponse[Credits]:
        return await self._call(
            CREDITS, path_params={"tv_id": tv_id}, query={"language": language}
        )

    async def external_ids(
        self, tv_id: int, language: str | None = None
    ) -> ApiResponse[ExternalIds]:
        return await self._call(
            EXTERNAL_IDS, path_params={"tv_id": tv_id}, query={"language": language}
        )

    async def images(
        self,
        tv_id: int,
        language: str | None = None,
        include_image_language: str | None = None,
    ) -> ApiResponse[Images]:
        return await self._call(
            IMAGES,
            path_params={"tv_id": tv_id},
            query={
                "language": language,
                "include_image_language": include_image_language,
            },
        )

    async def keywords(self, tv_id: int) -> ApiResponse[Keywords]:
        return await self._call(KEYWORDS, path_params={"tv_id": tv_id})

    async def similar(
        self,
        tv_id: int,
        page: int | None = None,
        language: str | None = None,
    ) -> ApiResponse[TvResultsPage]:
        return await self._call(
            SIMILAR,
            path_params={"tv_id": tv_id},
            query={"page": page, "language": language},
        )

    async def recommendations(
        self,
        tv_id: int,
        page: int | None = None,
        language: str | None = None,
    ) -> ApiResponse[TvResultsPage]:
        return await self._call(
            RECOMMENDATIONS,
            path_params={"tv_id": tv_id},
            query={"page": page, "language": language},
        )

    async def translations(self, tv_id: int) -> ApiResponse[Translations]:
        return await self._call(TRANSLATIONS, path_params={"tv_id": tv_id})

    async def videos(
        self, tv_id: int, language: str | None = None
    ) -> ApiResponse[Videos]:
        return await self._call(
            VIDEOS, path_params={"tv_id": tv_id}, query={"language": language}
        )

    async def latest(self, language: str | None = None) -> ApiResponse[TvShow]:
        """Get the most newly created TV show."""
        return await self._call(LATEST, query={"language": language})

    async def airing_today(
        self, page: int | None = None, language: str | None = None
    ) -> ApiResponse[TvResultsPage]:
        """Shows with an episode airing today (US Eastern Time)."""
        return await self._call(
            AIRING_TODAY, query={"page": page, "language": language}
        )

    async def on_the_air(
        self, page: int | None = None, language: str | None = None
    ) -> ApiResponse[TvResultsPage]:
        """Shows with an episode airing within the next 7 days."""
        return await self._call(ON_THE_AIR, query={"page": page, "language": language})

    async def popular(
        self, page: int | None = None, language: str | None = None
    ) -> ApiResponse[TvResultsPage]:
        return await self._call(POPULAR, query={"page": page, "language": language})

    async def top_rated(
        self, page: int | None = None, language: str | None = None
    ) -> ApiResponse[TvResultsPage]:
        return await self._call(TOP_RATED, query={"page": page, "language": language})
