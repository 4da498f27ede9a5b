"""``/movie/*`` endpoints."""

from __future__ import annotations

from tmdbkit.entities import (
    AlternativeTitles,
    AppendToResponse,
    Credits,
    ExternalIds,
    Images,
    Keywords,
    Movie,
    MovieResultsPage,
    ReleaseDates,
    ReviewResultsPage,
    Translations,
    Videos,
)

from .base import ApiResponse, Endpoint, TmdbService

SUMMARY = Endpoint("GET", "movie/{movie_id}", Movie)
ALTERNATIVE_TITLES = Endpoint(
    "GET", "movie/{movie_id}/alternative_titles", AlternativeTitles
)
CREDITS = Endpoint("GET", "movie/{movie_id}/credits", Credits)
EXTERNAL_IDS = Endpoint("GET", "movie/{movie_id}/external_ids", ExternalIds)
IMAGES = Endpoint("GET", "movie/{movie_id}/images", Images)
KEYWORDS = Endpoint("GET", "movie/{movie_id}/keywords", Keywords)
RELEASE_DATES = Endpoint("GET", "movie/{movie_id}/release_dates", ReleaseDates)
VIDEOS = Endpoint("GET", "movie/{movie_id}/videos", Videos)
TRANSLATIONS = Endpoint("GET", "movie/{movie_id}/translations", Translations)
SIMILAR = Endpoint("GET", "movie/{movie_id}/similar", MovieResultsPage)
RECOMMENDATIONS = Endpoint(
    "GET", "movie/{movie_id}/recommendations", MovieResultsPage
)
REVIEWS = Endpoint("GET", "movie/{movie_id}/reviews", ReviewResultsPage)
LATEST = Endpoint("GET", "movie/latest", Movie)
NOW_PLAYING = Endpoint("GET", "movie/now_playing", MovieResultsPage)
POPULAR = Endpoint("GET", "movie/popular", MovieResultsPage)
TOP_RATED = Endpoint("GET", "movie/top_rated", MovieResultsPage)
UPCOMING = Endpoint("GET", "movie/upcoming", MovieResultsPage)


class MoviesService(TmdbService):
    async def summary(
        self,
        movie_id: int,
        language: str | None = None,
        append_to_response: AppendToResponse | None = None,
    ) -> ApiResponse[Movie]:
        """Get the basic movie information for a specific movie id.

        Sub-resources named in *append_to_response* are returned on the same
        ``Movie`` (e.g. ``movie.credits``).
        """
        return await self._call(
            SUMMARY,
            path_params={"movie_id": movie_id},
            query={"language": language, "append_to_response": append_to_response},
        )

    async def alternative_titles(
        self, movie_id: int, country: str | None = None
    ) -> ApiResponse[AlternativeTitles]:
        return await self._call(
            ALTERNATIVE_TITLES,
            path_params={"movie_id": movie_id},
            query={"country": country},
        )

    async def credits(self, movie_id: int) -> ApiResponse[Credits]:
        return await self._call(CREDITS, path_params={"movie_id": movie_id})

    async def external_ids(self, movie_id: int) -> ApiResponse[ExternalIds]:
        return await self._call(EXTERNAL_IDS, path_params={"movie_id": movie_id})

    async def images(
        self,
        movie_id: int,
        language: str | None = None,
        include_image_language: str | None = None,
    ) -> ApiResponse[Images]:
        return await self._call(
            IMAGES,
            path_params={"movie_id": movie_id},
            query={
                "language": language,
                "include_image_language": include_image_language,
            },
        )

    async def keywords(self, movie_id: int) -> ApiResponse[Keywords]:
        return await self._call(KEYWORDS, path_params={"movie_id": movie_id})

    async def release_dates(self, movie_id: int) -> ApiResponse[ReleaseDates]:
        """Release dates and certifications per country."""
        return await self._call(RELEASE_DATES, path_params={"movie_id": movie_id})

    async def videos(
        self, movie_id: int, language: str | None = None
    ) -> ApiResponse[Videos]:
        return await self._call(
            VIDEOS, path_params={"movie_id": movie_id}, query={"language": language}
        )

    async def translations(self, movie_id: int) -> ApiResponse[Translations]:
        return await self._call(TRANSLATIONS, path_params={"movie_id": movie_id})

    async def similar(
        self,
        movie_id: int,
        page: int | None = None,
        language: str | None = None,
    ) -> ApiResponse[MovieResultsPage]:
        return await self._call(
            SIMILAR,
            path_params={"movie_id": movie_id},
            query={"page": page, "language": language},
        )

    async def recommendations(
        self,
        movie_id: int,
        page: int | None = None,
        language: str | None = None,
    ) -> ApiResponse[MovieResultsPage]:
        return await self._call(
            RECOMMENDATIONS,
            path_params={"movie_id": movie_id},
            query={"page": page, "language": language},
        )

    async def reviews(
        self,
        movie_id: int,
        page: int | None = None,
        language: str | None = None,
    ) -> ApiResponse[ReviewResultsPage]:
        return await self._call(
            REVIEWS,
            path_params={"movie_id": movie_id},
            query={"page": page, "language": language},
        )

    async def latest(self) -> ApiResponse[Movie]:
        """Get the most newly created movie."""
        return await self._call(LATEST)

    async def now_playing(
        self,
        page: int | None = None,
        language: str | None = None,
        region: str | None = None,
    ) -> ApiResponse[MovieResultsPage]:
        return await self._call(
            NOW_PLAYING,
            query={"page": page, "language": language, "region": region},
        )

    async def popular(
        self,
        page: int | None = None,
        language: str | None = None,
        region: str | None = None,
    ) -> ApiResponse[MovieResultsPage]:
        return await self._call(
            POPULAR,
            query={"page": page, "language": language, "region": region},
        )

    async def top_rated(
        self,
        page: int | None = None,
        language: str | None = None,
        region: str | None = None,
    ) -> ApiResponse[MovieResultsPage]:
        return await self._call(
            TOP_RATED,
            query={"page": page, "language": language, "region": region},
        )

    async def upcoming(
        self,
        page: int | None = None,
        language: str | None = None,
        region: str | None = None,
    ) -> ApiResponse[MovieResultsPage]:
        return await self._call(
            UPCOMING,
            query={"page": page, "language": language, "region": region},
        )
