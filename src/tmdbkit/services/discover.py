"""``/discover/*`` endpoints."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date

from tmdbkit.entities import MovieResultsPage, SortBy, TvResultsPage

from .base import ApiResponse, Endpoint, TmdbService

MOVIE = Endpoint("GET", "discover/movie", MovieResultsPage)
TV = Endpoint("GET", "discover/tv", TvResultsPage)


class DiscoverService(TmdbService):
    """Discover movies and TV shows by filters instead of a text query.

    List filters (``with_genres`` etc.) are sent comma separated, which
    TMDB reads as AND.  Pass a pre-joined ``"28|12"`` string for OR.
    """

    async def movie(
        self,
        *,
        page: int | None = None,
        language: str | None = None,
        region: str | None = None,
        sort_by: SortBy | None = None,
        include_adult: bool | None = None,
        include_video: bool | None = None,
        year: int | None = None,
        primary_release_year: int | None = None,
        primary_release_date_gte: date | None = None,
        primary_release_date_lte: date | None = None,
        release_date_gte: date | None = None,
        release_date_lte: date | None = None,
        vote_count_gte: int | None = None,
        vote_count_lte: int | None = None,
        vote_average_gte: float | None = None,
        vote_average_lte: float | None = None,
        with_cast: Sequence[int] | str | None = None,
        with_crew: Sequence[int] | str | None = None,
        with_people: Sequence[int] | str | None = None,
        with_companies: Sequence[int] | str | None = None,
        with_genres: Sequence[int] | str | None = None,
        without_genres: Sequence[int] | str | None = None,
        with_keywords: Sequence[int] | str | None = None,
        without_keywords: Sequence[int] | str | None = None,
        with_runtime_gte: int | None = None,
        with_runtime_lte: int | None = None,
        with_original_language: str | None = None,
        certification_country: str | None = None,
        certification: str | None = None,
        certification_lte: str | None = None,
    ) -> ApiResponse[MovieResultsPage]:
        return await self._call(
            MOVIE,
            query={
                "page": page,
                "language": language,
                "region": region,
                "sort_by": sort_by,
                "include_adult": include_adult,
                "include_video": include_video,
                "year": year,
                "primary_release_year": primary_release_year,
                "primary_release_date.gte": primary_release_date_gte,
                "primary_release_date.lte": primary_release_date_lte,
                "release_date.gte": release_date_gte,
                "release_date.lte": release_date_lte,
                "vote_count.gte": vote_count_gte,
                "vote_count.lte": vote_count_lte,
                "vote_average.gte": vote_average_gte,
                "vote_average.lte": vote_average_lte,
                "with_cast": with_cast,
                "with_crew": with_crew,
                "with_people": with_people,
                "with_companies": with_companies,
                "with_genres": with_genres,
                "without_genres": without_genres,
                "with_keywords": with_keywords,
                "without_keywords": without_keywords,
                "with_runtime.gte": with_runtime_gte,
                "with_runtime.lte": with_runtime_lte,
                "with_original_language": with_original_language,
                "certification_country": certification_country,
                "certification": certification,
                "certification.lte": certification_lte,
            },
        )

    async def tv(
        self,
        *,
        page: int | None = None,
        language: str | None = None,
        sort_by: SortBy | None = None,
        first_air_date_year: int | None = None,
        first_air_date_gte: date | None = None,
        first_air_date_lte: date | None = None,
        air_date_gte: date | None = None,
        air_date_lte: date | None = None,
        timezone: str | None = None,
        vote_count_gte: int | None = None,
        vote_average_gte: float | None = None,
        with_genres: Sequence[int] | str | None = None,
        without_genres: Sequence[int] | str | None = None,
        with_networks: Sequence[int] | str | None = None,
        with_companies: Sequence[int] | str | None = None,
        with_keywords: Sequence[int] | str | None = None,
        without_keywords: Sequence[int] | str | None = None,
        with_runtime_gte: int | None = None,
        with_runtime_lte: int | None = None,
        with_original_language: str | None = None,
        include_null_first_air_dates: bool | None = None,
    ) -> ApiResponse[TvResultsPage]:
        return await self._call(
            TV,
            query={
                "page": page,
                "language": language,
                "sort_by": sort_by,
                "first_air_date_year": first_air_date_year,
                "first_air_date.gte": first_air_date_gte,
                "first_air_date.lte": first_air_date_lte,
                "air_date.gte": air_date_gte,
                "air_date.lte": air_date_lte,
                "timezone": timezone,
                "vote_count.gte": vote_count_gte,
                "vote_average.gte": vote_average_gte,
                "with_genres": with_genres,
                "without_genres": without_genres,
                "with_networks": with_networks,
                "with_companies": with_companies,
                "with_keywords": with_keywords,
                "without_keywords": without_keywords,
                "with_runtime.gte": with_runtime_gte,
                "with_runtime.lte": with_runtime_lte,
                "with_original_language": with_original_language,
                "include_null_first_air_dates": include_null_first_air_dates,
            },
        )
