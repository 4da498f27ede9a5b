"""``/search/*`` endpoints."""

from __future__ import annotations

from tmdbkit.entities import (
    CollectionResultsPage,
    CompanyResultsPage,
    KeywordResultsPage,
    MediaResultsPage,
    MovieResultsPage,
    PersonResultsPage,
    SearchType,
    TvResultsPage,
)

from .base import ApiResponse, Endpoint, TmdbService

COMPANY = Endpoint("GET", "search/company", CompanyResultsPage)
COLLECTION = Endpoint("GET", "search/collection", CollectionResultsPage)
KEYWORD = Endpoint("GET", "search/keyword", KeywordResultsPage)
MOVIE = Endpoint("GET", "search/movie", MovieResultsPage)
MULTI = Endpoint("GET", "search/multi", MediaResultsPage)
PERSON = Endpoint("GET", "search/person", PersonResultsPage)
TV = Endpoint("GET", "search/tv", TvResultsPage)


class SearchService(TmdbService):
    async def company(
        self, query: str, page: int | None = None
    ) -> ApiResponse[CompanyResultsPage]:
        """Search for companies by name."""
        return await self._call(COMPANY, query={"query": query, "page": page})

    async def collection(
        self,
        query: str,
        page: int | None = None,
        language: str | None = None,
    ) -> ApiResponse[CollectionResultsPage]:
        """Search for collections by name."""
        return await self._call(
            COLLECTION, query={"query": query, "page": page, "language": language}
        )

    async def keyword(
        self, query: str, page: int | None = None
    ) -> ApiResponse[KeywordResultsPage]:
        """Search for keywords by name."""
        return await self._call(KEYWORD, query={"query": query, "page": page})

    async def movie(
        self,
        query: str,
        page: int | None = None,
        language: str | None = None,
        include_adult: bool | None = None,
        year: int | None = None,
        primary_release_year: int | None = None,
        search_type: SearchType | None = None,
        region: str | None = None,
    ) -> ApiResponse[MovieResultsPage]:
        """Search for movies by title.

        Args:
            query: CGI escaped string.
            page: Minimum 1, maximum 1000.
            language: ISO 639-1 code.
            include_adult: Toggle the inclusion of adult titles.
            year: Filter by release year.
            primary_release_year: Filter by primary release year.
            search_type: ``phrase`` (default) or ``ngram`` for autocomplete.
            region: ISO 3166-1 code to filter release dates.
        """
        return await self._call(
            MOVIE,
            query={
                "query": query,
                "page": page,
                "language": language,
                "include_adult": include_adult,
                "year": year,
                "primary_release_year": primary_release_year,
                "search_type": search_type,
                "region": region,
            },
        )

    async def multi(
        self,
        query: str,
        page: int | None = None,
        language: str | None = None,
        include_adult: bool | None = None,
    ) -> ApiResponse[MediaResultsPage]:
        """Search movies, TV shows and people in a single request."""
        return await self._call(
            MULTI,
            query={
                "query": query,
                "page": page,
                "language": language,
                "include_adult": include_adult,
            },
        )

    async def person(
        self,
        query: str,
        page: int | None = None,
        include_adult: bool | None = None,
        search_type: SearchType | None = None,
    ) -> ApiResponse[PersonResultsPage]:
        """Search for people by name."""
        return await self._call(
            PERSON,
            query={
                "query": query,
                "page": page,
                "include_adult": include_adult,
                "search_type": search_type,
            },
        )

    async def tv(
        self,
        query: str,
        page: int | None = None,
        language: str | None = None,
        first_air_date_year: int | None = None,
        search_type: SearchType | None = None,
    ) -> ApiResponse[TvResultsPage]:
        """Search for TV shows by title."""
        return await self._call(
            TV,
            query={
                "query": query,
                "page": page,
                "language": language,
                "first_air_date_year": first_air_date_year,
                "search_type": search_type,
            },
        )
