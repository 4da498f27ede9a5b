"""``/person/*`` endpoints."""

from __future__ import annotations

from tmdbkit.entities import (
    AppendToResponse,
    ExternalIds,
    Images,
    Person,
    PersonCredits,
    PersonResultsPage,
)

from .base import ApiResponse, Endpoint, TmdbService

SUMMARY = Endpoint("GET", "person/{person_id}", Person)
MOVIE_CREDITS = Endpoint("GET", "person/{person_id}/movie_credits", PersonCredits)
TV_CREDITS = Endpoint("GET", "person/{person_id}/tv_credits", PersonCredits)
COMBINED_CREDITS = Endpoint(
    "GET", "person/{person_id}/combined_credits", PersonCredits
)
EXTERNAL_IDS = Endpoint("GET", "person/{person_id}/external_ids", ExternalIds)
IMAGES = Endpoint("GET", "person/{person_id}/images", Images)
POPULAR = Endpoint("GET", "person/popular", PersonResultsPage)
LATEST = Endpoint("GET", "person/latest", Person)


class PeopleService(TmdbService):
    async def summary(
        self,
        person_id: int,
        language: str | None = None,
        append_to_response: AppendToResponse | None = None,
    ) -> ApiResponse[Person]:
        """Get the primary person details by id."""
        return await self._call(
            SUMMARY,
            path_params={"person_id": person_id},
            query={"language": language, "append_to_response": append_to_response},
        )

    async def movie_credits(
        self, person_id: int, language: str | None = None
    ) -> ApiResponse[PersonCredits]:
        return await self._call(
            MOVIE_CREDITS,
            path_params={"person_id": person_id},
            query={"language": language},
        )

    async def tv_credits(
        self, person_id: int, language: str | None = None
    ) -> ApiResponse[PersonCredits]:
        return await self._call(
            TV_CREDITS,
            path_params={"person_id": person_id},
            query={"language": language},
        )

    async def combined_credits(
        self, person_id: int, language: str | None = None
    ) -> ApiResponse[PersonCredits]:
        """Movie and TV credits in one list, told apart by ``media_type``."""
        return await self._call(
            COMBINED_CREDITS,
            path_params={"person_id": person_id},
            query={"language": language},
        )

    async def external_ids(self, person_id: int) -> ApiResponse[ExternalIds]:
        return await self._call(EXTERNAL_IDS, path_params={"person_id": person_id})

    async def images(self, person_id: int) -> ApiResponse[Images]:
        return await self._call(IMAGES, path_params={"person_id": person_id})

    async def popular(
        self, page: int | None = None, language: str | None = None
    ) -> ApiResponse[PersonResultsPage]:
        return await self._call(POPULAR, query={"page": page, "language": language})

    async def latest(self) -> ApiResponse[Person]:
        return await self._call(LATEST)
