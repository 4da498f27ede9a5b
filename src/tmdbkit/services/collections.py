"""``/collection/*`` endpoints."""

from __future__ import annotations

from tmdbkit.entities import AppendToResponse, Collection, Images

from .base import ApiResponse, Endpoint, TmdbService

SUMMARY = Endpoint("GET", "collection/{collection_id}", Collection)
IMAGES = Endpoint("GET", "collection/{collection_id}/images", Images)


class CollectionService(TmdbService):
    async def summary(
        self,
        collection_id: int,
        language: str | None = None,
        append_to_response: AppendToResponse | None = None,
    ) -> ApiResponse[Collection]:
        """Get collection details and the movies (``parts``) in it."""
        return await self._call(
            SUMMARY,
            path_params={"collection_id": collection_id},
            query={"language": language, "append_to_response": append_to_response},
        )

    async def images(
        self,
        collection_id: int,
        language: str | None = None,
        include_image_language: str | None = None,
    ) -> ApiResponse[Images]:
        return await self._call(
            IMAGES,
            path_params={"collection_id": collection_id},
            query={
                "language": language,
                "include_image_language": include_image_language,
            },
        )
