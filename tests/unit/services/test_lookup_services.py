"""Tests for CollectionService, ConfigurationService and FindService."""

from __future__ import annotations

from collections.abc import Callable

import httpx
import pytest

from tmdbkit import ExternalSource

_CONFIGURATION = {
    "images": {
        "base_url": "http://image.tmdb.org/t/p/",
        "secure_base_url": "https://image.tmdb.org/t/p/",
        "backdrop_sizes": ["w300", "w780", "w1280", "original"],
        "poster_sizes": ["w92", "w154", "w185", "w342", "w500", "w780", "original"],
    },
    "change_keys": ["adult", "air_date", "also_known_as"],
}

_STAR_WARS_COLLECTION = {
    "id": 10,
    "name": "Star Wars Collection",
    "overview": "An epic space-opera theatrical film series.",
    "parts": [
        {"id": 11, "title": "Star Wars", "release_date": "1977-05-25"},
        {"id": 1891, "title": "The Empire Strikes Back", "release_date": "1980-05-20"},
    ],
}


class TestCollectionService:
    @pytest.mark.asyncio()
    async def test_summary(self, make_tmdb: Callable) -> None:
        tmdb = make_tmdb({"collection/10": _STAR_WARS_COLLECTION})

        collection = (await tmdb.collections().summary(10)).unwrap()

        assert collection.name == "Star Wars Collection"
        assert [p.id for p in collection.parts] == [11, 1891]

    @pytest.mark.asyncio()
    async def test_images(self, make_tmdb: Callable, recorded: list[httpx.Request]) -> None:
        tmdb = make_tmdb(
            {"collection/10/images": {"id": 10, "posters": [{"file_path": "/r8Ph5MYXL04Qzu4QBbq2KjqwtkQ.jpg"}]}}
        )

        images = (
            await tmdb.collections().images(10, include_image_language="en,null")
        ).unwrap()

        assert recorded[-1].url.params["include_image_language"] == "en,null"
        assert images.posters[0].file_path == "/r8Ph5MYXL04Qzu4QBbq2KjqwtkQ.jpg"
        assert images.backdrops == []


class TestConfigurationService:
    @pytest.mark.asyncio()
    async def test_configuration(self, make_tmdb: Callable) -> None:
        tmdb = make_tmdb({"configuration": _CONFIGURATION})

        configuration = (await tmdb.configuration().configuration()).unwrap()

        assert configuration.images is not None
        assert configuration.images.poster_sizes[4] == "w500"
        assert (
            configuration.images.image_url("/abc.jpg", "w500")
            == "https://image.tmdb.org/t/p/w500/abc.jpg"
        )
        assert "air_date" in configuration.change_keys


class TestFindService:
    @pytest.mark.asyncio()
    async def test_find_by_imdb_id(
        self, make_tmdb: Callable, recorded: list[httpx.Request]
    ) -> None:
        tmdb = make_tmdb(
            {
                "find/tt0137523": {
                    "movie_results": [{"id": 550, "title": "Fight Club"}],
                    "person_results": [],
                    "tv_results": [],
                    "tv_episode_results": [],
                    "tv_season_results": [],
                }
            }
        )

        found = (await tmdb.find().find("tt0137523", ExternalSource.IMDB_ID)).unwrap()

        params = recorded[-1].url.params
        assert params["external_source"] == "imdb_id"
        assert list(params.keys())[-1] == "api_key"
        assert found.movie_results[0].id == 550
        assert found.tv_results == []

    @pytest.mark.asyncio()
    async def test_find_tv_by_tvdb_id(self, make_tmdb: Callable) -> None:
        tmdb = make_tmdb({"find/81189": {"tv_results": [{"id": 1396, "name": "Breaking Bad"}]}})

        found = (await tmdb.find().find("81189", ExternalSource.TVDB_ID)).unwrap()

        assert found.tv_results[0].name == "Breaking Bad"
        assert found.movie_results == []
