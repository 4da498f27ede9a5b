"""Tests for TvService, TvSeasonsService and TvEpisodesService."""

from __future__ import annotations

from collections.abc import Callable
from datetime import date

import httpx
import pytest

from tmdbkit import AppendToResponse, AppendToResponseItem

_BREAKING_BAD = {
    "id": 1396,
    "name": "Breaking Bad",
    "first_air_date": "2008-01-20",
    "last_air_date": "2013-09-29",
    "in_production": False,
    "number_of_seasons": 5,
    "number_of_episodes": 62,
    "episode_run_time": [45, 47],
    "created_by": [{"id": 66633, "name": "Vince Gilligan", "credit_id": "52542286760ee31328001a7b"}],
    "networks": [{"id": 174, "name": "AMC", "origin_country": "US"}],
    "seasons": [
        {"id": 3577, "season_number": 0, "name": "Specials", "air_date": "2009-02-17", "episode_count": 9},
        {"id": 3572, "season_number": 1, "name": "Season 1", "air_date": "2008-01-20", "episode_count": 7},
    ],
    "next_episode_to_air": None,
}

_SEASON_ONE = {
    "id": 3572,
    "season_number": 1,
    "name": "Season 1",
    "air_date": "2008-01-20",
    "episodes": [
        {"id": 62085, "episode_number": 1, "season_number": 1, "name": "Pilot", "air_date": "2008-01-20"},
        {"id": 62086, "episode_number": 2, "season_number": 1, "name": "Cat's in the Bag...", "air_date": "2008-01-27"},
    ],
}

_PILOT = {
    "id": 62085,
    "episode_number": 1,
    "season_number": 1,
    "name": "Pilot",
    "air_date": "2008-01-20",
    "runtime": 58,
    "crew": [{"id": 66633, "name": "Vince Gilligan", "job": "Writer"}],
    "guest_stars": [{"id": 92495, "name": "John Koyama", "character": "Emilio Koyama"}],
}


class TestTvService:
    @pytest.mark.asyncio()
    async def test_summary(self, make_tmdb: Callable) -> None:
        tmdb = make_tmdb({"tv/1396": _BREAKING_BAD})

        show = (await tmdb.tv().summary(1396)).unwrap()

        assert show.name == "Breaking Bad"
        assert show.first_air_date == date(2008, 1, 20)
        assert show.episode_run_time == [45, 47]
        assert show.created_by[0].name == "Vince Gilligan"
        assert show.networks[0].name == "AMC"
        assert [s.season_number for s in show.seasons] == [0, 1]
        assert show.next_episode_to_air is None

    @pytest.mark.asyncio()
    async def test_summary_with_appended_external_ids(
        self, make_tmdb: Callable, recorded: list[httpx.Request]
    ) -> None:
        tmdb = make_tmdb(
            {"tv/1396": {**_BREAKING_BAD, "external_ids": {"imdb_id": "tt0903747", "tvdb_id": 81189}}}
        )

        show = (
            await tmdb.tv().summary(
                1396, append_to_response=AppendToResponse(AppendToResponseItem.EXTERNAL_IDS)
            )
        ).unwrap()

        assert recorded[-1].url.params["append_to_response"] == "external_ids"
        assert show.external_ids is not None
        assert show.external_ids.tvdb_id == 81189

    @pytest.mark.asyncio()
    async def test_popular(self, make_tmdb: Callable) -> None:
        tmdb = make_tmdb(
            {"tv/popular": {"page": 1, "total_pages": 500, "total_results": 10000, "results": [{"id": 1396, "name": "Breaking Bad"}]}}
        )

        page = (await tmdb.tv().popular()).unwrap()

        assert page.total_pages == 500
        assert page.results[0].id == 1396


class TestTvSeasonsService:
    @pytest.mark.asyncio()
    async def test_season(self, make_tmdb: Callable) -> None:
        tmdb = make_tmdb({"tv/1396/season/1": _SEASON_ONE})

        season = (await tmdb.tv_seasons().season(1396, 1)).unwrap()

        assert season.season_number == 1
        assert [e.name for e in season.episodes] == ["Pilot", "Cat's in the Bag..."]
        assert season.episodes[1].air_date == date(2008, 1, 27)

    @pytest.mark.asyncio()
    async def test_specials_season(
        self, make_tmdb: Callable, recorded: list[httpx.Request]
    ) -> None:
        tmdb = make_tmdb({"tv/1396/season/0": {"id": 3577, "season_number": 0, "episodes": []}})

        season = (await tmdb.tv_seasons().season(1396, 0)).unwrap()

        assert recorded[-1].url.path == "/3/tv/1396/season/0"
        assert season.episodes == []

    @pytest.mark.asyncio()
    async def test_credits(self, make_tmdb: Callable) -> None:
        tmdb = make_tmdb(
            {"tv/1396/season/1/credits": {"id": 3572, "cast": [{"id": 17419, "name": "Bryan Cranston"}]}}
        )

        credits = (await tmdb.tv_seasons().credits(1396, 1)).unwrap()

        assert credits.cast[0].name == "Bryan Cranston"


class TestTvEpisodesService:
    @pytest.mark.asyncio()
    async def test_episode(self, make_tmdb: Callable) -> None:
        tmdb = make_tmdb({"tv/1396/season/1/episode/1": _PILOT})

        episode = (await tmdb.tv_episodes().episode(1396, 1, 1)).unwrap()

        assert episode.name == "Pilot"
        assert episode.runtime == 58
        assert episode.crew[0].job == "Writer"
        assert episode.guest_stars[0].character == "Emilio Koyama"

    @pytest.mark.asyncio()
    async def test_external_ids(self, make_tmdb: Callable) -> None:
        tmdb = make_tmdb(
            {"tv/1396/season/1/episode/1/external_ids": {"id": 62085, "imdb_id": "tt0959621", "tvdb_id": 349232}}
        )

        ids = (await tmdb.tv_episodes().external_ids(1396, 1, 1)).unwrap()

        assert ids.imdb_id == "tt0959621"

    @pytest.mark.asyncio()
    async def test_missing_episode(self, make_tmdb: Callable) -> None:
        tmdb = make_tmdb({})

        result = await tmdb.tv_episodes().episode(1396, 1, 99)

        assert not result.is_success
        assert result.error.status_message.startswith("The resource")

    @pytest.mark.asyncio()
    async def test_images_language_filters(
        self, make_tmdb: Callable, recorded: list[httpx.Request]
    ) -> None:
        tmdb = make_tmdb(
            {"tv/1396/season/1/episode/1/images": {"id": 62085, "stills": [{"file_path": "/ydlY3iPfeOAvu8gVqrxPoMvzNCn.jpg"}]}}
        )

        images = (
            await tmdb.tv_episodes().images(
                1396, 1, 1, language="en-US", include_image_language="en,null"
            )
        ).unwrap()

        params = recorded[-1].url.params
        assert params["language"] == "en-US"
        assert params["include_image_language"] == "en,null"
        assert images.stills[0].file_path == "/ydlY3iPfeOAvu8gVqrxPoMvzNCn.jpg"
