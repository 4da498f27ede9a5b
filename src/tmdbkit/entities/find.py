"""Results of ``/find/{external_id}``."""

from __future__ import annotations

from pydantic import Field

from .base import TmdbModel
from .movies import BaseMovie
from .people import BasePerson
from .tv import BaseTvSeason, BaseTvShow, TvEpisode


class FindResults(TmdbModel):
    movie_results: list[BaseMovie] = Field(default_factory=list)
    person_results: list[BasePerson] = Field(default_factory=list)
    tv_results: list[BaseTvShow] = Field(default_factory=list)
    tv_episode_results: list[TvEpisode] = Field(default_factory=list)
    tv_season_results: list[BaseTvSeason] = Field(default_factory=list)
