"""TV show, season and episode response models."""

from __future__ import annotations

from pydantic import Field

from .base import ResultsPage, TmdbDate, TmdbModel
from .common import (
    AlternativeTitles,
    BaseCompany,
    ExternalIds,
    Genre,
    Images,
    Keywords,
    Network,
    ProductionCountry,
    SpokenLanguage,
    Translations,
    Videos,
)
from .credits import CastMember, Credits, CrewMember


class TvEpisode(TmdbModel):
    id: int
    name: str | None = None
    overview: str | None = None
    air_date: TmdbDate = None
    episode_number: int | None = None
    season_number: int | None = None
    show_id: int | None = None
    production_code: str | None = None
    runtime: int | None = None
    still_path: str | None = None
    vote_average: float | None = None
    vote_count: int | None = None
    crew: list[CrewMember] = Field(default_factory=list)
    guest_stars: list[CastMember] = Field(default_factory=list)

    # append_to_response
    credits: Credits | None = None
    external_ids: ExternalIds | None = None
    images: Images | None = None
    videos: Videos | None = None


class BaseTvSeason(TmdbModel):
    id: int
    name: str | None = None
    overview: str | None = None
    air_date: TmdbDate = None
    episode_count: int | None = None
    season_number: int | None = None
    poster_path: str | None = None


class TvSeason(BaseTvSeason):
    episodes: list[TvEpisode] = Field(default_factory=list)

    # append_to_response
    credits: Credits | None = None
    external_ids: ExternalIds | None = None
    images: Images | None = None
    videos: Videos | None = None


class BaseTvShow(TmdbModel):
    id: int
    name: str | None = None
    original_name: str | None = None
    original_language: str | None = None
    overview: str | None = None
    first_air_date: TmdbDate = None
    origin_country: list[str] = Field(default_factory=list)
    genre_ids: list[int] = Field(default_factory=list)
    adult: bool | None = None
    backdrop_path: str | None = None
    poster_path: str | None = None
    popularity: float | None = None
    vote_average: float | None = None
    vote_count: int | None = None
    media_type: str | None = None


TvResultsPage = ResultsPage[BaseTvShow]


class Creator(TmdbModel):
    id: int
    name: str | None = None
    credit_id: str | None = None
    gender: int | None = None
    profile_path: str | None = None


class TvShow(BaseTvShow):
    """Full TV show summary, optionally with appended sub-resources."""

    created_by: list[Creator] = Field(default_factory=list)
    episode_run_time: list[int] = Field(default_factory=list)
    genres: list[Genre] = Field(default_factory=list)
    homepage: str | None = None
    in_production: bool | None = None
    languages: list[str] = Field(default_factory=list)
    last_air_date: TmdbDate = None
    last_episode_to_air: TvEpisode | None = None
    next_episode_to_air: TvEpisode | None = None
    networks: list[Network] = Field(default_factory=list)
    number_of_episodes: int | None = None
    number_of_seasons: int | None = None
    production_companies: list[BaseCompany] = Field(default_factory=list)
    production_countries: list[ProductionCountry] = Field(default_factory=list)
    seasons: list[BaseTvSeason] = Field(default_factory=list)
    spoken_languages: list[SpokenLanguage] = Field(default_factory=list)
    status: str | None = None
    tagline: str | None = None
    type: str | None = None

    # append_to_response
    alternative_titles: AlternativeTitles | None = None
    credits: Credits | None = None
    external_ids: ExternalIds | None = None
    images: Images | None = None
    keywords: Keywords | None = None
    recommendations: TvResultsPage | None = None
    similar: TvResultsPage | None = None
    translations: Translations | None = None
    videos: Videos | None = None
