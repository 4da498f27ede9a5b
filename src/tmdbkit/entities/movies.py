"""Movie response models."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from .base import ResultsPage, TmdbDate, TmdbModel
from .common import (
    AlternativeTitles,
    BaseCollection,
    BaseCompany,
    ExternalIds,
    Genre,
    Images,
    Keywords,
    ProductionCountry,
    ReviewResultsPage,
    SpokenLanguage,
    Translations,
    Videos,
)
from .credits import Credits


class BaseMovie(TmdbModel):
    id: int
    title: str | None = None
    original_title: str | None = None
    original_language: str | None = None
    overview: str | None = None
    release_date: TmdbDate = None
    adult: bool | None = None
    video: bool | None = None
    genre_ids: list[int] = Field(default_factory=list)
    backdrop_path: str | None = None
    poster_path: str | None = None
    popularity: float | None = None
    vote_average: float | None = None
    vote_count: int | None = None
    media_type: str | None = None


MovieResultsPage = ResultsPage[BaseMovie]


class ReleaseDate(TmdbModel):
    certification: str | None = None
    iso_639_1: str | None = None
    note: str | None = None
    release_date: datetime | None = None
    type: int | None = None


class CountryReleaseDates(TmdbModel):
    iso_3166_1: str | None = None
    release_dates: list[ReleaseDate] = Field(default_factory=list)


class ReleaseDates(TmdbModel):
    id: int | None = None
    results: list[CountryReleaseDates] = Field(default_factory=list)


class Movie(BaseMovie):
    """Full movie summary, optionally with appended sub-resources."""

    belongs_to_collection: BaseCollection | None = None
    budget: int | None = None
    genres: list[Genre] = Field(default_factory=list)
    homepage: str | None = None
    imdb_id: str | None = None
    production_companies: list[BaseCompany] = Field(default_factory=list)
    production_countries: list[ProductionCountry] = Field(default_factory=list)
    revenue: int | None = None
    runtime: int | None = None
    spoken_languages: list[SpokenLanguage] = Field(default_factory=list)
    status: str | None = None
    tagline: str | None = None

    # append_to_response
    alternative_titles: AlternativeTitles | None = None
    credits: Credits | None = None
    external_ids: ExternalIds | None = None
    images: Images | None = None
    keywords: Keywords | None = None
    recommendations: MovieResultsPage | None = None
    release_dates: ReleaseDates | None = None
    reviews: ReviewResultsPage | None = None
    similar: MovieResultsPage | None = None
    translations: Translations | None = None
    videos: Videos | None = None
