"""Small value objects shared by movies, TV shows and people."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from .base import ResultsPage, TmdbModel


class Genre(TmdbModel):
    id: int
    name: str | None = None


class Keyword(TmdbModel):
    id: int
    name: str | None = None


class Keywords(TmdbModel):
    # Movies return "keywords", TV shows return "results".
    id: int | None = None
    keywords: list[Keyword] = Field(default_factory=list)
    results: list[Keyword] = Field(default_factory=list)


class BaseCompany(TmdbModel):
    id: int
    name: str | None = None
    logo_path: str | None = None
    origin_country: str | None = None


class Network(BaseCompany):
    pass


class BaseCollection(TmdbModel):
    id: int
    name: str | None = None
    poster_path: str | None = None
    backdrop_path: str | None = None


class ProductionCountry(TmdbModel):
    iso_3166_1: str | None = None
    name: str | None = None


class SpokenLanguage(TmdbModel):
    iso_639_1: str | None = None
    name: str | None = None
    english_name: str | None = None


class Image(TmdbModel):
    file_path: str | None = None
    width: int | None = None
    height: int | None = None
    aspect_ratio: float | None = None
    iso_639_1: str | None = None
    vote_average: float | None = None
    vote_count: int | None = None


class Images(TmdbModel):
    id: int | None = None
    backdrops: list[Image] = Field(default_factory=list)
    logos: list[Image] = Field(default_factory=list)
    posters: list[Image] = Field(default_factory=list)
    profiles: list[Image] = Field(default_factory=list)
    stills: list[Image] = Field(default_factory=list)


class Video(TmdbModel):
    id: str | None = None
    iso_639_1: str | None = None
    iso_3166_1: str | None = None
    key: str | None = None
    name: str | None = None
    site: str | None = None
    size: int | None = None
    type: str | None = None
    official: bool | None = None
    published_at: datetime | None = None


class Videos(TmdbModel):
    id: int | None = None
    results: list[Video] = Field(default_factory=list)


class TranslationData(TmdbModel):
    title: str | None = None
    name: str | None = None
    overview: str | None = None
    homepage: str | None = None
    tagline: str | None = None
    biography: str | None = None


class Translation(TmdbModel):
    iso_639_1: str | None = None
    iso_3166_1: str | None = None
    name: str | None = None
    english_name: str | None = None
    data: TranslationData | None = None


class Translations(TmdbModel):
    id: int | None = None
    translations: list[Translation] = Field(default_factory=list)


class AlternativeTitle(TmdbModel):
    iso_3166_1: str | None = None
    title: str | None = None
    type: str | None = None


class AlternativeTitles(TmdbModel):
    # Movies return "titles", TV shows return "results".
    id: int | None = None
    titles: list[AlternativeTitle] = Field(default_factory=list)
    results: list[AlternativeTitle] = Field(default_factory=list)


class ExternalIds(TmdbModel):
    id: int | None = None
    imdb_id: str | None = None
    facebook_id: str | None = None
    freebase_id: str | None = None
    freebase_mid: str | None = None
    instagram_id: str | None = None
    tvdb_id: int | None = None
    tvrage_id: int | None = None
    twitter_id: str | None = None
    wikidata_id: str | None = None


class Review(TmdbModel):
    id: str
    author: str | None = None
    content: str | None = None
    url: str | None = None
    created_at: datetime | None = None


class ReviewResultsPage(ResultsPage[Review]):
    id: int | None = None


CompanyResultsPage = ResultsPage[BaseCompany]
CollectionResultsPage = ResultsPage[BaseCollection]
KeywordResultsPage = ResultsPage[Keyword]
