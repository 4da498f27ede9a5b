"""Person response models."""

from __future__ import annotations

from pydantic import Field

from .base import ResultsPage, TmdbDate, TmdbModel
from .common import ExternalIds, Images
from .credits import PersonCredits


class Media(TmdbModel):
    """A movie, TV show or person in a mixed-type listing.

    Used for ``known_for`` entries and multi-search results; which fields
    are populated depends on ``media_type``.
    """

    id: int
    media_type: str | None = None
    adult: bool | None = None
    title: str | None = None
    original_title: str | None = None
    release_date: TmdbDate = None
    name: str | None = None
    original_name: str | None = None
    first_air_date: TmdbDate = None
    overview: str | None = None
    genre_ids: list[int] = Field(default_factory=list)
    backdrop_path: str | None = None
    poster_path: str | None = None
    profile_path: str | None = None
    known_for_department: str | None = None
    popularity: float | None = None
    vote_average: float | None = None
    vote_count: int | None = None


MediaResultsPage = ResultsPage[Media]


class BasePerson(TmdbModel):
    id: int
    name: str | None = None
    adult: bool | None = None
    gender: int | None = None
    known_for_department: str | None = None
    popularity: float | None = None
    profile_path: str | None = None
    known_for: list[Media] = Field(default_factory=list)


PersonResultsPage = ResultsPage[BasePerson]


class Person(BasePerson):
    also_known_as: list[str] = Field(default_factory=list)
    biography: str | None = None
    birthday: TmdbDate = None
    deathday: TmdbDate = None
    homepage: str | None = None
    imdb_id: str | None = None
    place_of_birth: str | None = None

    # append_to_response
    combined_credits: PersonCredits | None = None
    external_ids: ExternalIds | None = None
    images: Images | None = None
    movie_credits: PersonCredits | None = None
    tv_credits: PersonCredits | None = None
