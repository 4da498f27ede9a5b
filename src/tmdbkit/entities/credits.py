"""Cast and crew credits."""

from __future__ import annotations

from pydantic import Field

from .base import TmdbDate, TmdbModel


class CastMember(TmdbModel):
    id: int
    name: str | None = None
    original_name: str | None = None
    character: str | None = None
    credit_id: str | None = None
    cast_id: int | None = None
    order: int | None = None
    gender: int | None = None
    adult: bool | None = None
    known_for_department: str | None = None
    popularity: float | None = None
    profile_path: str | None = None


class CrewMember(TmdbModel):
    id: int
    name: str | None = None
    original_name: str | None = None
    job: str | None = None
    department: str | None = None
    credit_id: str | None = None
    gender: int | None = None
    adult: bool | None = None
    known_for_department: str | None = None
    popularity: float | None = None
    profile_path: str | None = None


class Credits(TmdbModel):
    id: int | None = None
    cast: list[CastMember] = Field(default_factory=list)
    crew: list[CrewMember] = Field(default_factory=list)
    guest_stars: list[CastMember] = Field(default_factory=list)


class PersonCredit(TmdbModel):
    """A movie or TV credit as listed on a person."""

    id: int
    credit_id: str | None = None
    media_type: str | None = None
    title: str | None = None
    original_title: str | None = None
    name: str | None = None
    original_name: str | None = None
    character: str | None = None
    job: str | None = None
    department: str | None = None
    episode_count: int | None = None
    release_date: TmdbDate = None
    first_air_date: TmdbDate = None
    poster_path: str | None = None
    adult: bool | None = None


class PersonCredits(TmdbModel):
    id: int | None = None
    cast: list[PersonCredit] = Field(default_factory=list)
    crew: list[PersonCredit] = Field(default_factory=list)
