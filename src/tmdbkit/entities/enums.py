"""Enumerations for well-known query parameter values."""

from __future__ import annotations

from enum import Enum


class AppendToResponseItem(str, Enum):
    ALTERNATIVE_TITLES = "alternative_titles"
    COMBINED_CREDITS = "combined_credits"
    CREDITS = "credits"
    EXTERNAL_IDS = "external_ids"
    IMAGES = "images"
    KEYWORDS = "keywords"
    MOVIE_CREDITS = "movie_credits"
    RECOMMENDATIONS = "recommendations"
    RELEASE_DATES = "release_dates"
    REVIEWS = "reviews"
    SIMILAR = "similar"
    TRANSLATIONS = "translations"
    TV_CREDITS = "tv_credits"
    VIDEOS = "videos"


class ExternalSource(str, Enum):
    """Id sources accepted by ``/find/{external_id}``."""

    IMDB_ID = "imdb_id"
    FACEBOOK_ID = "facebook_id"
    FREEBASE_MID = "freebase_mid"
    FREEBASE_ID = "freebase_id"
    INSTAGRAM_ID = "instagram_id"
    TVDB_ID = "tvdb_id"
    TVRAGE_ID = "tvrage_id"
    TWITTER_ID = "twitter_id"
    WIKIDATA_ID = "wikidata_id"


class MediaType(str, Enum):
    MOVIE = "movie"
    TV = "tv"
    PERSON = "person"


class SearchType(str, Enum):
    PHRASE = "phrase"
    NGRAM = "ngram"


class SortBy(str, Enum):
    """Sort orders for the discover endpoints."""

    POPULARITY_ASC = "popularity.asc"
    POPULARITY_DESC = "popularity.desc"
    RELEASE_DATE_ASC = "release_date.asc"
    RELEASE_DATE_DESC = "release_date.desc"
    PRIMARY_RELEASE_DATE_ASC = "primary_release_date.asc"
    PRIMARY_RELEASE_DATE_DESC = "primary_release_date.desc"
    FIRST_AIR_DATE_ASC = "first_air_date.asc"
    FIRST_AIR_DATE_DESC = "first_air_date.desc"
    REVENUE_ASC = "revenue.asc"
    REVENUE_DESC = "revenue.desc"
    ORIGINAL_TITLE_ASC = "original_title.asc"
    ORIGINAL_TITLE_DESC = "original_title.desc"
    VOTE_AVERAGE_ASC = "vote_average.asc"
    VOTE_AVERAGE_DESC = "vote_average.desc"
    VOTE_COUNT_ASC = "vote_count.asc"
    VOTE_COUNT_DESC = "vote_count.desc"


class AppendToResponse:
    """Value for the ``append_to_response`` query parameter.

    >>> str(AppendToResponse(AppendToResponseItem.CREDITS, "images"))
    'credits,images'
    """

    def __init__(self, *items: AppendToResponseItem | str) -> None:
        self.items = tuple(AppendToResponseItem(item) for item in items)

    def __str__(self) -> str:
        return ",".join(item.value for item in self.items)

    def __repr__(self) -> str:
        return f"AppendToResponse({str(self)!r})"

    def __bool__(self) -> bool:
        return bool(self.items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AppendToResponse):
            return NotImplemented
        return self.items == other.items

    def __hash__(self) -> int:
        return hash(self.items)
