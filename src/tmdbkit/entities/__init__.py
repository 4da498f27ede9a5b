from .base import ResultsPage, Status, TmdbDate, TmdbModel
from .collections import Collection
from .common import (
    AlternativeTitle,
    AlternativeTitles,
    BaseCollection,
    BaseCompany,
    CollectionResultsPage,
    CompanyResultsPage,
    ExternalIds,
    Genre,
    Image,
    Images,
    Keyword,
    KeywordResultsPage,
    Keywords,
    Network,
    ProductionCountry,
    Review,
    ReviewResultsPage,
    SpokenLanguage,
    Translation,
    TranslationData,
    Translations,
    Video,
    Videos,
)
from .configuration import Configuration, ImagesConfiguration
from .credits import CastMember, Credits, CrewMember, PersonCredit, PersonCredits
from .enums import (
    AppendToResponse,
    AppendToResponseItem,
    ExternalSource,
    MediaType,
    SearchType,
    SortBy,
)
from .find import FindResults
from .movies import (
    BaseMovie,
    CountryReleaseDates,
    Movie,
    MovieResultsPage,
    ReleaseDate,
    ReleaseDates,
)
from .people import BasePerson, Media, MediaResultsPage, Person, PersonResultsPage
from .tv import (
    BaseTvSeason,
    BaseTvShow,
    Creator,
    TvEpisode,
    TvResultsPage,
    TvSeason,
    TvShow,
)

__all__ = [
    "AlternativeTitle",
    "AlternativeTitles",
    "AppendToResponse",
    "AppendToResponseItem",
    "BaseCollection",
    "BaseCompany",
    "BaseMovie",
    "BasePerson",
    "BaseTvSeason",
    "BaseTvShow",
    "CastMember",
    "Collection",
    "CollectionResultsPage",
    "CompanyResultsPage",
    "Configuration",
    "CountryReleaseDates",
    "Creator",
    "Credits",
    "CrewMember",
    "ExternalIds",
    "ExternalSource",
    "FindResults",
    "Genre",
    "Image",
    "Images",
    "ImagesConfiguration",
    "Keyword",
    "KeywordResultsPage",
    "Keywords",
    "Media",
    "MediaResultsPage",
    "MediaType",
    "Movie",
    "MovieResultsPage",
    "Network",
    "Person",
    "PersonCredit",
    "PersonCredits",
    "PersonResultsPage",
    "ProductionCountry",
    "ReleaseDate",
    "ReleaseDates",
    "ResultsPage",
    "Review",
    "ReviewResultsPage",
    "SearchType",
    "SortBy",
    "SpokenLanguage",
    "Status",
    "TmdbDate",
    "TmdbModel",
    "Translation",
    "TranslationData",
    "Translations",
    "TvEpisode",
    "TvResultsPage",
    "TvSeason",
    "TvShow",
    "Video",
    "Videos",
]
